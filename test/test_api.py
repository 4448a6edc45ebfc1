def _create(client, **payload):
    body = {"deviceTypeName": "Lamp", "customName": "lamp_01", "onOff": "1"}
    body.update(payload)
    return client.post("/api/devices", json=body)


def test_create_lamp_and_list(client):
    resp = _create(client)
    assert resp.status_code == 201
    dev_id = resp.get_json()["id"]

    rows = client.get("/api/devices").get_json()
    assert len(rows) == 1
    assert rows[0]["id"] == dev_id
    assert rows[0]["temperature"] is None

    item = client.get(f"/api/devices/{dev_id}").get_json()
    assert item["display"]["has_on_off"] is True
    assert item["display"]["is_on"] is True
    assert item["display"]["has_volume"] is False


def test_create_rejects_short_name(client):
    resp = _create(client, customName="ab")
    assert resp.status_code == 400
    assert "Custom name" in resp.get_json()["error"]
    assert client.get("/api/devices").get_json() == []


def test_numeric_json_values_accepted(client):
    resp = _create(client, deviceTypeName="Speaker", customName="speaker_01", onOff=0, volume=100)
    assert resp.status_code == 201


def test_update_and_reject_out_of_range(client):
    dev_id = _create(client, volume="10").get_json()["id"]

    bad = client.put(f"/api/devices/{dev_id}", json={
        "deviceTypeName": "Lamp", "customName": "lamp01", "onOff": "1", "volume": "150",
    })
    assert bad.status_code == 400
    assert client.get(f"/api/devices/{dev_id}").get_json()["volume"] == 10

    ok = client.put(f"/api/devices/{dev_id}", json={
        "deviceTypeName": "Lamp", "customName": "lamp01", "onOff": "1", "volume": "55",
    })
    assert ok.status_code == 200
    assert ok.get_json()["rows"] == 1
    assert ok.get_json()["display"]["has_volume"] is True


def test_delete_cascades_and_unknown_is_zero(client):
    dev_id = _create(client).get_json()["id"]
    assert client.delete("/api/devices/7").get_json() == {"ok": True, "rows": 0}
    assert client.delete(f"/api/devices/{dev_id}").get_json() == {"ok": True, "rows": 1}
    assert client.get("/api/devices").get_json() == []


def test_unknown_device_is_404(client):
    resp = client.get("/api/devices/123")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Device not found"


def test_catalog(client):
    names = [entry["name"] for entry in client.get("/api/devices/catalog").get_json()]
    assert "Thermostat" in names


def test_huge_volume_rejected(client):
    resp = _create(client, volume="9" * 5000)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert client.get("/api/devices").get_json() == []


def test_non_object_body_rejected(client):
    resp = client.post("/api/devices", json=["Lamp", "lamp_01"])
    assert resp.status_code == 400
    assert "error" in resp.get_json()

    dev_id = _create(client).get_json()["id"]
    resp = client.put(f"/api/devices/{dev_id}", json="lamp_02")
    assert resp.status_code == 400
    assert client.get(f"/api/devices/{dev_id}").get_json()["custom_name"] == "lamp01"


def test_light_drops_fields_it_does_not_have(client):
    dev_id = _create(client, deviceTypeName="Light", customName="hall_light",
                     temperature="200", volume="80").get_json()["id"]
    item = client.get(f"/api/devices/{dev_id}").get_json()
    assert item["on_off"] == 1
    assert item["temperature"] is None
    assert item["volume"] is None
    assert item["display"]["has_volume"] is False
