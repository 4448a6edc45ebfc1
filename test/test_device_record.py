from models.device_catalog import device_catalog_for
from models.device_record import DeviceRecord, DisplayState


def test_display_state_all_absent():
    state = DisplayState.from_record(DeviceRecord(id=1, device_type="Lamp", custom_name="lamp01"))
    assert state == DisplayState()


def test_display_state_flags():
    record = DeviceRecord(id=2, device_type="Garage Door", custom_name="garage01",
                          on_off=1, open_closed=0, batteries_included=1)
    state = DisplayState.from_record(record)
    assert state.has_on_off and state.is_on
    assert state.has_open_closed and not state.is_open
    assert state.has_batteries and state.has_batteries_state
    assert not state.has_temperature
    assert not state.has_volume


def test_display_state_zero_is_applicable_but_false():
    state = DisplayState.from_values(on_off=0, volume=0)
    assert state.has_on_off is True
    assert state.is_on is False
    assert state.has_volume is True


def test_display_state_from_mapping_ignores_other_keys():
    state = DisplayState.from_mapping({"id": 3, "custom_name": "x", "temperature": 20})
    assert state.has_temperature
    assert not state.has_on_off


def test_catalog_lookup_is_case_insensitive():
    assert device_catalog_for("thermostat")["fields"] == ["on_off", "temperature"]
    assert device_catalog_for("toaster") is None
    assert device_catalog_for(None) is None
