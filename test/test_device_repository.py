import pytest
from sqlalchemy.exc import OperationalError

from controllers.device_repository import RepositoryError, SqlDeviceRepository
from controllers.devices import (
    add_device, applicable_fields_only, edit_device, remove_device_by_id
)
from controllers.device_fields import ValidationError
from models.device_name import DeviceName
from models.device_type import DeviceType

from conftest import device_form


def test_create_then_list_joined(repo):
    dev_id = add_device(repo, device_form())
    records = repo.list_devices()
    assert len(records) == 1
    rec = records[0]
    assert rec.id == dev_id
    assert rec.device_type == "Lamp"
    assert rec.custom_name == "lamp01"
    assert rec.on_off == 1


def test_absent_fields_round_trip_as_null(repo):
    dev_id = add_device(repo, device_form())
    listed = repo.list_devices()[0]
    fetched = repo.get_device(dev_id)
    for rec in (listed, fetched):
        assert rec.temperature is None
        assert rec.volume is None
        assert rec.batteries_included is None
        assert rec.open_closed is None


def test_get_unknown_device_is_none(repo):
    assert repo.get_device(42) is None


def test_list_includes_type_without_name(repo):
    with repo.transaction():
        dev_id = repo.create_device({"device_type": "Door", "open_closed": 1})
    rec = repo.get_device(dev_id)
    assert rec.custom_name is None
    assert rec.open_closed == 1


def test_delete_cascades_to_name(repo):
    dev_id = add_device(repo, device_form())
    assert remove_device_by_id(repo, dev_id) == 1
    assert repo.list_devices() == []
    assert DeviceName.query.count() == 0
    assert DeviceType.query.count() == 0


def test_database_level_cascade(repo, app):
    dev_id = add_device(repo, device_form())
    with repo.transaction():
        DeviceType.query.filter(DeviceType.id == dev_id).delete()
    assert DeviceName.query.count() == 0


def test_delete_unknown_device_reports_zero_rows(repo):
    add_device(repo, device_form())
    assert remove_device_by_id(repo, 7) == 0
    assert len(repo.list_devices()) == 1


def test_update_changes_both_rows(repo):
    dev_id = add_device(repo, device_form())
    rows, fields = edit_device(
        repo,
        device_form(custom_name="desk_lamp", on_off="0", device_type="Desk Lamp"),
        dev_id=dev_id,
    )
    assert rows == 1
    assert fields["id"] == dev_id
    rec = repo.get_device(dev_id)
    assert rec.custom_name == "desklamp"
    assert rec.device_type == "Desk Lamp"
    assert rec.on_off == 0


def test_update_out_of_range_leaves_record_unchanged(repo):
    dev_id = add_device(repo, device_form(volume="40"))
    with pytest.raises(ValidationError):
        edit_device(repo, device_form(volume="150"), dev_id=dev_id)
    assert repo.get_device(dev_id).volume == 40


def test_update_unknown_device_reports_zero_rows(repo):
    rows, _ = edit_device(repo, device_form(), dev_id=99)
    assert rows == 0


def test_rejected_create_writes_nothing(repo):
    with pytest.raises(ValidationError):
        add_device(repo, device_form(custom_name="ab"))
    assert repo.list_devices() == []


class _NameInsertFails(SqlDeviceRepository):
    def attach_name(self, custom_name, type_id):
        raise OperationalError("INSERT INTO devicenames", {}, Exception("disk full"))


def test_failed_second_insert_rolls_back_first(app):
    repo = _NameInsertFails()
    with pytest.raises(RepositoryError):
        add_device(repo, device_form())
    assert DeviceType.query.count() == 0
    assert repo.list_devices() == []


def test_catalog_kind_keeps_only_its_fields(repo):
    dev_id = add_device(repo, device_form(device_type="Thermostat", custom_name="hall_temp",
                                          temperature="21", volume="30"))
    rec = repo.get_device(dev_id)
    assert rec.on_off == 1
    assert rec.temperature == 21
    assert rec.volume is None


def test_applicable_fields_only_leaves_unknown_kinds_alone():
    typed = {"device_type": "Lamp", "custom_name": "lamp01", "on_off": 1,
             "temperature": 30, "volume": None, "batteries_included": None, "open_closed": 0}
    assert applicable_fields_only(typed) == typed
    door = applicable_fields_only(dict(typed, device_type="door"))
    assert door["open_closed"] == 0
    assert door["on_off"] is None
    assert door["temperature"] is None
    assert door["custom_name"] == "lamp01"
