# controllers/devices.py

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from flask import current_app

from controllers.device_fields import (
    ValidationError,
    clean_fields,
    parse_device_form,
    validate_device_id,
)
from controllers.device_repository import BaseDeviceRepository
from models.device_catalog import device_catalog_for
from models.device_record import DeviceRecord, OPTIONAL_FIELDS


class MissingDeviceId(Exception):
    """A per-device form arrived without any device id."""


def applicable_fields_only(fields: dict) -> dict:
    """
    Null the optional fields a catalog device kind does not have.
    Device types outside the catalog keep every field.
    """
    entry = device_catalog_for(fields.get("device_type"))
    if entry is None:
        return fields
    return {
        key: (None if key in OPTIONAL_FIELDS and key not in entry["fields"] else value)
        for key, value in fields.items()
    }


def _validated(raw: Mapping) -> dict:
    try:
        return applicable_fields_only(clean_fields(raw))
    except ValidationError as exc:
        current_app.logger.warning("Rejected device fields: %s", exc.reason)
        raise


def _form_id_and_fields(raw: Mapping) -> Tuple[int, dict]:
    form = parse_device_form(raw)
    if form.id is None:
        raise MissingDeviceId()
    fields = _validated(form.as_fields())
    try:
        dev_id = validate_device_id(form.id)
    except ValidationError as exc:
        current_app.logger.warning("Rejected device id %r: %s", form.id, exc.reason)
        raise
    return dev_id, fields


# ── CREATE ──────────────────────────────────────────────────────────
def add_device(repo: BaseDeviceRepository, raw: Mapping) -> int:
    fields = _validated(raw)
    with repo.transaction():
        dev_id = repo.create_device(fields)
        repo.attach_name(fields["custom_name"], dev_id)
    current_app.logger.info("Device created id=%s name=%s", dev_id, fields["custom_name"])
    return dev_id


# ── UPDATE ──────────────────────────────────────────────────────────
def edit_device(repo: BaseDeviceRepository, raw: Mapping,
                dev_id: Optional[int] = None) -> Tuple[int, dict]:
    """
    Update both rows of a device. The id comes from ``dev_id`` when given
    (JSON API), otherwise from the form. Returns (rows, typed fields).
    """
    if dev_id is None:
        dev_id, fields = _form_id_and_fields(raw)
    else:
        fields = _validated(raw)

    with repo.transaction():
        rows = repo.update_device(dev_id, fields, fields["custom_name"])
    current_app.logger.info("Device updated id=%s rows=%s", dev_id, rows)
    return rows, dict(fields, id=dev_id)


# ── DELETE ──────────────────────────────────────────────────────────
def remove_device(repo: BaseDeviceRepository, raw: Mapping) -> int:
    dev_id, _ = _form_id_and_fields(raw)
    return remove_device_by_id(repo, dev_id)


def remove_device_by_id(repo: BaseDeviceRepository, dev_id: int) -> int:
    with repo.transaction():
        rows = repo.delete_device(dev_id)
    current_app.logger.info("Device deleted id=%s rows=%s", dev_id, rows)
    return rows


# ── RETRIEVE ────────────────────────────────────────────────────────
def retrieve_device(repo: BaseDeviceRepository, raw_id) -> Optional[DeviceRecord]:
    return repo.get_device(validate_device_id(raw_id))


def device_from_form(repo: BaseDeviceRepository, raw: Mapping) -> Optional[DeviceRecord]:
    """Re-validate an echoed device form, then load the stored record."""
    dev_id, _ = _form_id_and_fields(raw)
    return repo.get_device(dev_id)
