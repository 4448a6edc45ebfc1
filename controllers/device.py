# controllers/device.py

from flask import jsonify, request, abort

from controllers.device_fields import (
    INVALID_FIELDS_ERROR, ValidationError, normalize_payload, validate_device_id
)
from controllers.device_repository import get_repository
from controllers.devices import add_device, edit_device, remove_device_by_id
from models.device_catalog import DEVICE_CATALOG
from models.device_record import DisplayState


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(INVALID_FIELDS_ERROR)
    return normalize_payload(data)


# ── LIST DEVICES FOR TABLE ───────────────────────────────────────────
def list_devices():
    rows = [r.to_dict() for r in get_repository().list_devices()]
    return jsonify(rows)


# ── GET A SINGLE DEVICE (for edit form) ─────────────────────────────
def get_device(dev_id):
    record = get_repository().get_device(validate_device_id(dev_id))
    if record is None:
        abort(404, "Device not found")
    return jsonify({
        **record.to_dict(),
        "display": DisplayState.from_record(record).to_dict(),
    })


# ── CREATE A NEW DEVICE ─────────────────────────────────────────────
def create_device():
    dev_id = add_device(get_repository(), _payload())
    return jsonify(ok=True, id=dev_id), 201


# ── UPDATE AN EXISTING DEVICE ──────────────────────────────────────
def update_device(dev_id):
    rows, fields = edit_device(get_repository(), _payload(), dev_id=validate_device_id(dev_id))
    return jsonify(ok=True, rows=rows, display=DisplayState.from_mapping(fields).to_dict())


# ── DELETE DEVICE (cascades to its DeviceName) ───────────────────────
def delete_device(dev_id):
    rows = remove_device_by_id(get_repository(), validate_device_id(dev_id))
    return jsonify(ok=True, rows=rows)


# ── HELPERS FOR SELECTS ─────────────────────────────────────────────
def list_catalog():
    return jsonify(DEVICE_CATALOG)
