# routes/api.py

from flask import Blueprint, jsonify, request, current_app
from werkzeug.exceptions import NotFound

from controllers.device import (
    list_devices,
    get_device,
    create_device,
    update_device,
    delete_device,
    list_catalog,
)
from controllers.device_fields import ValidationError
from controllers.device_repository import RepositoryError

api_bp = Blueprint("api", __name__, url_prefix="/api")

# ── ERRORS ────────────────────────────────────────────────────────────
@api_bp.errorhandler(ValidationError)
def validation_failed(exc):
    return jsonify(error=exc.reason), exc.status_code

@api_bp.errorhandler(RepositoryError)
def storage_failed(exc):
    current_app.logger.exception("Device storage error")
    return jsonify(error="Device storage operation failed"), 500

@api_bp.errorhandler(NotFound)
def not_found(exc):
    return jsonify(error=exc.description), 404

# ── TABLE DATA ────────────────────────────────────────────────────────
@api_bp.route("/devices", methods=["GET"])
def devices_data():
    return list_devices()

# ── SINGLE DEVICE CRUD ────────────────────────────────────────────────
@api_bp.route("/devices/<int:dev_id>", methods=["GET", "PUT", "DELETE"])
def device_item(dev_id):
    if request.method == "GET":
        return get_device(dev_id)
    if request.method == "PUT":
        return update_device(dev_id)
    return delete_device(dev_id)

# ── CREATE DEVICE ─────────────────────────────────────────────────────
@api_bp.route("/devices", methods=["POST"])
def add_device():
    return create_device()

# ── DEVICE CATALOG LOOKUP ─────────────────────────────────────────────
@api_bp.route("/devices/catalog")
def device_catalog():
    return list_catalog()
