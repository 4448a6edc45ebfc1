# routes/devices.py
# ════════════════════════════════════════════════════════════════════════════
#  Device management pages
#  --------------------------------------------------------------------------
#  ▸ GET  /addadevice              – add form with the device catalog
#  ▸ POST /add-result              – create DeviceType + DeviceName
#  ▸ GET  /dashboard               – every device, joined
#  ▸ POST /confirm-delete          – confirmation page for one device
#  ▸ POST /delete-result           – cascade delete + refreshed list
#  ▸ GET  /display-status          – one device + which fields apply
#  ▸ POST /retrieve-update-record  – edit form for one device
#  ▸ POST /update-result           – update both rows + refreshed list
# ════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

from flask import (
    Blueprint, render_template, request, redirect, url_for, flash,
    jsonify, current_app
)
from flask_babel import gettext as _

from controllers.device_fields import ValidationError, parse_device_form
from controllers.device_repository import RepositoryError, get_repository
from controllers.devices import (
    MissingDeviceId, add_device, edit_device, remove_device,
    retrieve_device, device_from_form
)
from models.device_catalog import DEVICE_CATALOG
from models.device_record import DisplayState, OPTIONAL_FIELDS

devices_bp = Blueprint("devices", __name__)


@devices_bp.errorhandler(ValidationError)
def validation_failed(exc: ValidationError):
    return jsonify(error=exc.reason), exc.status_code


@devices_bp.errorhandler(MissingDeviceId)
def missing_device_id(exc: MissingDeviceId):
    return redirect(url_for("home.index"))


def _storage_failed(what: str, endpoint: str, **values):
    current_app.logger.exception("Device storage error during %s", what)
    flash(_("The device database could not complete the request."), "error")
    return redirect(url_for(endpoint, **values))


def _not_found():
    flash(_("That device no longer exists."), "warning")
    return redirect(url_for("devices.dashboard"))


# ────────────────────────────────────────────────────────────────────
#  CREATE
# ────────────────────────────────────────────────────────────────────
@devices_bp.route("/addadevice")
def add_page():
    return render_template("devices/add.hbs", catalog=DEVICE_CATALOG)


@devices_bp.route("/add-result", methods=["POST"])
def add_result():
    try:
        dev_id = add_device(get_repository(), request.form)
    except RepositoryError:
        return _storage_failed("create", "devices.add_page")
    return render_template("devices/add_result.hbs", device_id=dev_id)


# ────────────────────────────────────────────────────────────────────
#  LIST
# ────────────────────────────────────────────────────────────────────
@devices_bp.route("/dashboard")
def dashboard():
    try:
        devices = get_repository().list_devices()
    except RepositoryError:
        return _storage_failed("list", "home.index")
    return render_template("devices/dashboard.hbs", devices=devices)


# ────────────────────────────────────────────────────────────────────
#  DELETE
# ────────────────────────────────────────────────────────────────────
@devices_bp.route("/confirm-delete", methods=["POST"])
def confirm_delete():
    repo = get_repository()
    try:
        record = device_from_form(repo, request.form)
        devices = repo.list_devices()
    except RepositoryError:
        return _storage_failed("confirm-delete", "home.index")
    if record is None:
        return _not_found()
    return render_template("devices/confirm_delete.hbs", device=record, devices=devices)


@devices_bp.route("/delete-result", methods=["POST"])
def delete_result():
    repo = get_repository()
    try:
        rows = remove_device(repo, request.form)
        devices = repo.list_devices()
    except RepositoryError:
        return _storage_failed("delete", "home.index")
    return render_template("devices/delete_result.hbs", rows=rows, devices=devices)


# ────────────────────────────────────────────────────────────────────
#  STATUS / UPDATE
# ────────────────────────────────────────────────────────────────────
@devices_bp.route("/display-status")
def display_status():
    raw_id = request.args.get("deviceTypeID")
    if raw_id is None:
        return redirect(url_for("home.index"))

    repo = get_repository()
    try:
        record = retrieve_device(repo, raw_id)
        devices = repo.list_devices()
    except RepositoryError:
        return _storage_failed("display-status", "home.index")
    if record is None:
        return _not_found()
    return render_template(
        "devices/status.hbs",
        device=record,
        state=DisplayState.from_record(record),
        devices=devices,
    )


@devices_bp.route("/retrieve-update-record", methods=["POST"])
def retrieve_update_record():
    repo = get_repository()
    try:
        record = device_from_form(repo, request.form)
        devices = repo.list_devices()
    except RepositoryError:
        return _storage_failed("retrieve-update-record", "home.index")
    if record is None:
        return _not_found()
    return render_template(
        "devices/update.hbs",
        device=record,
        state=DisplayState.from_record(record),
        devices=devices,
        applicable=[f for f in OPTIONAL_FIELDS if getattr(record, f) is not None],
    )


@devices_bp.route("/update-result", methods=["POST"])
def update_result():
    repo = get_repository()
    try:
        rows, fields = edit_device(repo, request.form)
    except RepositoryError:
        dev_id = parse_device_form(request.form).id
        return _storage_failed("update", "devices.display_status", deviceTypeID=dev_id)
    try:
        devices = repo.list_devices()
    except RepositoryError:
        return _storage_failed("list", "home.index")
    return render_template(
        "devices/update_result.hbs",
        device=fields,
        rows=rows,
        state=DisplayState.from_mapping(fields),
        devices=devices,
    )
