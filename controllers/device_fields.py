# controllers/device_fields.py
"""
Sanitization and validation of device form fields.

Every route that accepts device fields runs them through the same two
steps before anything reaches the repository:

    raw form → sanitize_fields() → validate_fields() → typed values

Sanitization only removes characters; validation decides. A rejected
record raises ``ValidationError`` and nothing is written.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields as dc_fields
from typing import Mapping, Optional

REQUIRED_FIELDS = ("device_type", "custom_name")
OPTIONAL_FIELDS = ("on_off", "temperature", "volume", "batteries_included", "open_closed")

# Inclusive ranges for the optional numeric fields
FIELD_RANGES = {
    "on_off":             (0, 1),
    "batteries_included": (0, 1),
    "open_closed":        (0, 1),
    "volume":             (0, 100),
    "temperature":        (1, 220),
}

CUSTOM_NAME_MIN = 5
CUSTOM_NAME_MAX = 16

CUSTOM_NAME_ERROR = "Custom name does not fit schema or required length"
INVALID_FIELDS_ERROR = ("The data fields are invalid or the custom name does not "
                        "fit the required schema.")

_DISALLOWED = re.compile(r"[^A-Za-z0-9 ]")
_CUSTOM_NAME = re.compile(r"[A-Za-z0-9_]+")
_INTEGER = re.compile(r"[0-9]{1,9}")  # bounded so int() never sees huge strings

# camelCase payload keys accepted by the JSON API
FIELD_ALIASES = {
    "deviceTypeName":    "device_type",
    "deviceType":        "device_type",
    "customName":        "custom_name",
    "onOff":             "on_off",
    "temperature":       "temperature",
    "volume":            "volume",
    "batteriesIncluded": "batteries_included",
    "openClosed":        "open_closed",
    "id":                "device_type_ID",
}


class ValidationError(Exception):
    """Malformed or out-of-range input; answered with a 400-class response."""

    def __init__(self, reason: str, status_code: int = 400):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


# ────────────────────────────────────────────────────────────────────
#  Sanitizer
# ────────────────────────────────────────────────────────────────────
def _strip_disallowed(value) -> str:
    return _DISALLOWED.sub("", str(value))


def sanitize_fields(raw: Mapping) -> dict:
    """
    Return a copy of ``raw`` with disallowed characters removed.

    Required fields never become absent (missing → ""). Optional fields
    that are missing, empty, or empty once stripped become None, so that
    sanitizing twice gives the same result. Keys this module does not know
    about are passed through unchanged.
    """
    clean = {key: raw.get(key) for key in raw}  # first value of a MultiDict
    for name in REQUIRED_FIELDS:
        value = raw.get(name)
        clean[name] = "" if value is None else _strip_disallowed(value)
    for name in OPTIONAL_FIELDS:
        value = raw.get(name)
        if value is None or value == "":
            clean[name] = None
        else:
            clean[name] = _strip_disallowed(value) or None
    return clean


# ────────────────────────────────────────────────────────────────────
#  Validator
# ────────────────────────────────────────────────────────────────────
def _parse_in_range(name: str, value: str) -> int:
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise ValidationError(INVALID_FIELDS_ERROR)
    number = int(text)
    low, high = FIELD_RANGES[name]
    if not low <= number <= high:
        raise ValidationError(INVALID_FIELDS_ERROR)
    return number


def validate_custom_name(custom_name: Optional[str]) -> str:
    if (
        not custom_name
        or not _CUSTOM_NAME.fullmatch(custom_name)
        or not CUSTOM_NAME_MIN <= len(custom_name) <= CUSTOM_NAME_MAX
    ):
        raise ValidationError(CUSTOM_NAME_ERROR)
    return custom_name


def validate_fields(fields: Mapping) -> dict:
    """
    Check a sanitized mapping and return the typed values.

    Optional fields come back as ``int`` or ``None``. The first bad field
    rejects the whole record.
    """
    custom_name = validate_custom_name(fields.get("custom_name"))

    device_type = (fields.get("device_type") or "").strip()
    if not device_type:
        raise ValidationError(INVALID_FIELDS_ERROR)

    typed = {"device_type": device_type, "custom_name": custom_name}
    for name in OPTIONAL_FIELDS:
        value = fields.get(name)
        typed[name] = None if value is None else _parse_in_range(name, str(value))
    return typed


def validate_device_id(value) -> int:
    text = "" if value is None else str(value).strip()
    if not _INTEGER.fullmatch(text) or int(text) < 1:
        raise ValidationError("Invalid device id")
    return int(text)


def clean_fields(raw: Mapping) -> dict:
    """Sanitize then validate."""
    return validate_fields(sanitize_fields(raw))


# ────────────────────────────────────────────────────────────────────
#  Structured device form
# ────────────────────────────────────────────────────────────────────
@dataclass
class DeviceForm:
    """The eight fields echoed back by the dashboard's per-device forms."""

    id: Optional[str] = None
    custom_name: Optional[str] = None
    device_type: Optional[str] = None
    on_off: Optional[str] = None
    batteries_included: Optional[str] = None
    open_closed: Optional[str] = None
    volume: Optional[str] = None
    temperature: Optional[str] = None

    def as_fields(self) -> dict:
        return {f.name: getattr(self, f.name) for f in dc_fields(self) if f.name != "id"}


# Order of the legacy comma-joined "device_type_ID" value
_POSITIONAL = [f.name for f in dc_fields(DeviceForm)]


def parse_device_form(form: Mapping) -> DeviceForm:
    """
    Build a DeviceForm from discrete form fields, or from the older
    single comma-joined ``device_type_ID`` value.
    """
    joined = form.get("device_type_ID")
    if joined is not None and "," in str(joined):
        parts = str(joined).split(",")
        parts += [""] * (len(_POSITIONAL) - len(parts))
        return DeviceForm(**dict(zip(_POSITIONAL, parts)))

    return DeviceForm(
        id=joined,
        **{name: form.get(name) for name in _POSITIONAL if name != "id"}
    )


def normalize_payload(data: Mapping) -> dict:
    """Map camelCase JSON keys onto the form field names."""
    out = {}
    for key, value in data.items():
        out[FIELD_ALIASES.get(key, key)] = value
    return out
