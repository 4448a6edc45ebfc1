# models/__init__.py

from .device_type import DeviceType
from .device_name import DeviceName
from .device_record import DeviceRecord, DisplayState
from .device_catalog import DEVICE_CATALOG, device_catalog_for

# For Flask shell usage
__all__ = [
    "DeviceType",
    "DeviceName",
    "DeviceRecord",
    "DisplayState",
    "DEVICE_CATALOG",
    "device_catalog_for",
]
