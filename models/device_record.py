# models/device_record.py

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional

# Optional status columns, in storage order
OPTIONAL_FIELDS = ("on_off", "temperature", "volume", "batteries_included", "open_closed")


@dataclass(frozen=True)
class DeviceRecord:
    """One DeviceType row outer-joined with its DeviceName row."""

    id: int
    device_type: str
    custom_name: Optional[str] = None
    on_off: Optional[int] = None
    temperature: Optional[int] = None
    volume: Optional[int] = None
    batteries_included: Optional[int] = None
    open_closed: Optional[int] = None

    @classmethod
    def from_row(cls, device_type, device_name=None) -> "DeviceRecord":
        return cls(
            id=device_type.id,
            device_type=device_type.device_type,
            custom_name=device_name.custom_name if device_name else None,
            on_off=device_type.on_off,
            temperature=device_type.temperature,
            volume=device_type.volume,
            batteries_included=device_type.batteries_included,
            open_closed=device_type.open_closed,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DisplayState:
    """
    Which optional fields apply to a device, and the boolean states of the
    flag fields. Recomputed on every read, never stored.
    """

    has_on_off: bool = False
    has_temperature: bool = False
    has_volume: bool = False
    has_batteries: bool = False
    has_open_closed: bool = False
    is_on: bool = False
    is_open: bool = False
    has_batteries_state: bool = False

    @classmethod
    def from_values(cls, on_off=None, temperature=None, volume=None,
                    batteries_included=None, open_closed=None) -> "DisplayState":
        has_on_off = on_off is not None
        has_batteries = batteries_included is not None
        has_open_closed = open_closed is not None
        return cls(
            has_on_off=has_on_off,
            has_temperature=temperature is not None,
            has_volume=volume is not None,
            has_batteries=has_batteries,
            has_open_closed=has_open_closed,
            is_on=has_on_off and int(on_off) == 1,
            is_open=has_open_closed and int(open_closed) == 1,
            has_batteries_state=has_batteries and int(batteries_included) == 1,
        )

    @classmethod
    def from_record(cls, record: DeviceRecord) -> "DisplayState":
        return cls.from_values(**{f: getattr(record, f) for f in OPTIONAL_FIELDS})

    @classmethod
    def from_mapping(cls, values) -> "DisplayState":
        return cls.from_values(**{f: values.get(f) for f in OPTIONAL_FIELDS})

    def to_dict(self) -> dict:
        return asdict(self)
