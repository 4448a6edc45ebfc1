# controllers/device_repository.py
"""
Storage for device records.

Controllers never touch ``db.session`` directly; they go through a
repository object created once in ``create_app`` and stored on
``app.extensions``. Writes run inside ``repo.transaction()`` so that the
two rows making up a device are committed (or rolled back) together.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.device_type import DeviceType
from models.device_name import DeviceName
from models.device_record import DeviceRecord, OPTIONAL_FIELDS

EXTENSION_KEY = "device_repository"


class RepositoryError(Exception):
    """A storage operation failed. Never retried."""


# ─────────────────────────── Base API ────────────────────────────
class BaseDeviceRepository:
    """Abstract device store."""

    @contextmanager
    def transaction(self) -> Iterator["BaseDeviceRepository"]:
        yield self

    def create_device(self, type_fields: dict) -> int:
        """Insert the DeviceType row and return its id."""
        raise NotImplementedError

    def attach_name(self, custom_name: str, type_id: int) -> None:
        raise NotImplementedError

    def update_device(self, dev_id: int, type_fields: dict, custom_name: str) -> int:
        raise NotImplementedError

    def delete_device(self, dev_id: int) -> int:
        """Delete the DeviceType row; its DeviceName goes with it."""
        raise NotImplementedError

    def list_devices(self) -> List[DeviceRecord]:
        raise NotImplementedError

    def get_device(self, dev_id: int) -> Optional[DeviceRecord]:
        raise NotImplementedError


# ─────────────────────────── SQLAlchemy ──────────────────────────
class SqlDeviceRepository(BaseDeviceRepository):
    def __init__(self, database=None):
        self.db = database or db

    @property
    def session(self):
        return self.db.session

    @contextmanager
    def transaction(self):
        try:
            yield self
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            current_app.logger.error("Device transaction rolled back: %s", exc)
            raise RepositoryError(str(exc)) from exc
        except Exception:
            self.session.rollback()
            raise

    @contextmanager
    def _reading(self):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise RepositoryError(str(exc)) from exc

    # ── writes (call inside transaction()) ───────────────────────────
    def create_device(self, type_fields):
        dev = DeviceType(
            device_type=type_fields["device_type"],
            **{f: type_fields.get(f) for f in OPTIONAL_FIELDS}
        )
        self.session.add(dev)
        self.session.flush()  # so dev.id is set
        return dev.id

    def attach_name(self, custom_name, type_id):
        self.session.add(DeviceName(custom_name=custom_name, device_type_id=type_id))
        self.session.flush()

    def update_device(self, dev_id, type_fields, custom_name):
        values = {DeviceType.device_type: type_fields["device_type"]}
        for f in OPTIONAL_FIELDS:
            values[getattr(DeviceType, f)] = type_fields.get(f)

        rows = (
            DeviceType.query
            .filter(DeviceType.id == dev_id)
            .update(values, synchronize_session=False)
        )
        (
            DeviceName.query
            .filter(DeviceName.device_type_id == dev_id)
            .update({DeviceName.custom_name: custom_name}, synchronize_session=False)
        )
        self.session.flush()
        return rows

    def delete_device(self, dev_id):
        dev = self.session.get(DeviceType, dev_id)
        if dev is None:
            return 0
        self.session.delete(dev)  # cascades to DeviceName
        self.session.flush()
        return 1

    # ── reads ────────────────────────────────────────────────────────
    def _joined(self):
        return (
            self.session.query(DeviceType, DeviceName)
            .outerjoin(DeviceName, DeviceName.device_type_id == DeviceType.id)
            .execution_options(populate_existing=True)  # always the stored values
        )

    def list_devices(self):
        with self._reading():
            rows = self._joined().order_by(DeviceType.id).all()
        return [DeviceRecord.from_row(t, n) for t, n in rows]

    def get_device(self, dev_id):
        with self._reading():
            row = self._joined().filter(DeviceType.id == dev_id).first()
        if row is None:
            return None
        return DeviceRecord.from_row(*row)


def get_repository() -> BaseDeviceRepository:
    return current_app.extensions[EXTENSION_KEY]
