#!/usr/bin/env python3
"""
Seed one demo device per catalog entry.
Run once (or repeatedly) after the tables exist; names already present
are skipped.
"""
import sys
from pathlib import Path

# Add project root to import path
top = Path(__file__).resolve().parents[1].as_posix()
if top not in sys.path:
    sys.path.insert(0, top)

from controllers.device_repository import BaseDeviceRepository
from controllers.devices import add_device
from models.device_catalog import DEVICE_CATALOG

# Starting value for each applicable field
DEFAULT_VALUES = {
    "on_off":             "1",
    "temperature":        "21",
    "volume":             "30",
    "batteries_included": "1",
    "open_closed":        "0",
}


def demo_name(entry) -> str:
    return entry["name"].replace(" ", "").lower() + "01"


def seed_devices(repo: BaseDeviceRepository) -> list:
    """Add the demo devices through the normal create flow; returns new ids."""
    existing = {r.custom_name for r in repo.list_devices()}
    created = []
    for entry in DEVICE_CATALOG:
        name = demo_name(entry)
        if name in existing:
            continue
        fields = {"device_type": entry["name"], "custom_name": name}
        fields.update({f: DEFAULT_VALUES[f] for f in entry["fields"]})
        created.append(add_device(repo, fields))
    return created


def seed():
    from app import create_app
    from controllers.device_repository import get_repository

    app = create_app()
    with app.app_context():
        ids = seed_devices(get_repository())
        print(f"🎉 Seeded {len(ids)} demo device(s).")


if __name__ == "__main__":
    seed()
