#!/usr/bin/env python3
"""
Dump the joined device table so you can see
 • every DeviceType row and its DeviceName (or the lack of one)
 • which optional fields are stored as NULL
 -------------------------------------------------------------------------
Run from the project root:

    python dev_scripts/db_introspect.py
"""

import sys
import os

# Add the project directory to the system path to ensure app can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app        # uses your existing config
from controllers.device_repository import get_repository
from models.device_record import DisplayState, OPTIONAL_FIELDS

app = create_app()
with app.app_context():
    records = get_repository().list_devices()
    print(f"\n=== Devices ({len(records)}) ===")
    for rec in records:
        name = rec.custom_name if rec.custom_name is not None else "⚠ no name row"
        print(f"[{rec.id:3}] {name!r}  ({rec.device_type})")
        values = ", ".join(
            f"{f}={getattr(rec, f)}" for f in OPTIONAL_FIELDS if getattr(rec, f) is not None
        )
        print(f"      fields: {values or '—'}")
        state = DisplayState.from_record(rec)
        flags = [k for k, v in state.to_dict().items() if v]
        print(f"      display: {', '.join(flags) or '—'}")

    print("\nDone ✔︎")
