# models/device_catalog.py

# Predefined device kinds offered on the "Add a Device" page.
# Each entry lists the optional fields that apply to it; every other
# optional field is stored as NULL for that kind.

DEVICE_CATALOG = [
    {"name": "Light",          "label": "💡 Light",          "fields": ["on_off"]},
    {"name": "Thermostat",     "label": "🌡️ Thermostat",     "fields": ["on_off", "temperature"]},
    {"name": "Oven",           "label": "🔥 Oven",           "fields": ["on_off", "temperature"]},
    {"name": "Speaker",        "label": "🔊 Speaker",        "fields": ["on_off", "volume"]},
    {"name": "Television",     "label": "📺 Television",     "fields": ["on_off", "volume"]},
    {"name": "Smoke Alarm",    "label": "🚨 Smoke Alarm",    "fields": ["batteries_included"]},
    {"name": "Remote Control", "label": "🎛️ Remote Control", "fields": ["batteries_included"]},
    {"name": "Door",           "label": "🚪 Door",           "fields": ["open_closed"]},
    {"name": "Window",         "label": "🪟 Window",         "fields": ["open_closed"]},
    {"name": "Garage Door",    "label": "🚗 Garage Door",    "fields": ["on_off", "open_closed"]},
]


def device_catalog_for(name):
    """Case-insensitive lookup of a catalog entry by device type name."""
    if not name:
        return None
    wanted = name.strip().lower()
    for entry in DEVICE_CATALOG:
        if entry["name"].lower() == wanted:
            return entry
    return None
