# config_manager.py
from pathlib import Path
import json

from . import error as E

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"


# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "precision": 6,
    "debug": False,
    "darkmode": False,
    "after_paste_enter": False,
}

DEFAULT_DESCRIPTIONS = {
    "precision": "Significant digits",
    "debug": "Print parser diagnostics",
    "darkmode": "Dark mode",
    "after_paste_enter": "Run command after paste",
}


def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
        settings_dict = {}

    if not isinstance(settings_dict, dict):
        settings_dict = {}

    merged = dict(DEFAULT_SETTINGS)
    merged.update(settings_dict)

    if key_value == "all":
        return merged

    else:
        return merged.get(key_value, 0)


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding= 'utf-8') as f:
            description_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
        description_dict = {}

    if not isinstance(description_dict, dict):
        description_dict = {}

    merged = dict(DEFAULT_DESCRIPTIONS)
    merged.update(description_dict)

    if key_value == "all":
        return merged

    else:
        return merged.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open (config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (FileNotFoundError, PermissionError):
        return{}


def get_precision():
    """Significant digits used when printing numbers (validated)."""
    precision = load_setting_value("precision")
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
        raise E.ConfigurationError(f"Invalid precision setting: {precision}", code="5001")
    return precision


def is_debug():
    return load_setting_value("debug") == True
