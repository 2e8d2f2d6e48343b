"""
staffsite/core/paths.py — where the site keeps its files

DATA_DIR holds the mutable JSON stores (employees.json,
contact_messages.json) and logs/. Resolution order:

    STAFFSITE_DATA_DIR  →  Railway volume (<mount>/data)  →  ./data

Read-only inputs (employees_seed.json, staffsite_config.json) live at the
project root next to app.py.
"""

import os
import logging

log = logging.getLogger("staffsite.paths")

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
BUNDLED_DATA_DIR = os.path.join(PROJECT_ROOT, "data")


def resolve_data_dir(environ=None) -> str:
    environ = os.environ if environ is None else environ
    explicit = environ.get("STAFFSITE_DATA_DIR", "")
    if explicit:
        return explicit
    mount = environ.get("RAILWAY_VOLUME_MOUNT_PATH", "").rstrip("/")
    if mount and os.path.isdir(mount):
        return mount if os.path.basename(mount) == "data" else os.path.join(mount, "data")
    return BUNDLED_DATA_DIR


DATA_DIR = resolve_data_dir()
LOG_DIR = os.path.join(DATA_DIR, "logs")
EMPLOYEES_SEED_PATH = os.path.join(PROJECT_ROOT, "employees_seed.json")
CONFIG_PATH = os.environ.get("STAFFSITE_CONFIG",
                             os.path.join(PROJECT_ROOT, "staffsite_config.json"))


def employees_path(data_dir: str = None) -> str:
    return os.path.join(data_dir or DATA_DIR, "employees.json")


def contact_messages_path(data_dir: str = None) -> str:
    return os.path.join(data_dir or DATA_DIR, "contact_messages.json")


def ensure_dirs(data_dir: str = None):
    os.makedirs(data_dir or DATA_DIR, exist_ok=True)


def _writable(directory: str):
    """None if a file can be created in directory, else the OSError text."""
    marker = os.path.join(directory, ".staffsite-marker")
    try:
        with open(marker, "w") as f:
            f.write("")
        os.remove(marker)
    except OSError as e:
        return str(e)
    return None


def validate_paths(data_dir: str = None) -> dict:
    """Check the resolved locations before serving traffic.

    Returns:
        {"ok": bool, "errors": [str], "warnings": [str], "resolved": {name: path}}
    """
    data_dir = data_dir or DATA_DIR
    resolved = {
        "PROJECT_ROOT": PROJECT_ROOT,
        "DATA_DIR": data_dir,
        "EMPLOYEES_SEED_PATH": EMPLOYEES_SEED_PATH,
        "CONFIG_PATH": CONFIG_PATH,
    }
    errors, warnings = [], []

    for name in ("PROJECT_ROOT", "DATA_DIR"):
        if not os.path.isdir(resolved[name]):
            errors.append(f"{name} missing: {resolved[name]}")
    if not os.path.isfile(EMPLOYEES_SEED_PATH):
        warnings.append(f"No employee seed at {EMPLOYEES_SEED_PATH}; an empty directory cannot self-populate")

    if os.path.isdir(data_dir):
        problem = _writable(data_dir)
        if problem:
            errors.append(f"DATA_DIR not writable: {problem}")

    on_volume = os.path.abspath(data_dir) != os.path.abspath(BUNDLED_DATA_DIR)
    resolved["USING_VOLUME"] = str(on_volume)
    if os.environ.get("RAILWAY_ENVIRONMENT") and not on_volume:
        warnings.append("Railway deploy is writing to the image's data/ directory, not a "
                        "persistent volume; contact submissions will not survive a redeploy")

    return {"ok": not errors, "errors": errors, "warnings": warnings, "resolved": resolved}
