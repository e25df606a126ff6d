# storage.py
"""
Filesystem layout and persistence helpers.

All data for the application lives under DATA_ROOT (default /data).
"""

import os
from pathlib import Path
import json
from typing import Any

import logging
logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Root & directory layout (configurable)
# -------------------------------------------------------------------

DATA_ROOT: Path = Path(os.getenv("NOTESHARE_DATA_ROOT", "/data"))

SETTINGS_FILE = DATA_ROOT / 'settings.json'


class StorageError(Exception):
    """
    Raised when the settings record cannot be written.
    """


# -------------------------------------------------------------------
# JSON helpers
# -------------------------------------------------------------------
def load_json(path: Path, default: Any):
    if not path.exists():
        logger.warning(f"No JSON file found at {path}")
        return default
    try:
        return json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f"Load JSON file failed at {path}")
        return default


def save_json(path: Path, data: Any) -> None:
    try:
        text = json.dumps(data, indent=2, sort_keys=True)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except (OSError, TypeError, ValueError) as err:
        logger.error(f"Saving JSON file failed at {path}: {err}")
        raise StorageError(f'Unable to save "{path}": {err}') from err
