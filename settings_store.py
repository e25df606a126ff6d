# settings_store.py
"""
In-memory settings record and its persistence.

UI code should NEVER write settings.json directly, it goes through
SettingsStore.persist().
"""

import dataclasses
from pathlib import Path
from typing import Optional

from settings import ShareSettings
from storage import SETTINGS_FILE, load_json, save_json

import logging
logger = logging.getLogger(__name__)

_FIELD_NAMES = {f.name for f in dataclasses.fields(ShareSettings)}


class SettingsStore:
    def __init__(self, path: Path = SETTINGS_FILE, settings: Optional[ShareSettings] = None):
        self.path = path
        self._settings = settings if settings is not None else ShareSettings()

    @classmethod
    def load(cls, path: Path = SETTINGS_FILE) -> 'SettingsStore':
        """
        Build a store from the persisted record merged over the defaults.
        """
        raw = load_json(path, {})
        logger.info(f"Settings loaded from {path}")
        return cls(path, ShareSettings.from_dict(raw))

    def get(self) -> ShareSettings:
        """
        The live record. Changes made to it are visible to every caller.
        """
        return self._settings

    def set(self, **changes) -> ShareSettings:
        unknown = set(changes) - _FIELD_NAMES
        if unknown:
            raise KeyError(f'Unknown setting(s): {", ".join(sorted(unknown))}')

        for name, value in changes.items():
            setattr(self._settings, name, value)
        return self._settings

    def persist(self, settings: Optional[ShareSettings] = None) -> None:
        """
        Write the record (the live one unless given) to disk.

        Raises:
            StorageError: the write failed, nothing is retried
        """
        record = settings if settings is not None else self._settings
        save_json(self.path, record.to_dict())
        logger.debug(f"Settings saved to {self.path}")

    def replace(self, settings: ShareSettings) -> None:
        """
        Commit a new record in place so existing references stay live.
        """
        for name in _FIELD_NAMES:
            setattr(self._settings, name, getattr(settings, name))

    def update(self, **changes) -> ShareSettings:
        self.set(**changes)
        self.persist()
        return self._settings
