# settings.py
"""
Settings model for the note sharing client.

This module owns the shape of settings.json and nothing else:
- enumerations stored as integers
- ServerConfig / ShareSettings records
- defaults and the merge of a persisted record over them
- small derived helpers used by the settings panel
"""

import copy
from dataclasses import dataclass, field as dataclass_field
from enum import IntEnum
from typing import Any, Dict, List, Optional

import logging
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Enumerations
# -------------------------------------------------------------------

class ThemeMode(IntEnum):
    SAME_AS_THEME = 0
    DARK = 1
    LIGHT = 2

    @property
    def label(self) -> str:
        return _THEME_MODE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> 'ThemeMode':
        for mode, text in _THEME_MODE_LABELS.items():
            if text == label:
                return mode
        raise ValueError(f'Unknown theme mode "{label}"')


_THEME_MODE_LABELS = {
    ThemeMode.SAME_AS_THEME: 'Same as theme',
    ThemeMode.DARK: 'Dark',
    ThemeMode.LIGHT: 'Light',
}


class TitleSource(IntEnum):
    NOTE_TITLE = 0
    FIRST_H1 = 1
    FRONTMATTER_PROPERTY = 2

    @property
    def label(self) -> str:
        return _TITLE_SOURCE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> 'TitleSource':
        for source, text in _TITLE_SOURCE_LABELS.items():
            if text == label:
                return source
        raise ValueError(f'Unknown title source "{label}"')


_TITLE_SOURCE_LABELS = {
    TitleSource.NOTE_TITLE: 'Note title',
    TitleSource.FIRST_H1: 'First H1',
    TitleSource.FRONTMATTER_PROPERTY: 'Frontmatter property',
}


class YamlField(IntEnum):
    """
    Logical frontmatter properties. The concrete key is the
    yamlField prefix joined to the member name, e.g. share_link.
    """
    link = 0
    updated = 1
    encrypted = 2
    unencrypted = 3
    title = 4
    expires = 5
    password = 6


def field(prefix: str, yaml_field: YamlField) -> str:
    return f'{prefix}_{yaml_field.name}'


# -------------------------------------------------------------------
# Data model
# -------------------------------------------------------------------

@dataclass
class ServerConfig:
    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'url': self.url}


DEFAULT_SERVER = 'https://api.note.sx'
DEFAULT_YAML_FIELD = 'share'


def _default_servers() -> List[ServerConfig]:
    return [
        ServerConfig(name='Note.sx', url='https://api.note.sx'),
        ServerConfig(name='ObsidianShare', url='https://api.obsidianshare.com'),
    ]


# persisted key -> attribute name
_KEYS = {
    'server': 'server',
    'servers': 'servers',
    'uid': 'uid',
    'apiKey': 'api_key',
    'yamlField': 'yaml_field',
    'noteWidth': 'note_width',
    'theme': 'theme',
    'themeMode': 'theme_mode',
    'titleSource': 'title_source',
    'removeYaml': 'remove_yaml',
    'removeBacklinksFooter': 'remove_backlinks_footer',
    'expiry': 'expiry',
    'password': 'password',
    'clipboard': 'clipboard',
    'shareUnencrypted': 'share_unencrypted',
    'authRedirect': 'auth_redirect',
    'debug': 'debug',
}

_ENUMS = {
    'theme_mode': ThemeMode,
    'title_source': TitleSource,
}


@dataclass
class ShareSettings:
    server: str = DEFAULT_SERVER
    servers: List[ServerConfig] = dataclass_field(default_factory=_default_servers)
    uid: str = ''
    api_key: str = ''
    yaml_field: str = DEFAULT_YAML_FIELD
    note_width: str = ''
    theme: str = ''  # name of the theme stored on the server
    theme_mode: ThemeMode = ThemeMode.SAME_AS_THEME
    title_source: TitleSource = TitleSource.NOTE_TITLE
    remove_yaml: bool = True
    remove_backlinks_footer: bool = True
    expiry: str = ''
    password: str = ''
    clipboard: bool = True
    share_unencrypted: bool = False
    auth_redirect: Optional[str] = None
    debug: int = 0

    def field(self, yaml_field: YamlField) -> str:
        return field(self.yaml_field, yaml_field)

    def server_urls(self) -> List[str]:
        return [s.url for s in self.servers]

    # ---------------------------------------------------------------
    # Persistence shape
    # ---------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key, attr in _KEYS.items():
            value = getattr(self, attr)
            if attr == 'servers':
                value = [s.to_dict() for s in value]
            elif attr in _ENUMS:
                value = int(value)
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, raw: Any) -> 'ShareSettings':
        """
        Merge a persisted record over the defaults.

        Missing keys keep their default, unknown keys are ignored.
        A present servers list is taken as-is, even when empty.
        """
        settings = default_settings()

        if not isinstance(raw, dict):
            logger.warning("Persisted settings are not a record, using defaults")
            return settings

        for key, attr in _KEYS.items():
            if key not in raw:
                continue
            value = raw[key]

            if attr == 'servers':
                if not isinstance(value, list):
                    logger.warning(f"Invalid {key} value {value!r}, using default")
                    continue
                value = [
                    ServerConfig(name=str(s.get('name', '')), url=str(s.get('url', '')))
                    for s in value
                    if isinstance(s, dict)
                ]
            elif attr in _ENUMS:
                try:
                    value = _ENUMS[attr](value)
                except ValueError:
                    logger.warning(f"Invalid {key} value {value!r}, using default")
                    continue

            setattr(settings, attr, value)

        return settings


def default_settings() -> ShareSettings:
    return copy.deepcopy(DEFAULT_SETTINGS)


DEFAULT_SETTINGS = ShareSettings()


# -------------------------------------------------------------------
# Display helpers (used by the settings panel)
# -------------------------------------------------------------------

DEFAULT_TITLE_DESCRIPTION = (
    'Select the location to source the published note title. '
    'It will default to the note title if nothing is found for the selected option.'
)


def title_source_description(settings: ShareSettings) -> str:
    if settings.title_source == TitleSource.FRONTMATTER_PROPERTY:
        return (
            'Set the title you want to use in a frontmatter property called '
            f'`{settings.field(YamlField.title)}`'
        )
    return DEFAULT_TITLE_DESCRIPTION


def theme_display_name(settings: ShareSettings) -> str:
    return settings.theme or 'Obsidian default theme'


def api_key_url(settings: ShareSettings) -> str:
    """
    Browser URL where the remote service hands out an API key.
    """
    return f'{settings.server}/v1/account/get-key?id={settings.uid}'
