import pytest
from pathlib import Path

from settings import ServerConfig, ShareSettings
from settings_store import SettingsStore
from servers import ServerListEditor


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    return SettingsStore(settings_path, ShareSettings())


@pytest.fixture
def editor(store: SettingsStore) -> ServerListEditor:
    return ServerListEditor(store)


@pytest.fixture
def three_servers(store: SettingsStore) -> SettingsStore:
    store.set(
        server="https://b.example",
        servers=[
            ServerConfig(name="A", url="https://a.example"),
            ServerConfig(name="B", url="https://b.example"),
            ServerConfig(name="C", url="https://c.example"),
        ],
    )
    return store
