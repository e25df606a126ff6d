# servers.py
"""
Server list CRUD helpers.

This module owns the servers list and the selected server pointer
and nothing else. UI code should NEVER splice settings.servers directly.

The selected server (settings.server) always names the url of an
entry in settings.servers after add / edit / delete.
"""

import copy
from typing import Callable

from settings import ServerConfig, ShareSettings
from settings_store import SettingsStore

import logging
logger = logging.getLogger(__name__)


class ServerListError(Exception):
    pass


class InvalidServerError(ServerListError, ValueError):
    pass


class ServerIndexError(ServerListError, IndexError):
    pass


class LastServerError(ServerListError):
    def __init__(self, message: str = 'Cannot delete the last server'):
        super().__init__(message)


# -------------------------------------------------------------------
# Editor
# -------------------------------------------------------------------

class ServerListEditor:
    def __init__(self, store: SettingsStore):
        self.store = store

    @property
    def settings(self) -> ShareSettings:
        return self.store.get()

    # ---------------------------------------------------------------
    # Commands
    # ---------------------------------------------------------------

    def add(self, name: str, url: str) -> ShareSettings:
        _check_entry(name, url)

        def apply(s: ShareSettings):
            s.servers.append(ServerConfig(name=name, url=url))

        self._commit(apply)
        logger.info(f'Server "{name}" ({url}) added')
        return self.settings

    def edit(self, index: int, name: str, url: str) -> ShareSettings:
        self._check_index(index)
        _check_entry(name, url)

        def apply(s: ShareSettings):
            old = s.servers[index]
            s.servers[index] = ServerConfig(name=name, url=url)
            # keep the selection on the edited entry
            if s.server == old.url:
                s.server = url

        self._commit(apply)
        logger.info(f'Server #{index} changed to "{name}" ({url})')
        return self.settings

    def delete(self, index: int) -> ShareSettings:
        self._check_index(index)
        if len(self.settings.servers) <= 1:
            logger.warning("Refusing to delete the last server")
            raise LastServerError()

        def apply(s: ShareSettings):
            removed = s.servers[index]
            if s.server == removed.url:
                other = next((x for x in s.servers if x.url != removed.url), None)
                # no distinct url left: the remaining duplicates still match
                if other is not None:
                    s.server = other.url
            del s.servers[index]

        self._commit(apply)
        logger.info(f"Server #{index} deleted, selected server is {self.settings.server}")
        return self.settings

    def select(self, url: str) -> ShareSettings:
        if url not in self.settings.server_urls():
            logger.warning(f"Selecting unknown server {url}")

        def apply(s: ShareSettings):
            s.server = url

        self._commit(apply)
        return self.settings

    # ---------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.settings.servers):
            raise ServerIndexError(f'No server at position {index}')

    def _commit(self, apply: Callable[[ShareSettings], None]) -> None:
        """
        Apply a change to a copy, persist the copy, then swap it in.
        A StorageError leaves the live record untouched.
        """
        draft = copy.deepcopy(self.settings)
        apply(draft)
        self.store.persist(draft)
        self.store.replace(draft)


def _check_entry(name: str, url: str) -> None:
    if not name or not url:
        raise InvalidServerError('Server name and URL are required')
