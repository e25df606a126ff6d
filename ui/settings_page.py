# ui/settings_page.py
"""
Settings panel UI.

Every control writes straight to the settings store and saves.
Server list changes go through ServerListEditor.
"""

from contextlib import contextmanager
from typing import Callable, Optional

from nicegui import ui

from servers import ServerListEditor
from settings import (
    DEFAULT_YAML_FIELD,
    ThemeMode,
    TitleSource,
    YamlField,
    api_key_url,
    theme_display_name,
    title_source_description,
)
from settings_store import SettingsStore
from storage import StorageError
from ui.servers_page import render_server_list, run_server_command

import logging
logger = logging.getLogger(__name__)

DOCS_THEME = 'https://docs.note.sx/notes/theme'
DOCS_ENCRYPTION = 'https://docs.note.sx/notes/encryption'
DOCS_EXPIRY = 'https://docs.note.sx/notes/self-deleting-notes'


# -------------------------------------------------------------------
# Layout helpers
# -------------------------------------------------------------------

@contextmanager
def _setting(name: str, description: str = '', docs: Optional[str] = None):
    """
    One settings row: name and description on the left,
    controls created inside the with-block on the right.
    Yields the description label so it can be updated later.
    """
    with ui.row().classes('w-full items-center no-wrap'):
        with ui.column().classes('gap-0 col-grow'):
            ui.label(name).classes('font-semibold')
            desc = ui.label(description).classes('text-sm text-gray-500')
            if docs:
                ui.link('View the documentation', docs, new_tab=True).classes('text-sm')
        yield desc


def _heading(text: str):
    ui.separator()
    ui.label(text).classes('text-lg font-bold')


def _save(store: SettingsStore, **changes) -> bool:
    try:
        store.update(**changes)
    except StorageError as err:
        logger.error(f"Saving settings failed: {err}")
        ui.notify(f'Saving settings failed: {err}', type='negative')
        return False
    return True


# -------------------------------------------------------------------
# Page
# -------------------------------------------------------------------

def render_settings_page(store: SettingsStore, on_servers_changed: Optional[Callable[[], None]] = None):
    logger.info("ui.settings_page.py render_settings_page is started")
    editor = ServerListEditor(store)

    def redraw():
        settings_panel.refresh()
        if on_servers_changed:
            on_servers_changed()

    def select_server(e):
        if e.value and e.value != store.get().server:
            run_server_command(lambda: editor.select(e.value), redraw)

    def save_and_redraw(**changes):
        if _save(store, **changes):
            redraw()

    @ui.refreshable
    def settings_panel():
        settings = store.get()

        with ui.column().classes('w-full max-w-3xl'):
            ui.label('Settings').classes('text-2xl font-bold')

            # Server selection, one option per url: entries sharing a url share an option
            with _setting('Server', 'Select a server to share notes with'):
                ui.select(
                    {s.url: s.name for s in settings.servers},
                    value=settings.server if settings.server in settings.server_urls() else None,
                    on_change=select_server,
                ).classes('w-64').mark('server-select')

            # Manage servers
            render_server_list(editor, redraw)

            # API key
            with _setting('API key', 'Click the button to request a new API key'):
                ui.button(
                    'Connect plugin',
                    on_click=lambda: ui.navigate.to(api_key_url(store.get()), new_tab=True),
                ).props('color=primary')
                ui.input(
                    placeholder='API key',
                    value=settings.api_key,
                    on_change=lambda e: _save(store, api_key=e.value),
                ).classes('w-64')

            # Frontmatter prefix
            with _setting(
                'Frontmatter property prefix',
                'The frontmatter property for storing the shared link and updated time. '
                'A value of `share` will create frontmatter fields of `share_link` and `share_updated`.',
            ):
                ui.input(
                    placeholder=DEFAULT_YAML_FIELD,
                    value=settings.yaml_field,
                    on_change=lambda e: _save(store, yaml_field=e.value or DEFAULT_YAML_FIELD),
                ).classes('w-64')

            _heading('Upload options')

            with _setting(
                f'⭐ Your shared note theme is "{theme_display_name(settings)}"',
                'To set a new theme, change the theme in Obsidian to your desired theme and then use '
                'the `Force re-upload all data` command. You can change your Obsidian theme after that '
                'without affecting the theme for your shared notes.',
                docs=DOCS_THEME,
            ):
                pass

            with _setting('Light/Dark mode', 'Choose the mode with which your files will be shared'):
                ui.select(
                    {mode.label: mode.label for mode in ThemeMode},
                    value=settings.theme_mode.label,
                    on_change=lambda e: _save(store, theme_mode=ThemeMode.from_label(e.value)),
                ).classes('w-64')

            with _setting('Copy the link to clipboard after sharing'):
                ui.switch(
                    value=settings.clipboard,
                    on_change=lambda e: save_and_redraw(clipboard=e.value),
                )

            _heading('Note options')

            with _setting('Note title source', title_source_description(settings)) as title_desc:
                def change_title_source(e):
                    if _save(store, title_source=TitleSource.from_label(e.value)):
                        title_desc.set_text(title_source_description(store.get()))

                ui.select(
                    {source.label: source.label for source in TitleSource},
                    value=settings.title_source.label,
                    on_change=change_title_source,
                ).classes('w-64')

            with _setting(
                'Note reading width',
                'The max width for the content of your shared note, accepts any CSS unit. '
                "Leave this value empty if you want to use the theme's width.",
            ):
                ui.input(
                    value=settings.note_width,
                    on_change=lambda e: _save(store, note_width=e.value),
                ).classes('w-64').mark('note-width')

            with _setting('Remove published frontmatter/YAML', 'Remove frontmatter/YAML/properties from the shared note'):
                ui.switch(
                    value=settings.remove_yaml,
                    on_change=lambda e: save_and_redraw(remove_yaml=e.value),
                )

            with _setting('Remove backlinks footer', 'Remove backlinks footer from the shared note'):
                ui.switch(
                    value=settings.remove_backlinks_footer,
                    on_change=lambda e: save_and_redraw(remove_backlinks_footer=e.value),
                )

            with _setting(
                'Share as encrypted by default',
                'If you turn this off, you can enable encryption for individual notes by adding a '
                f'`{settings.field(YamlField.encrypted)}` checkbox into a note and ticking it.',
                docs=DOCS_ENCRYPTION,
            ):
                ui.switch(
                    value=not settings.share_unencrypted,
                    on_change=lambda e: save_and_redraw(share_unencrypted=not e.value),
                )

            with _setting(
                'Default note expiry',
                'If you want, your notes can auto-delete themselves after a period of time. '
                'You can set this as a default for all notes here, or you can set it on a per-note basis.',
                docs=DOCS_EXPIRY,
            ):
                ui.input(
                    value=settings.expiry,
                    on_change=lambda e: _save(store, expiry=e.value),
                ).classes('w-64')

            with _setting(
                'Default note password',
                'Set a default password for all shared notes. You can override this on a per-note basis '
                'by setting a password in frontmatter using the property '
                f'{settings.field(YamlField.password)}',
            ):
                ui.input(
                    placeholder='Password',
                    value=settings.password,
                    password=True,
                    password_toggle_button=True,
                    on_change=lambda e: _save(store, password=e.value),
                ).classes('w-64')

    settings_panel()
