# ui/servers_page.py
"""
Server list management UI.

Responsibilities:
- Add / edit server dialog
- Server list rows with Edit and Delete actions
- Report refused or failed changes with a notification
"""

from typing import Callable, Optional

from nicegui import ui

from servers import LastServerError, ServerListEditor, ServerListError
from settings import ServerConfig
from storage import StorageError

import logging
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def run_server_command(command: Callable[[], object], on_done: Callable[[], None]) -> bool:
    """
    Run an editor command and redraw on success.
    Returns False when the change was refused or not saved.
    """
    try:
        command()
    except LastServerError as err:
        ui.notify(str(err), type='warning')
        return False
    except StorageError as err:
        logger.error(f"Saving servers failed: {err}")
        ui.notify(f'Saving settings failed: {err}', type='negative')
        return False
    except ServerListError as err:
        ui.notify(str(err), type='negative')
        return False

    on_done()
    return True


# -------------------------------------------------------------------
# Add / edit dialog
# -------------------------------------------------------------------

def server_dialog(
    server: Optional[ServerConfig],
    on_submit: Callable[[str, str], None],
):
    """
    server: None to add a new server, the existing entry to edit it

    Names and urls are not checked for duplicates. The Server dropdown
    is keyed by url, so entries sharing a url show up as one option there.
    """
    editing = server is not None

    with ui.dialog() as dialog, ui.card().classes('w-[520px]'):
        ui.label('Edit Server' if editing else 'Add Server').classes('text-lg font-bold w-full')

        name = ui.input(
            'Name',
            value=server.name if editing else '',
        ).classes('w-full').mark('server-name')
        ui.label('A name for this server').classes('text-sm text-gray-500')

        url = ui.input(
            'URL',
            value=server.url if editing else '',
        ).classes('w-full').mark('server-url')
        ui.label('The server URL (e.g., https://api.note.sx)').classes('text-sm text-gray-500')

        def submit():
            if not name.value or not url.value:
                return
            on_submit(name.value, url.value)
            dialog.close()

        with ui.row().classes('justify-end gap-2 w-full'):
            submit_btn = ui.button(
                'Save' if editing else 'Add',
                on_click=submit,
            ).props('color=primary').mark('server-submit')
            ui.button('Cancel', on_click=dialog.close)

        def update_submit():
            submit_btn.set_enabled(bool(name.value and url.value))

        name.on_value_change(update_submit)
        url.on_value_change(update_submit)
        update_submit()

    dialog.open()
    return dialog


# -------------------------------------------------------------------
# Server list section
# -------------------------------------------------------------------

def render_server_list(editor: ServerListEditor, on_change: Callable[[], None]):
    logger.debug("ui.servers_page.py render_server_list is started")
    settings = editor.settings

    def add_dialog():
        server_dialog(
            None,
            lambda name, url: run_server_command(lambda: editor.add(name, url), on_change),
        )

    def edit_dialog(index: int, server: ServerConfig):
        server_dialog(
            server,
            lambda name, url: run_server_command(lambda: editor.edit(index, name, url), on_change),
        )

    def delete(index: int):
        run_server_command(lambda: editor.delete(index), on_change)

    with ui.row().classes('w-full items-center'):
        with ui.column().classes('gap-0'):
            ui.label('Manage servers').classes('font-semibold')
            ui.label('Add, edit or remove servers').classes('text-sm text-gray-500')
        ui.space()
        ui.button('Add new server', icon='add', on_click=add_dialog).mark('add-server')

    for index, server in enumerate(settings.servers):
        with ui.row().classes('w-full items-center pl-4'):
            with ui.column().classes('gap-0'):
                ui.label(server.name)
                ui.label(server.url).classes('text-sm text-gray-500')
            ui.space()
            ui.button(
                'Edit',
                on_click=lambda i=index, s=server: edit_dialog(i, s),
            ).mark(f'edit-server-{index}')
            ui.button(
                'Delete',
                on_click=lambda i=index: delete(i),
            ).props('color=negative').mark(f'delete-server-{index}')
