# ui/navigation.py
from nicegui import ui

from settings_store import SettingsStore
from ui.settings_page import render_settings_page

import logging
logger = logging.getLogger(__name__)


# -------------------
# Header (called inside each page)
# -------------------
def build_header(store: SettingsStore):
    """
    Returns a callback that redraws the selected server label.
    """
    @ui.refreshable
    def selected_server_ui():
        ui.label(store.get().server).classes('font-bold text-brand').mark('selected-server')

    dark = ui.dark_mode()
    dark.enable()
    with ui.header().classes('items-center'):
        ui.colors(brand='#424242')
        ui.label('Note Share').classes('text-lg font-bold text-brand')
        ui.space()
        selected_server_ui()
    return selected_server_ui.refresh


# -------------------
# Pages
# -------------------
def register_pages(store: SettingsStore):
    """
    Register the settings pages. The store is shared by every client.
    """

    @ui.page('/')
    def home_page():
        settings_page_wrapper()

    @ui.page('/settings')
    def settings_page_wrapper():
        logger.info("settings_page called")
        refresh_header = build_header(store)
        render_settings_page(store, on_servers_changed=refresh_header)
