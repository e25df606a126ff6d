# main.py
import os
from nicegui import ui
from fastapi import FastAPI

import ui.navigation as navigation
from settings_store import SettingsStore

import logging
import sys


# -------------------
# Logging setup
# -------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()
PORT = int(os.getenv("NOTESHARE_PORT", "5002"))

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(threadName)s: %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


# -------------------
# Settings
# -------------------
store = SettingsStore.load()

if store.get().debug > 0:
    logging.getLogger().setLevel(logging.DEBUG)
    logger.debug(f"Debug logging enabled (level {store.get().debug})")


# -------------------
# FastAPI app with the NiceGUI pages attached
# -------------------
app = FastAPI()

navigation.register_pages(store)
ui.run_with(app, title='Note Share', storage_secret="noteshare-secret")


# -------------------
# Uvicorn entrypoint
# -------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=PORT,
        reload=False,
    )
