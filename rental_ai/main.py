"""
/**
 * @file rental_ai/main.py
 * @description FastAPI entry point (routers, middleware and config watcher only).
 */
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from rental_ai.config import load_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

from rental_ai.controllers import description_router, health_router, translate_router

app = FastAPI(title="Rental AI API")
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("rental_ai.main")


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""
    def on_modified(self, event):
        if event.is_directory:
            return

        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()

_observer = None

@app.on_event("startup")
async def startup_event():
    global _observer
    try:
        _observer = Observer()
        config_dir = os.path.dirname(CONFIG_PATH)
        _observer.schedule(ConfigEventHandler(), config_dir, recursive=False)
        _observer.start()
        logger.info("Config watcher started on %s", config_dir)
    except OSError as e:
        logger.warning("Failed to start config watcher: %s", e)
        _observer = None
    # Initial load
    load_settings()


@app.on_event("shutdown")
async def shutdown_event():
    global _observer

    if _observer:
        _observer.stop()
        _observer.join()
        _observer = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(translate_router)
app.include_router(description_router)
