from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .analytics.controller import register as register_analytics
from .config import get_settings_module
from .container import build_container
from .storage.repository import KeyValueStorage
from .subjects.controller import register as register_subjects

logger = logging.getLogger(__name__)


def create_app(*, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(
        "settings=%s storage=%s key=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "memory"),
        getattr(settings, "STORAGE_KEY", ""),
    )

    container = build_container(settings, storage=storage)
    app.extensions["attendance_tracker"] = container

    register_subjects(app, container)
    register_analytics(app, container)

    return app
