from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_APPROVER_NAME
from .web.controller import register as register_records


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["APPROVER_NAME"] = getattr(settings, "APPROVER_NAME", DEFAULT_APPROVER_NAME)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger(__name__)

    if container is None:
        gateway_config = getattr(settings, "GATEWAY_CONFIG")
        container = build_container(gateway_config=gateway_config)
        logger.info(
            "settings=%s backend=%s project=%s",
            settings_module,
            gateway_config.get("base_url"),
            gateway_config.get("project_id"),
        )

    register_records(app, container)
    app.extensions["hr_admin"] = container

    return app
