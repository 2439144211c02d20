# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from sessionauth.infrastructure.container import Container
from sessionauth.infrastructure.db import init_db
from sessionauth.shared.config import load_config
from sessionauth.shared.logging import logger, setup_logging
from sessionauth.shared.middleware.error_handler import configure_error_handling
from sessionauth.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    container = container or Container(config)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.register_blueprint(container.auth_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app


def main() -> None:
    create_app().run(host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
