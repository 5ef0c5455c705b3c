# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os

from flask import Flask
from flask_cors import CORS

from campexplorer.infrastructure.container import Container, container as default_container
from campexplorer.infrastructure.db import init_db
from campexplorer.shared.logging import logger, setup_logging
from campexplorer.shared.middleware.error_handler import configure_error_handling
from campexplorer.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging("DEBUG" if config.debug_logging else None)

    # fail fast: no signing secret, no service
    _ = (container.token_issuer, container.token_validator)

    if container.uses_default_database:
        init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(MAX_CONTENT_LENGTH=config.security.max_content_length)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.camps_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(
        f"Flask app initialized env={config.app_env} "
        f"protect_camp_writes={config.security.protect_camp_writes}"
    )
    return app


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    create_app().run(host="0.0.0.0", port=port)
