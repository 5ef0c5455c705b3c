# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from flask import Blueprint, jsonify
from sqlalchemy.orm import Session

from campexplorer.infrastructure.health import check_database
from campexplorer.shared.config import AppConfig
from campexplorer.shared.logging import logger


class MiscController:
    def __init__(
        self, *, config: AppConfig, session_factory: Callable[[], Session]
    ) -> None:
        self._config = config
        self._session_factory = session_factory

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify(
            {
                "message": f"{self._config.service_name} is running...",
                "version": self._config.version,
                "environment": self._config.app_env,
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    def health(self):
        status: dict[str, object] = {
            "status": "OK",
            "timestamp": datetime.now(UTC).isoformat(),
        }
        try:
            check_database(self._session_factory)
            status["database"] = "ok"
        except Exception as exc:
            logger.warning(f"health: database check failed ({type(exc).__name__})")
            status["status"] = "DEGRADED"
            status["database"] = "unavailable"
        return jsonify(status)
