"""Application factory and blueprint registration."""
from __future__ import annotations

import sys
from typing import Any

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import BaseConfig, DynamoConfig
from .db.dynamo import DynamoDB
from .api.health.routes import bp as health_bp
from .api.users.routes import bp as users_bp
from .errors import register_error_handlers


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def create_app(config: BaseConfig | None = None, *, table: Any | None = None, client: Any | None = None) -> Flask:
    """Create and configure the Flask application.

    ``table``/``client`` replace the boto3 objects that would otherwise be
    built from the resolved DynamoDB profile.
    """
    app = Flask(__name__)
    app.config.from_object(config or BaseConfig())
    _configure_logging(app.config["LOG_LEVEL"])
    CORS(app, origins=app.config["CORS_ORIGINS"])

    dynamo_config = DynamoConfig.from_mapping(app.config)
    DynamoDB(dynamo_config, table=table, client=client).init_app(app)
    logger.info(
        "DynamoDB profile '{}' table '{}'{}",
        dynamo_config.profile.value,
        dynamo_config.table_name,
        f" at {dynamo_config.endpoint_url}" if dynamo_config.endpoint_url else "",
    )

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/health")
    app.register_blueprint(users_bp, url_prefix="/users")

    # Global error handlers
    register_error_handlers(app)
    return app
