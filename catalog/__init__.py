"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

def create_app(config_overrides: Mapping[str, Any] | None = None, redis_client: Any | None = None) -> Flask:
    """Application factory.

    Args:
        config_overrides: Values applied on top of the environment config.
        redis_client: Pre-built Redis client to use instead of one built from
            ``REDIS_URL``.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from catalog.config import get_config
    from catalog.db import init_redis
    from catalog.error_handlers import register_error_handlers
    from catalog.logging_config import configure_logging
    from catalog.routes.health import health_bp
    from catalog.routes.items import items_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    init_redis(app, client=redis_client)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(items_bp)

    return app
