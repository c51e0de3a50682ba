"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from catalog.services.item_service import ItemService
from catalog.utils.responses import ok

health_bp = Blueprint("health", __name__)

_service = ItemService()


@health_bp.get("/health")
def health_check():
    """Health check endpoint; fails with store_unavailable if Redis is down."""

    _service.store_healthy()
    return ok({"status": "ok", "store": "ok"})
