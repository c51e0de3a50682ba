"""Item routes (controllers). No business logic here."""

from __future__ import annotations

import re

from flask import Blueprint, request

from catalog.errors import ValidationError
from catalog.schemas.item import ItemPayloadSchema, ItemSchema
from catalog.services.item_service import ItemService
from catalog.utils.responses import no_content, ok

items_bp = Blueprint("items", __name__)

_item_schema = ItemSchema()
_items_schema = ItemSchema(many=True)
_payload_schema = ItemPayloadSchema()
_service = ItemService()

_ITEM_ID_RE = re.compile(r"[0-9]+")


def _parse_item_id(raw: str) -> int:
    """Path ids must be positive base-10 integers."""

    if not _ITEM_ID_RE.fullmatch(raw) or int(raw) < 1:
        raise ValidationError(message="Invalid ID", details={"id": raw})
    return int(raw)


@items_bp.get("/items")
def list_items():
    """List all items (order not guaranteed)."""

    items = _service.list_items()
    return ok(_items_schema.dump(items))


@items_bp.post("/items")
def create_item():
    """Create a new item."""

    payload = request.get_json(silent=True) or {}
    data = _payload_schema.load(payload)

    item = _service.create_item(name=str(data["name"]), price=float(data["price"]))
    return ok(_item_schema.dump(item), status_code=201)


@items_bp.get("/items/<item_id>")
def get_item(item_id: str):
    """Get a single item by id."""

    item = _service.get_item(_parse_item_id(item_id))
    return ok(_item_schema.dump(item))


@items_bp.put("/items/<item_id>")
def update_item(item_id: str):
    """Replace an item; the path id wins over any id in the body."""

    target_id = _parse_item_id(item_id)
    payload = request.get_json(silent=True) or {}
    data = _payload_schema.load(payload)

    item = _service.update_item(target_id, name=str(data["name"]), price=float(data["price"]))
    return ok(_item_schema.dump(item))


@items_bp.delete("/items/<item_id>")
def delete_item(item_id: str):
    _service.delete_item(_parse_item_id(item_id))
    return no_content()
