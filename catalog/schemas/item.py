"""Marshmallow schemas for Item."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, RAISE, Schema, fields, post_load, validate

from catalog.models.item import Item


class ItemSchema(Schema):
    """Serialize Item."""

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    price = fields.Float(required=True)


class ItemPayloadSchema(Schema):
    """Validate create/update Item payload.

    A client-supplied ``id`` is dropped; the store or the URL decides it.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True)
    price = fields.Float(required=True)


class ItemRecordSchema(Schema):
    """Stored record layout under ``item:<id>``."""

    class Meta:
        unknown = RAISE

    id = fields.Int(required=True, strict=True, validate=validate.Range(min=1))
    name = fields.Str(required=True)
    price = fields.Float(required=True)

    @post_load
    def _make_item(self, data: dict[str, Any], **kwargs: Any) -> Item:
        return Item(id=data["id"], name=data["name"], price=data["price"])
