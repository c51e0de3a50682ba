"""Repository layer for Item persistence in Redis.

Key layout:
  item:<id>  JSON record of one Item, written without expiry
  itemID     integer counter, bumped with INCR for every create

Every call is a direct round trip. Nothing is cached and nothing is locked
client-side; the only atomic step is the counter increment.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Union

from marshmallow import ValidationError as MarshmallowValidationError
from redis import Redis
from redis.exceptions import RedisError

from catalog.db import get_redis
from catalog.errors import EncodingError, NotFoundError, StoreUnavailableError
from catalog.models.item import Item
from catalog.schemas.item import ItemRecordSchema

logger = logging.getLogger(__name__)

ITEM_KEY_PREFIX = "item:"
ITEM_KEY_PATTERN = f"{ITEM_KEY_PREFIX}*"
COUNTER_KEY = "itemID"

_record_schema = ItemRecordSchema()


def item_key(item_id: int) -> str:
    return f"{ITEM_KEY_PREFIX}{int(item_id)}"


def encode_item(item: Item) -> bytes:
    """Serialize an Item to its stored JSON form."""

    data = _record_schema.dump(item)
    errors = _record_schema.validate(data)
    if errors:
        raise EncodingError(message=f"Item {item.id} cannot be encoded", details=errors)
    try:
        return json.dumps(data, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(message=f"Item {item.id} cannot be encoded", details=str(exc)) from exc


def decode_item(raw: bytes | str, key: str = "") -> Item:
    """Parse a stored record back into an Item."""

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise EncodingError(message=f"Record {key or '?'} is not valid JSON", details=str(exc)) from exc
    try:
        return _record_schema.load(data)
    except MarshmallowValidationError as exc:
        raise EncodingError(message=f"Record {key or '?'} is malformed", details=exc.messages) from exc


@dataclass(frozen=True)
class Found:
    raw: bytes


@dataclass(frozen=True)
class Missing:
    pass


@dataclass(frozen=True)
class Failure:
    cause: RedisError


Lookup = Union[Found, Missing, Failure]


def _unavailable(action: str, exc: RedisError) -> StoreUnavailableError:
    logger.warning("Redis %s failed: %s", action, exc)
    return StoreUnavailableError(message=f"Store unavailable during {action}", details=str(exc))


class ItemRepository:
    """CRUD operations for Item."""

    def __init__(self, client: Redis | None = None) -> None:
        self._client = client

    @property
    def _redis(self) -> Redis:
        if self._client is not None:
            return self._client
        return get_redis()

    def _next_id(self) -> int:
        try:
            return int(self._redis.incr(COUNTER_KEY))
        except RedisError as exc:
            raise _unavailable("id increment", exc) from exc

    def _fetch(self, key: str) -> Lookup:
        try:
            raw = self._redis.get(key)
        except RedisError as exc:
            return Failure(exc)
        if raw is None:
            return Missing()
        return Found(raw)

    def _write(self, key: str, payload: bytes) -> None:
        try:
            self._redis.set(key, payload)
        except RedisError as exc:
            raise _unavailable(f"write of {key}", exc) from exc

    def create(self, item: Item) -> Item:
        """Store a new Item under a freshly incremented id.

        The counter is bumped before the record is written, so a failed write
        leaves a gap in the id sequence.
        """

        new_id = self._next_id()
        stored = item.with_id(new_id)
        self._write(item_key(new_id), encode_item(stored))
        logger.info("Created item %s", new_id)
        return stored

    def get_by_id(self, item_id: int) -> Item:
        key = item_key(item_id)
        result = self._fetch(key)
        if isinstance(result, Missing):
            raise NotFoundError(message=f"Item {item_id} not found")
        if isinstance(result, Failure):
            raise _unavailable(f"read of {key}", result.cause) from result.cause
        return decode_item(result.raw, key)

    def update(self, item_id: int, item: Item) -> Item:
        """Overwrite the record for ``item_id``.

        There is no existence check: an absent id is created.
        """

        stored = item.with_id(item_id)
        self._write(item_key(item_id), encode_item(stored))
        logger.info("Wrote item %s", item_id)
        return stored

    def delete(self, item_id: int) -> bool:
        """Delete the record; returns whether a key was actually removed."""

        key = item_key(item_id)
        try:
            removed = self._redis.delete(key)
        except RedisError as exc:
            raise _unavailable(f"delete of {key}", exc) from exc
        if removed:
            logger.info("Deleted item %s", item_id)
        return bool(removed)

    def list_items(self) -> list[Item]:
        """Scan ``item:*`` and read every matched key.

        All-or-nothing: one failing, vanished or undecodable key fails the
        whole listing. Order follows the scan, not ids.
        """

        try:
            # SCAN may return a key more than once.
            keys = list(dict.fromkeys(self._redis.scan_iter(match=ITEM_KEY_PATTERN)))
        except RedisError as exc:
            raise _unavailable("scan of item keys", exc) from exc

        items: list[Item] = []
        for raw_key in keys:
            key = raw_key.decode("utf-8") if isinstance(raw_key, bytes) else str(raw_key)
            logger.debug("Reading %s", key)
            result = self._fetch(key)
            if isinstance(result, Failure):
                raise _unavailable(f"read of {key}", result.cause) from result.cause
            if isinstance(result, Missing):
                logger.warning("Key %s vanished between scan and read", key)
                raise StoreUnavailableError(
                    message="Item listing changed while it was being read",
                    details={"key": key},
                )
            items.append(decode_item(result.raw, key))
        return items

    def ping(self) -> bool:
        try:
            return bool(self._redis.ping())
        except RedisError as exc:
            raise _unavailable("ping", exc) from exc
