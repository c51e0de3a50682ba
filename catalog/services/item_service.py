"""Service layer for item business logic."""

from __future__ import annotations

import logging

from catalog.models.item import Item
from catalog.repositories.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class ItemService:
    """Item use-cases."""

    def __init__(self, repository: ItemRepository | None = None) -> None:
        self._repo = repository or ItemRepository()

    def list_items(self) -> list[Item]:
        return self._repo.list_items()

    def get_item(self, item_id: int) -> Item:
        return self._repo.get_by_id(item_id)

    def create_item(self, name: str, price: float) -> Item:
        return self._repo.create(Item(name=name, price=price))

    def update_item(self, item_id: int, name: str, price: float) -> Item:
        return self._repo.update(item_id, Item(id=item_id, name=name, price=price))

    def delete_item(self, item_id: int) -> None:
        removed = self._repo.delete(item_id)
        if not removed:
            logger.info("Delete of item %s found no record", item_id)

    def store_healthy(self) -> bool:
        return self._repo.ping()
