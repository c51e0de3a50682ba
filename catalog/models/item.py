"""Item value type."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Item:
    """A priced catalog entry.

    ``id`` is 0 until the store assigns one.
    """

    name: str
    price: float
    id: int = 0

    def with_id(self, item_id: int) -> Item:
        return replace(self, id=int(item_id))
