"""In-memory catalog of sellable items and their remaining stock."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from bakery.data import seed_items
from bakery.models import CatalogItem

logger = logging.getLogger(__name__)


class UnknownItemError(KeyError):
    """Raised when a stock operation names an id the catalog does not hold."""


class OutOfStockError(ValueError):
    """Raised when decrementing an item whose stock is already zero."""


class Catalog:
    """Ordered collection of catalog items.

    Stock is only ever changed through decrement_stock/increment_stock, which
    keeps every item's stock non-negative.
    """

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items: list[CatalogItem] = []
        self._by_id: dict[str, CatalogItem] = {}
        for item in items:
            if item.item_id in self._by_id:
                raise ValueError(f"Duplicate catalog item id: {item.item_id!r}")
            if item.stock < 0:
                raise ValueError(f"Negative stock for catalog item {item.item_id!r}")
            self._items.append(item)
            self._by_id[item.item_id] = item

    @classmethod
    def seeded(cls) -> Catalog:
        """Build a catalog from the static menu seed."""
        return cls(seed_items())

    @property
    def items(self) -> list[CatalogItem]:
        return list(self._items)

    def get(self, item_id: str) -> CatalogItem:
        try:
            return self._by_id[item_id]
        except KeyError:
            raise UnknownItemError(item_id) from None

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def decrement_stock(self, item_id: str) -> int:
        """Take one unit of an item out of stock and return the new stock."""
        item = self.get(item_id)
        if item.stock < 1:
            raise OutOfStockError(f"Catalog item {item_id!r} is out of stock")
        item.stock -= 1
        logger.debug("stock_decrement item_id=%r stock=%d", item_id, item.stock)
        return item.stock

    def increment_stock(self, item_id: str, amount: int = 1) -> int:
        """Return units of an item to stock and return the new stock."""
        if amount < 0:
            raise ValueError("amount must be non-negative")
        item = self.get(item_id)
        item.stock += amount
        logger.debug("stock_increment item_id=%r amount=%d stock=%d", item_id, amount, item.stock)
        return item.stock
