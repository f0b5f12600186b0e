"""Cart lines and the reconciliation of cart quantities with catalog stock."""

from __future__ import annotations

import logging

from bakery.catalog import Catalog
from bakery.config import RESTOCK_ON_DECREASE
from bakery.data import image_uri_for_name
from bakery.models import CartLine, CatalogItem, Confirmation

logger = logging.getLogger(__name__)


class Cart:
    """Transient cart for one storefront session.

    Adding an item takes a unit out of catalog stock. Lowering a line's
    quantity leaves stock alone unless restock_on_decrease is set, and
    checkout never restocks: a completed reservation is final.
    """

    def __init__(self, catalog: Catalog, restock_on_decrease: bool = RESTOCK_ON_DECREASE) -> None:
        self.catalog = catalog
        self.restock_on_decrease = restock_on_decrease
        self.customer_name = ""
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def line_for(self, item_id: str) -> CartLine | None:
        for line in self._lines:
            if line.item_id == item_id:
                return line
        return None

    def add(self, item: CatalogItem) -> bool:
        """Move one unit of item from stock into the cart.

        Returns False and changes nothing when the item is out of stock.
        """
        # Stock and the name snapshot come from the catalog's own item, not the caller's copy.
        item = self.catalog.get(item.item_id)
        if item.stock < 1:
            logger.debug("cart_add_blocked item_id=%r reason=out_of_stock", item.item_id)
            return False

        stock = self.catalog.decrement_stock(item.item_id)

        line = self.line_for(item.item_id)
        if line is not None:
            line.qty += 1
        else:
            line = CartLine(
                item_id=item.item_id,
                name=item.name,
                image_uri=image_uri_for_name(item.name),
                qty=1,
                reserved=0,
            )
            self._lines.append(line)
        line.reserved += 1

        logger.debug("cart_add item_id=%r qty=%d stock=%d", item.item_id, line.qty, stock)
        return True

    def adjust_quantity(self, item_id: str, delta: int) -> None:
        """Change a line's quantity by delta, dropping it once it reaches zero."""
        line = self.line_for(item_id)
        if line is None:
            logger.debug("cart_adjust_ignored item_id=%r reason=no_line", item_id)
            return

        line.qty += delta
        self._lines = [ln for ln in self._lines if ln.qty > 0]

        held = min(line.reserved, max(line.qty, 0))
        released = line.reserved - held
        line.reserved = held
        if self.restock_on_decrease and released > 0:
            self.catalog.increment_stock(item_id, released)

        logger.debug(
            "cart_adjust item_id=%r delta=%d qty=%d removed=%s",
            item_id,
            delta,
            max(line.qty, 0),
            line.qty <= 0,
        )

    def total_units(self) -> int:
        return sum(line.qty for line in self._lines)

    def set_customer_name(self, name: str) -> None:
        self.customer_name = name

    def can_checkout(self, customer_name: str | None = None) -> bool:
        name = self.customer_name if customer_name is None else customer_name
        return bool(name.strip()) and not self.is_empty

    def checkout(self, customer_name: str | None = None) -> Confirmation | None:
        """Finalize the cart into a confirmation and reset cart state.

        Uses the stored customer name when none is given. A blank name or an
        empty cart leaves everything unchanged and returns None.
        """
        name = self.customer_name if customer_name is None else customer_name
        if not name.strip():
            logger.debug("checkout_blocked reason=blank_name")
            return None
        if self.is_empty:
            logger.debug("checkout_blocked reason=empty_cart")
            return None

        confirmation = Confirmation(
            customer_name=name.strip(),
            lines=tuple((line.qty, line.name) for line in self._lines),
        )
        self._lines.clear()
        self.customer_name = ""
        logger.info(
            "checkout customer=%r lines=%d units=%d",
            confirmation.customer_name,
            len(confirmation.lines),
            confirmation.total_units,
        )
        return confirmation
