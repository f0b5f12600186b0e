"""Domain models for the bakery storefront."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CatalogItem:
    """A sellable menu item with its remaining stock."""

    item_id: str
    name: str
    stock: int
    recipe: str = ""

    @property
    def recipe_preview(self) -> str:
        first_line = self.recipe.split("\n")[0]
        return f"{first_line}…"

    @property
    def sold_out(self) -> bool:
        return self.stock < 1


@dataclass
class CartLine:
    """One cart entry; name and image are captured when the item is first added."""

    item_id: str
    name: str
    image_uri: str
    qty: int = 1
    # Units this line took out of catalog stock; quantity raised with + takes none.
    reserved: int = 0


@dataclass(frozen=True)
class Confirmation:
    """Summary produced by a successful checkout."""

    customer_name: str
    lines: tuple[tuple[int, str], ...]

    title = "Reservation Confirmed"

    @property
    def summary(self) -> str:
        return ", ".join(f"{qty}× {name}" for qty, name in self.lines)

    @property
    def message(self) -> str:
        return f"Thank you, {self.customer_name}!\nYou reserved {self.summary}."

    @property
    def total_units(self) -> int:
        return sum(qty for qty, _ in self.lines)
