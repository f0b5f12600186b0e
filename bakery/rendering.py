"""Rendering helpers for menu cards, cart rows and confirmations."""

from __future__ import annotations

from rich.text import Text

from bakery.constant import CART_ICON_STYLE, STOCK_ACCENT_STYLE, STOCK_LOW_STYLE
from bakery.data import cover_uri_for_item
from bakery.models import CartLine, CatalogItem, Confirmation


def stock_style(stock: int) -> str:
    """Accent while more than one unit is left, pale for the last one or none."""
    if stock > 1:
        return STOCK_ACCENT_STYLE
    return STOCK_LOW_STYLE


def cart_badge(total_units: int) -> Text:
    """Render the cart icon with a unit badge, hidden while the cart is empty."""
    text = Text()
    text.append("Cart", style=CART_ICON_STYLE)
    if total_units > 0:
        text.append(" ")
        text.append(f" {total_units} ", style="bold #ffffff on #b23a48")
    return text


def format_menu_item(item: CatalogItem, selected: bool = False) -> Text:
    """Render one menu card: name, stock, recipe preview and cover."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(item.name, style="bold")
    text.append("  ")
    text.append(f"Stock: {item.stock}", style=stock_style(item.stock))
    if item.sold_out:
        text.append("  sold out", style="dim")
    text.append(f"\n    {item.recipe_preview}")
    text.append(f"\n    {cover_uri_for_item(item.item_id)}", style="dim")
    return text


def format_cart_line(line: CartLine, selected: bool = False) -> Text:
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(line.name, style="bold")
    text.append(f"  Qty: {line.qty}")
    text.append(f"\n    {line.image_uri}", style="dim")
    return text


def format_total_units(total_units: int) -> str:
    return f"Total Items: {total_units}"


def format_confirmation(confirmation: Confirmation) -> Text:
    text = Text()
    text.append(confirmation.title, style="bold")
    text.append("\n\n")
    text.append(confirmation.message)
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the [start, end) slice of a list that keeps the selection visible."""
    visible = min(total, max(1, rows))
    if visible <= 0:
        return (0, 0)
    centre = 0 if selected is None else selected - visible // 2
    start = min(max(centre, 0), total - visible)
    return (start, start + visible)
