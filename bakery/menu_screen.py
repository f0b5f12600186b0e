"""Menu screen: bakery items with stock, recipe previews and add-to-cart."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from bakery.cart import Cart
from bakery.cart_screen import CartScreen
from bakery.catalog import Catalog
from bakery.models import CatalogItem
from bakery.recipe_modal import RecipeModal
from bakery.rendering import cart_badge, format_menu_item, window_bounds

logger = logging.getLogger(__name__)

MENU_ROWS_PER_ITEM = 3


class MenuScreen(Screen[None]):
    """Lists catalog items; adding one moves a unit of stock into the cart."""

    BINDINGS = [
        ("j,down", "move_cursor(1)", "Next"),
        ("k,up", "move_cursor(-1)", "Previous"),
        ("a,enter", "add_selected", "Add"),
        ("r", "show_recipe", "Recipe"),
        ("c", "open_cart", "Cart"),
    ]

    CSS = """
    #menu-bar {
        height: 3;
        border: round $primary;
        padding: 0 1;
    }

    #menu-title {
        width: 1fr;
        text-style: bold;
    }

    #cart-badge {
        width: auto;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #menu-status {
        height: 2;
        padding: 0 1;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        super().__init__()
        self.catalog = catalog
        self.cart = cart
        self.status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            with Horizontal(id="menu-bar"):
                yield Static("Dessert Shop", id="menu-title")
                yield Static(id="cart-badge")
            yield Static(id="menu-list")
            yield Static(id="menu-status")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        if not len(self.catalog):
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.catalog)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        if self.cart.add(item):
            self.status = f"Added {item.name}"
        else:
            self.status = f"{item.name} is sold out"
        self._refresh_all()

    def action_show_recipe(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        self.app.push_screen(RecipeModal(item))

    def action_open_cart(self) -> None:
        logger.debug("open_cart lines=%d units=%d", len(self.cart), self.cart.total_units())
        self.status = ""
        self.app.push_screen(CartScreen(self.cart))

    def selected_item(self) -> CatalogItem | None:
        items = self.catalog.items
        if not (0 <= self.cursor_index < len(items)):
            return None
        return items[self.cursor_index]

    def _refresh_all(self) -> None:
        try:
            self.query_one("#cart-badge", Static).update(cart_badge(self.cart.total_units()))
            self.query_one("#menu-status", Static).update(
                Text(self.status or "J/K move, A add, R recipe, C cart, Ctrl+Q quit")
            )
        except NoMatches:
            return
        self._refresh_menu()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        items = self.catalog.items
        if not items:
            menu_widget.update("(menu is empty)")
            return

        height = menu_widget.size.height
        visible = max(1, height // MENU_ROWS_PER_ITEM) if height > 0 else len(items)
        start, end = window_bounds(len(items), visible, self.cursor_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(format_menu_item(items[idx], selected=idx == self.cursor_index))
        if end < len(items):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)
