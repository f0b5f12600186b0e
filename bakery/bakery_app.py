"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App

from bakery.cart import Cart
from bakery.catalog import Catalog
from bakery.menu_screen import MenuScreen

logger = logging.getLogger(__name__)


class BakeryApp(App):
    """A two-screen storefront simulator: a bakery menu and a reservation cart."""

    TITLE = "Dessert Shop"
    SUB_TITLE = "Menu / Cart"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, catalog: Catalog | None = None, cart: Cart | None = None) -> None:
        super().__init__()
        if catalog is None:
            catalog = cart.catalog if cart is not None else Catalog.seeded()
        self.catalog = catalog
        self.cart = cart if cart is not None else Cart(self.catalog)

    def on_mount(self) -> None:
        logger.debug("app_mount items=%d", len(self.catalog))
        self.push_screen(MenuScreen(self.catalog, self.cart))
