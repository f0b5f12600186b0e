"""Cart screen: adjust line quantities, set the reservation name and pay."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from bakery.cart import Cart
from bakery.confirmation_modal import ConfirmationModal
from bakery.name_modal import ReservationNameModal
from bakery.rendering import format_cart_line, format_total_units, window_bounds

logger = logging.getLogger(__name__)

CART_ROWS_PER_LINE = 2


class CartScreen(Screen[None]):
    """Shows the shared cart; Esc returns to the menu."""

    BINDINGS = [
        ("escape", "back", "Menu"),
        ("j,down", "move_cursor(1)", "Next"),
        ("k,up", "move_cursor(-1)", "Previous"),
        ("minus,left", "adjust_selected(-1)", "Less"),
        ("plus,equals_sign,right", "adjust_selected(1)", "More"),
        ("n", "edit_name", "Name"),
        ("p", "pay", "Pay"),
    ]

    CSS = """
    #cart-lines {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #cart-name {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    #cart-total {
        text-align: center;
        text-style: bold;
        margin: 1 0;
    }

    #cart-pay {
        text-align: center;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, cart: Cart) -> None:
        super().__init__()
        self.cart = cart
        self.status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static(id="cart-lines")
            yield Static(id="cart-name")
            yield Static(id="cart-total")
            yield Static(id="cart-pay")

    def on_mount(self) -> None:
        self._refresh_all()

    def action_back(self) -> None:
        self.app.pop_screen()

    def action_move_cursor(self, delta: int) -> None:
        if self.cart.is_empty:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.cart)
        self._refresh_lines()

    def action_adjust_selected(self, delta: int) -> None:
        lines = self.cart.lines
        if not (0 <= self.cursor_index < len(lines)):
            return
        self.cart.adjust_quantity(lines[self.cursor_index].item_id, delta)
        if self.cursor_index >= len(self.cart):
            self.cursor_index = max(0, len(self.cart) - 1)
        self._refresh_all()

    def action_edit_name(self) -> None:
        self.app.push_screen(ReservationNameModal(self.cart.customer_name), self._on_name_entered)

    def action_pay(self) -> None:
        confirmation = self.cart.checkout()
        if confirmation is None:
            self.status = "Add items and enter a reservation name to pay"
            self._refresh_all()
            return

        self.status = ""
        self.cursor_index = 0
        self._refresh_all()
        self.app.push_screen(ConfirmationModal(confirmation))

    def _on_name_entered(self, value: str | None) -> None:
        if value is None:
            return
        self.cart.set_customer_name(value)
        logger.debug("customer_name_set length=%d", len(value))
        self.status = ""
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_lines()
        try:
            name_widget = self.query_one("#cart-name", Static)
            total_widget = self.query_one("#cart-total", Static)
            pay_widget = self.query_one("#cart-pay", Static)
        except NoMatches:
            return

        name = self.cart.customer_name
        name_widget.update(Text(f"Reservation Name: {name}" if name else "Reservation Name: (press N)"))
        total_widget.update(format_total_units(self.cart.total_units()))

        pay = Text()
        if self.cart.can_checkout():
            pay.append("[ Pay ]", style="bold #ffffff on #5fbf72")
            pay.append("  P pay")
        else:
            pay.append("[ Pay ]", style="dim")
        pay.append("  -/+ qty, N name, Esc menu")
        if self.status:
            pay.append(f"\n{self.status}")
        pay_widget.update(pay)

    def _refresh_lines(self) -> None:
        try:
            lines_widget = self.query_one("#cart-lines", Static)
        except NoMatches:
            return

        lines = self.cart.lines
        if not lines:
            lines_widget.update("(cart is empty)")
            return

        height = lines_widget.size.height
        visible = max(1, height // CART_ROWS_PER_LINE) if height > 0 else len(lines)
        start, end = window_bounds(len(lines), visible, self.cursor_index)

        text = Text()
        if start > 0:
            text.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                text.append("\n")
            text.append_text(format_cart_line(lines[idx], selected=idx == self.cursor_index))
        if end < len(lines):
            text.append("\n⋮", style="dim")

        lines_widget.update(text)
