"""Reservation confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery.models import Confirmation
from bakery.rendering import format_confirmation


class ConfirmationModal(ModalScreen[None]):
    """Simulated payment dialog shown after a successful checkout."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "OK"),
        ("q", "close", "Close"),
    ]

    CSS = """
    ConfirmationModal {
        align: center middle;
        background: $background 60%;
    }

    #confirmation-dialog {
        width: 56;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #confirmation-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, confirmation: Confirmation) -> None:
        super().__init__()
        self.confirmation = confirmation

    def compose(self) -> ComposeResult:
        with Container(id="confirmation-dialog"):
            yield Static(format_confirmation(self.confirmation), id="confirmation-body")
            yield Static("Enter / Esc to close", id="confirmation-help")

    def action_close(self) -> None:
        self.dismiss()
