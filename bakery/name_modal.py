"""Reservation name entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery.config import MAX_NAME_LENGTH


class ReservationNameModal(ModalScreen[str | None]):
    """Prompt for the name the reservation is made under."""

    CSS = """
    ReservationNameModal {
        align: center middle;
        background: $background 60%;
    }

    #name-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #name-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #name-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #name-help {
        color: #dddddd;
    }
    """

    def __init__(self, value: str = "") -> None:
        super().__init__()
        self.value = value

    def compose(self) -> ComposeResult:
        with Container(id="name-dialog"):
            yield Static("Reservation Name", id="name-title")
            yield Static(id="name-value")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="name-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss(self.value)
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < MAX_NAME_LENGTH:
                self.value += event.character
            self._refresh_content()
            event.stop()

    def _refresh_content(self) -> None:
        self.query_one("#name-value", Static).update(Text(f"{self.value}|"))
