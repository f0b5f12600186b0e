"""Recipe modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from bakery.models import CatalogItem


class RecipeModal(ModalScreen[None]):
    """Centered modal showing the full recipe for one menu item."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("enter", "close", "Close"),
    ]

    CSS = """
    RecipeModal {
        align: center middle;
        background: $background 60%;
    }

    #recipe-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #recipe-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #recipe-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, item: CatalogItem) -> None:
        super().__init__()
        self.item = item

    def compose(self) -> ComposeResult:
        with Container(id="recipe-dialog"):
            yield Static(Text(f"{self.item.name} Recipe"), id="recipe-title")
            yield Static(Text(self.item.recipe), id="recipe-body")
            yield Static("Esc / q / Enter to close", id="recipe-help")

    def action_close(self) -> None:
        self.dismiss()
