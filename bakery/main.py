"""Entry point for the bakery storefront Textual app."""

from __future__ import annotations

from bakery.bakery_app import BakeryApp
from bakery.logs import configure_logging


def main() -> None:
    configure_logging()
    BakeryApp().run()


if __name__ == "__main__":
    main()
