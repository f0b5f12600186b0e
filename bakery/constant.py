"""Editable static menu configuration."""

from __future__ import annotations

# Seed values consumed by bakery.data (which wraps these into CatalogItem instances).
MENU_SEED: list[dict[str, str | int]] = [
    {
        "item_id": "1",
        "name": "Chocolate Cake",
        "stock": 5,
        "recipe": "• 200g flour\n• 100g sugar\n• 50g cocoa\n…",
    },
    {
        "item_id": "2",
        "name": "Lemon Tart",
        "stock": 3,
        "recipe": "• 200g flour\n• 100g butter\n• 2 lemons\n…",
    },
    {
        "item_id": "3",
        "name": "Strawberry Pie",
        "stock": 1,
        "recipe": "• 369g strawberries\n• 100g sugar\n• Pie crust\n…",
    },
    {
        "item_id": "4",
        "name": "Strawberry Pie",
        "stock": 1,
        "recipe": "• 300g strawberries\n• 100g sugar\n• Pie crust\n…",
    },
]

COVER_URI_BY_ITEM_ID: dict[str, str] = {
    "1": "https://www.oetker.co.uk/assets/recipes/assets/46b664a502ce4ebdb241e6667ce789b7/1272x764/pinata-rainbow-cake.webp",
    "2": "https://ichef.bbc.co.uk/ace/standard/1600/food/recipes/funfetti_cake_49993_16x9.jpg.webp",
}

STOCK_ACCENT_STYLE = "bold #f2a65a"
STOCK_LOW_STYLE = "#CDE3F1"
CART_ICON_STYLE = "bold #71932C"
