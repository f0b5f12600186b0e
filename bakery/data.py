"""Static menu seed and image references."""

from __future__ import annotations

from urllib.parse import quote

from bakery.config import DEFAULT_COVER_URI, IMAGE_URI_TEMPLATE
from bakery.constant import COVER_URI_BY_ITEM_ID, MENU_SEED
from bakery.models import CatalogItem


def seed_items() -> list[CatalogItem]:
    """Build fresh catalog items from the editable menu seed."""
    return [
        CatalogItem(
            item_id=str(raw["item_id"]),
            name=str(raw["name"]),
            stock=int(raw["stock"]),
            recipe=str(raw["recipe"]),
        )
        for raw in MENU_SEED
    ]


def image_uri_for_name(name: str) -> str:
    """Return the thumbnail URI used for a cart line."""
    return IMAGE_URI_TEMPLATE.format(query=quote(name, safe="!'()*~"), sig=name)


def cover_uri_for_item(item_id: str) -> str:
    """Return the menu card cover URI for an item id."""
    return COVER_URI_BY_ITEM_ID.get(item_id, DEFAULT_COVER_URI)
