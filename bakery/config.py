"""Runtime configuration defaults for logging, stock policy and images."""

from __future__ import annotations

import logging

DEBUG_LOG_PATH = "/tmp/bakery-debug.log"
LOG_LEVEL = logging.DEBUG

# Observed storefront behavior: lowering a cart quantity does not return units to stock.
RESTOCK_ON_DECREASE = False

IMAGE_URI_TEMPLATE = "https://source.unsplash.com/200x200/?{query},food,drink&sig={sig}"
DEFAULT_COVER_URI = (
    "https://communityhub.sage.com/resized-image/__size/640x480/__key/"
    "communityserver-discussions-components-files/390/pastedimage1696580419131v1.png"
)

MAX_NAME_LENGTH = 40
