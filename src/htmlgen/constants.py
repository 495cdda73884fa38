"""
Shared constants for catalog page generation.
"""

# Local image file names are resolved under this directory
DEFAULT_ASSETS_DIR = "assets/images"

# Swapped in by the <img> error handler when an image fails to load
PLACEHOLDER_IMAGE = "assets/images/chair.png"
PLACEHOLDER_OPACITY = "0.5"

DEFAULT_CATEGORY = "furniture"

# Element ids the page shell must provide
GRID_ID = "product-grid"
TITLE_ID = "category-title"
SUBTITLE_ID = "category-subtitle"

EMPTY_CATEGORY_TEXT = "目前此分類尚無商品"

# Display titles per canonical category key
CATEGORY_TITLES: dict[str, str] = {
    "furniture": "柚木/實木傢俱",
    "chair": "單椅",
    "vintage": "古物選品",
}
