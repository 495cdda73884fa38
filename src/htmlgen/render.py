"""
HTML rendering for the product grid.
"""

import html
import logging

from bs4 import BeautifulSoup

from .constants import (
    DEFAULT_ASSETS_DIR,
    EMPTY_CATEGORY_TEXT,
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_OPACITY,
)
from .normalize import normalize_category, resolve_image_url

LOGGER = logging.getLogger(__name__)


def filter_by_category(products, filter_category):
    wanted = normalize_category(filter_category)
    return [p for p in products if p.category and normalize_category(p.category) == wanted]


def render_empty_category():
    return (
        '<p class="empty-category" style="grid-column: 1/-1; text-align: center; padding: 4rem;">'
        f"{html.escape(EMPTY_CATEGORY_TEXT)}</p>"
    )


def render_product_item(product, assets_dir=DEFAULT_ASSETS_DIR, placeholder_image=PLACEHOLDER_IMAGE):
    img_src = resolve_image_url(product.image_url, assets_dir, placeholder_image)
    # HTML escape sheet data; the feed is edited by hand
    escaped_src = html.escape(img_src)
    escaped_name = html.escape(product.name or "")
    escaped_price = html.escape(product.price or "")
    onerror = html.escape(
        f"this.src='{placeholder_image}'; this.style.opacity='{PLACEHOLDER_OPACITY}';"
    )
    return (
        '<div class="product-item reveal active">'
        '<div class="product-image">'
        f'<img src="{escaped_src}" alt="{escaped_name}" onerror="{onerror}">'
        "</div>"
        '<div class="product-info">'
        f"<h3>{escaped_name}</h3>"
        f'<p class="price">{escaped_price}</p>'
        "</div>"
        "</div>"
    )


def _append_markup(grid, markup):
    fragment = BeautifulSoup(markup, "html.parser")
    for node in list(fragment.contents):
        grid.append(node.extract())


def render_products(
    products,
    filter_category,
    grid,
    assets_dir=DEFAULT_ASSETS_DIR,
    placeholder_image=PLACEHOLDER_IMAGE,
):
    """Render products matching filter_category into grid.

    grid is a BeautifulSoup Tag; None is a no-op. Existing children are
    removed first. Returns the number of product nodes appended.
    """
    if grid is None:
        LOGGER.debug("No grid element; nothing rendered")
        return 0
    grid.clear()
    matches = filter_by_category(products, filter_category)
    if not matches:
        LOGGER.info(f"No products in category '{filter_category}'")
        _append_markup(grid, render_empty_category())
        return 0
    for product in matches:
        _append_markup(grid, render_product_item(product, assets_dir, placeholder_image))
    LOGGER.info(f"Rendered {len(matches)} products for category '{filter_category}'")
    return len(matches)


__all__ = [
    "filter_by_category",
    "render_empty_category",
    "render_product_item",
    "render_products",
]
