"""Category page builder.

Fills a page shell with the category title, subtitle and product grid and
returns the finished document. The shell is any HTML containing the
``#product-grid`` container; ``#category-title`` and ``#category-subtitle`` are
optional.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from urllib.parse import parse_qs

from bs4 import BeautifulSoup

from catalog import CatalogConfig, MOCK_PRODUCTS, Product, fetch_inventory
from utils import capitalize_key
from .constants import CATEGORY_TITLES, GRID_ID, SUBTITLE_ID, TITLE_ID
from .normalize import normalize_category
from .render import render_products

LOGGER = logging.getLogger(__name__)


def category_from_query(query: Optional[str], default: str) -> str:
    qs = (query or "").lstrip("?")
    values = parse_qs(qs).get("cat")
    if values and values[0].strip():
        return values[0].strip()
    return default


def page_titles(category: str) -> Tuple[str, str]:
    subtitle = capitalize_key(category)
    return CATEGORY_TITLES.get(normalize_category(category), subtitle), subtitle


def default_shell() -> str:
    html_parts = [
        "<!DOCTYPE html>",
        '<html lang="zh-Hant">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        "  <title>Collection</title>",
        '  <link rel="stylesheet" href="css/style.css">',
        "</head>",
        "<body>",
        '<nav class="navbar"><a href="index.html" class="logo">Home</a></nav>',
        '<header class="category-header fade-in-up">',
        f'  <h1 id="{TITLE_ID}"></h1>',
        f'  <p id="{SUBTITLE_ID}"></p>',
        "</header>",
        '<main class="collection">',
        f'  <div id="{GRID_ID}" class="product-grid"></div>',
        "</main>",
        '<script src="js/script.js"></script>',
        "</body>",
        "</html>",
    ]
    return "\n".join(html_parts)


class CatalogPageBuilder:
    def __init__(self, config: CatalogConfig, template_html: Optional[str] = None, session=None):
        self.config = config
        self.template_html = template_html or default_shell()
        self.session = session
        self._products: Optional[List[Product]] = None

    def load_products(self) -> List[Product]:
        if self._products is None:
            products = fetch_inventory(self.config, self.session)
            if not products:
                LOGGER.warning("Using mock data because the CSV feed is unavailable or empty.")
                products = list(MOCK_PRODUCTS)
            self._products = products
        return self._products

    def build(self, category: Optional[str] = None) -> str:
        category = category or self.config.default_category
        soup = BeautifulSoup(self.template_html, "html.parser")
        title, subtitle = page_titles(category)
        title_el = soup.find(id=TITLE_ID)
        if title_el is not None:
            title_el.string = title
        subtitle_el = soup.find(id=SUBTITLE_ID)
        if subtitle_el is not None:
            subtitle_el.string = subtitle
        render_products(
            self.load_products(),
            category,
            soup.find(id=GRID_ID),
            assets_dir=self.config.assets_dir,
            placeholder_image=self.config.placeholder_image,
        )
        return str(soup)


__all__ = ["CatalogPageBuilder", "category_from_query", "default_shell", "page_titles"]
