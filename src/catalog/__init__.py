"""Product catalog feed: configuration, fetching & parsing."""

from .config import CatalogConfig, UNCONFIGURED_CSV_URL  # noqa: F401
from .fetcher import fetch_csv_text, fetch_inventory  # noqa: F401
from .mock import MOCK_PRODUCTS  # noqa: F401
from .models import Product, ProductParseError  # noqa: F401
from .parser import parse_csv  # noqa: F401

__all__ = [
    "CatalogConfig",
    "UNCONFIGURED_CSV_URL",
    "fetch_csv_text",
    "fetch_inventory",
    "MOCK_PRODUCTS",
    "Product",
    "ProductParseError",
    "parse_csv",
]
