"""Naive CSV parsing for the published catalog sheet.

The feed is split on newlines and commas only; quoted cells containing commas
are not supported.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from .models import Product, ProductParseError

LOGGER = logging.getLogger(__name__)


def split_rows(text: str) -> List[List[str]]:
    # Rows end at "\n" only; other Unicode line breaks stay inside cells
    lines = [line for line in text.replace("\r\n", "\n").split("\n") if line.strip()]
    return [[cell.strip() for cell in line.split(",")] for line in lines]


def parse_csv(text: str | None) -> List[Product]:
    if not text:
        return []
    rows = split_rows(text)
    if not rows:
        return []
    headers = rows[0]
    products: List[Product] = []
    for values in rows[1:]:
        # Short rows leave the trailing columns as None
        entry: Dict[str, Optional[str]] = {
            header: (values[idx] if idx < len(values) else None)
            for idx, header in enumerate(headers)
        }
        try:
            products.append(Product.from_row(entry))
        except ProductParseError as e:
            LOGGER.debug(f"Skipping row: {e}")
    LOGGER.info(f"Parsed {len(products)} products from {len(rows) - 1} rows")
    return products


__all__ = ["parse_csv", "split_rows"]
