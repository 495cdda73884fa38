"""
Record models for the product catalog feed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# Column headers with a dedicated field on Product
CATEGORY_COLUMN = "Category"
NAME_COLUMN = "Name"
PRICE_COLUMN = "Price"
IMAGE_COLUMN = "ImageURL"
KNOWN_COLUMNS = (CATEGORY_COLUMN, NAME_COLUMN, PRICE_COLUMN, IMAGE_COLUMN)


class ProductParseError(Exception):
    pass


@dataclass
class Product:
    """One catalog row."""

    category: str
    name: Optional[str] = None
    price: Optional[str] = None
    image_url: Optional[str] = None
    extra: Dict[str, Optional[str]] = field(default_factory=dict)
    # Sheet header order, kept so to_dict mirrors the source row
    columns: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> "Product":
        category = row.get(CATEGORY_COLUMN)
        if not category:
            raise ProductParseError(f"Row has no {CATEGORY_COLUMN}: {dict(row)}")
        extra = {k: v for k, v in row.items() if k not in KNOWN_COLUMNS}
        return cls(
            category=category,
            name=row.get(NAME_COLUMN),
            price=row.get(PRICE_COLUMN),
            image_url=row.get(IMAGE_COLUMN),
            extra=extra,
            columns=tuple(row.keys()),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            CATEGORY_COLUMN: self.category,
            NAME_COLUMN: self.name,
            PRICE_COLUMN: self.price,
            IMAGE_COLUMN: self.image_url,
        }
        data.update(self.extra)
        if not self.columns:
            return data
        ordered = {k: data[k] for k in self.columns if k in data}
        ordered.update((k, v) for k, v in data.items() if k not in ordered)
        return ordered
