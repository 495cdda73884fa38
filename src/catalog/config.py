"""
Catalog feed configuration and settings.
"""

import os
from typing import Optional

from htmlgen.constants import DEFAULT_ASSETS_DIR, DEFAULT_CATEGORY, PLACEHOLDER_IMAGE

# Left in place until a real published-CSV URL is supplied
UNCONFIGURED_CSV_URL = "YOUR_GOOGLE_SHEET_CSV_URL_HERE"


class CatalogConfig:
    """Configuration for fetching and rendering the catalog."""

    def __init__(
        self,
        csv_url: Optional[str] = None,
        assets_dir: Optional[str] = None,
        placeholder_image: Optional[str] = None,
        default_category: Optional[str] = None,
        fetch_timeout: float = 15,
    ):
        self.csv_url = (csv_url or "").strip() or UNCONFIGURED_CSV_URL
        self.assets_dir = (assets_dir or DEFAULT_ASSETS_DIR).rstrip("/")
        self.placeholder_image = placeholder_image or PLACEHOLDER_IMAGE
        self.default_category = (default_category or DEFAULT_CATEGORY).strip().lower()
        self.fetch_timeout = float(fetch_timeout)

    @property
    def is_configured(self) -> bool:
        return UNCONFIGURED_CSV_URL not in self.csv_url

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Create config from environment variables."""
        return cls(
            csv_url=os.getenv("CATALOG_CSV_URL"),
            assets_dir=os.getenv("CATALOG_ASSETS_DIR"),
            placeholder_image=os.getenv("CATALOG_PLACEHOLDER_IMAGE"),
            default_category=os.getenv("CATALOG_DEFAULT_CATEGORY"),
            fetch_timeout=float(os.getenv("CATALOG_FETCH_TIMEOUT") or "15"),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "catalog.conf") -> "CatalogConfig":
        """Create config from a key = value configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            csv_url=config.get("csv_url"),
            assets_dir=config.get("assets_dir"),
            placeholder_image=config.get("placeholder_image"),
            default_category=config.get("default_category"),
            fetch_timeout=float(config.get("fetch_timeout") or "15"),
        )

    def __repr__(self) -> str:
        return (
            f"CatalogConfig(csv_url={self.csv_url!r}, assets_dir={self.assets_dir!r}, "
            f"default_category={self.default_category!r})"
        )
