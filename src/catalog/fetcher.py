"""Fetch the published catalog CSV over HTTP."""

import logging
import time
from typing import List, Optional

import requests

from utils import get_user_agent
from .config import CatalogConfig
from .models import Product
from .parser import parse_csv

LOGGER = logging.getLogger(__name__)


def cache_buster() -> str:
    return str(int(time.time() * 1000))


def fetch_csv_text(config: CatalogConfig, session=None) -> Optional[str]:
    """Return the raw CSV body, or None when the feed is unreachable.

    `session` may be a requests.Session; the module-level requests API is used
    otherwise. Failures are logged, never raised.
    """
    if not config.is_configured:
        LOGGER.warning("CSV URL is not configured; skipping fetch")
        return None
    http = session or requests
    headers = {"User-Agent": get_user_agent()}
    try:
        resp = http.get(
            config.csv_url,
            params={"t": cache_buster()},
            headers=headers,
            timeout=config.fetch_timeout,
        )
        LOGGER.info(f"Fetched {config.csv_url}, status {resp.status_code}")
        if resp.status_code != 200:
            LOGGER.error(f"Failed to fetch inventory data: status {resp.status_code}")
            return None
        return resp.text
    except requests.RequestException as e:
        LOGGER.error(f"Error loading inventory from {config.csv_url}: {e}")
    return None


def fetch_inventory(config: CatalogConfig, session=None) -> List[Product]:
    text = fetch_csv_text(config, session)
    if text is None:
        return []
    return parse_csv(text)
