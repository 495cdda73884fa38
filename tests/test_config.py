import unittest

import pytest

from catalog.config import CatalogConfig, UNCONFIGURED_CSV_URL


class TestCatalogConfig(unittest.TestCase):
    def test_defaults_are_unconfigured(self):
        cfg = CatalogConfig()
        self.assertEqual(cfg.csv_url, UNCONFIGURED_CSV_URL)
        self.assertFalse(cfg.is_configured)
        self.assertEqual(cfg.default_category, "furniture")
        self.assertEqual(cfg.assets_dir, "assets/images")
        self.assertEqual(cfg.fetch_timeout, 15)

    def test_missing_config_file_gives_defaults(self):
        cfg = CatalogConfig.from_config_file("/nonexistent/catalog.conf")
        self.assertFalse(cfg.is_configured)


def test_from_config_file(tmp_path):
    path = tmp_path / "catalog.conf"
    path.write_text(
        "# feed\ncsv_url = https://example.com/pub?output=csv\n\nassets_dir = static/img/\n"
        "default_category = Chair\nfetch_timeout = 3\n",
        encoding="utf-8",
    )
    cfg = CatalogConfig.from_config_file(str(path))
    assert cfg.is_configured
    assert cfg.csv_url == "https://example.com/pub?output=csv"
    assert cfg.assets_dir == "static/img"
    assert cfg.default_category == "chair"
    assert cfg.fetch_timeout == 3


def test_from_env(monkeypatch):
    monkeypatch.setenv("CATALOG_CSV_URL", "https://example.com/feed.csv")
    monkeypatch.setenv("CATALOG_FETCH_TIMEOUT", "2.5")
    cfg = CatalogConfig.from_env()
    assert cfg.is_configured
    assert cfg.fetch_timeout == pytest.approx(2.5)


def test_empty_timeout_treated_as_unset(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_FETCH_TIMEOUT", "")
    assert CatalogConfig.from_env().fetch_timeout == 15
    path = tmp_path / "catalog.conf"
    path.write_text("fetch_timeout =\n", encoding="utf-8")
    assert CatalogConfig.from_config_file(str(path)).fetch_timeout == 15
