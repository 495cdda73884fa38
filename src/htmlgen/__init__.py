"""Catalog page HTML generation."""
