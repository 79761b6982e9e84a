"""Inventoria: products, categories and storage locations kept in a spreadsheet."""

__version__ = "1.0.0"
