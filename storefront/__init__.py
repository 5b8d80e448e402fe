"""Storefront dashboard: static JSON datasets rendered into sales and after-sales pages."""

__version__ = "0.1.0"
