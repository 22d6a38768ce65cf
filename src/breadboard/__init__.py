"""Breadboard: B2B bakery storefront backend."""

__version__ = "0.1.0"
