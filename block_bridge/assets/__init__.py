"""Stylesheet and script aggregation."""

from .aggregator import ADDRESS_ATTRIBUTE, AssetAggregator, address_selector, iter_addressed
from .stylesheets import BASE_STYLESHEET, RESPONSIVE_STYLESHEET

__all__ = [
    "ADDRESS_ATTRIBUTE",
    "AssetAggregator",
    "BASE_STYLESHEET",
    "RESPONSIVE_STYLESHEET",
    "address_selector",
    "iter_addressed",
]
