"""Retailer store lookups"""

from .ace import AceStore, load_store

__all__ = [
    'AceStore',
    'load_store',
]
