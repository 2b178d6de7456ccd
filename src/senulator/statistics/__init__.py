"""Weighted sampling for category selection."""

from .alias import AliasTable

__all__ = [
    "AliasTable",
]
