"""YAML-based request definitions for record generation."""

from .request_loader import EXAMPLE_REQUEST_NAME, RequestLoader

__all__ = [
    "EXAMPLE_REQUEST_NAME",
    "RequestLoader",
]
