from __future__ import annotations


class CartError(Exception):
    """Base class for every error raised by the shopping cart."""
