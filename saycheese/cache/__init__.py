"""Caching utilities."""

from .ttl import TTLCache

__all__ = ["TTLCache"]
