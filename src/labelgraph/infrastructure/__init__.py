"""Infrastructure components shared by the core graph modules."""

from .cache import LRUCache

__all__ = ["LRUCache"]
