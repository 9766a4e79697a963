"""
Storage layer. MemoryStorage is the only backend; it is constructed once
per application and handed to routes through dependency injection.
"""

from minesentry.storage.memory import MemoryStorage

__all__ = ["MemoryStorage"]
