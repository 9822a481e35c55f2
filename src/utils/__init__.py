"""
Utilities package - Common utilities for the memory game
"""

from .once_in_ms import OnceInMs

__all__ = [
    'OnceInMs'
]
