"""
Local key-value storage and the translation store built on top of it
"""

from .local_storage import (
    FileLocalStorage,
    MemoryLocalStorage,
    StorageBackend,
    create_local_storage,
)
from .translation_store import TranslationStore, create_translation_store

__all__ = [
    "FileLocalStorage",
    "MemoryLocalStorage",
    "StorageBackend",
    "TranslationStore",
    "create_local_storage",
    "create_translation_store",
]
