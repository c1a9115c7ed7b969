# helper_arcade/games/core/store_registry.py
from __future__ import annotations
from typing import Callable, TypeVar
from flask import current_app

T = TypeVar("T")


def get_store(key: str, factory: Callable[[], T]) -> T:
    """One lazily-built object per app, kept in current_app.extensions[key]."""
    ext = current_app.extensions
    store: T | None = ext.get(key)
    if store is None:
        store = factory()
        ext[key] = store
    return store
