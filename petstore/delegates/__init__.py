from __future__ import annotations

from .base import StoreApiDelegate
from .default import DefaultStoreApiDelegate
from .loader import load_delegate

__all__ = [
    "DefaultStoreApiDelegate",
    "StoreApiDelegate",
    "load_delegate",
]
