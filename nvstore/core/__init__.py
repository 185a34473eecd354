from __future__ import annotations

"""Store internals: flat table, file codec, path navigation, value encodings.

Callers normally only need :class:`NVStore` (re-exported by :mod:`nvstore`).
"""

from .navigation import PathNavigator, VectorFrame  # noqa: F401
from .store import NVStore, open_store  # noqa: F401
from .table import FlatTable  # noqa: F401

__all__: list[str] = [
    "FlatTable",
    "NVStore",
    "PathNavigator",
    "VectorFrame",
    "open_store",
]
