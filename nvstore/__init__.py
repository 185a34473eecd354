"""Top-level package for nvstore, a small path-addressed configuration store.

Front-ends should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core.store import NVStore, open_store  # re-export for convenience
from .fsvrc import FsvMode, read_fsv_mode, write_fsv_mode

__version__ = "1.0.0"

__all__: list[str] = [
    "NVStore",
    "open_store",
    "FsvMode",
    "read_fsv_mode",
    "write_fsv_mode",
]
