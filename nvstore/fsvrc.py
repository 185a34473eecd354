from __future__ import annotations

"""The fsv preferences file (``~/.fsvrc``).

Only the visualization mode is persisted here. It is stored as a token so the
file stays readable::

    # fsv configuration file
    /fsv/mode = mapv

Older fsv releases joined the root and ``/fsv/mode`` with an extra slash and
wrote ``//fsv/mode = mapv``. That key is still read when ``/fsv/mode`` is
absent, and is dropped the next time the mode is saved.
"""

import logging
from enum import IntEnum

from .core.store import NVStore

__all__ = [
    "CONFIG_FILE",
    "MODE_PATH",
    "LEGACY_MODE_PATH",
    "MODE_TOKENS",
    "FsvMode",
    "read_fsv_mode",
    "write_fsv_mode",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "~/.fsvrc"
MODE_PATH = "/fsv/mode"
LEGACY_MODE_PATH = "//fsv/mode"
MODE_TOKENS = ("discv", "mapv", "treev")


class FsvMode(IntEnum):
    """Visualization modes, numbered like their position in MODE_TOKENS."""

    DISCV = 0
    MAPV = 1
    TREEV = 2


def read_fsv_mode(filename: str = CONFIG_FILE, default: FsvMode = FsvMode.MAPV) -> FsvMode:
    """Return the saved visualization mode, or *default* if none is stored."""
    with NVStore.open(filename) as store:
        path = MODE_PATH if store.path_present(MODE_PATH) else LEGACY_MODE_PATH
        mode = store.read_int_token_default(path, MODE_TOKENS, int(default))
    return FsvMode(mode)


def write_fsv_mode(mode: FsvMode, filename: str = CONFIG_FILE) -> bool:
    """Save *mode*; returns False if the store could not be closed."""
    store = NVStore.open(filename)
    store.delete_recursive(LEGACY_MODE_PATH)
    store.write_int_token(MODE_PATH, int(mode), MODE_TOKENS)
    logger.debug("Saving visualization mode %s", store.read_string(MODE_PATH))
    return store.close()
