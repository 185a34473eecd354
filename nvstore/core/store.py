from __future__ import annotations

"""Path-addressed configuration store.

An :class:`NVStore` is opened on a file, navigated and read/written by path,
then closed, which writes the file back if anything changed::

    with NVStore.open("~/.fsvrc") as store:
        mode = store.read_int_token_default("fsv/mode", MODE_TOKENS, 1)
        store.write_int_token("fsv/mode", 2, MODE_TOKENS)

Reads never fail: a missing key, an unparsable value or an unreadable file
all produce the zero value or the caller's default. Writes only touch memory
until :meth:`NVStore.close`; if the file cannot be written at that point the
changes are dropped with a warning in the log.

A store belongs to one caller. There is no locking; two stores open on the
same file do not see each other and the last one closed wins.
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from . import values
from .codec import read_table, write_table
from .navigation import PathNavigator
from .table import FlatTable

__all__ = ["NVStore", "open_store", "expand_filename"]

logger = logging.getLogger(__name__)


def expand_filename(filename: Union[str, "os.PathLike[str]"]) -> str:
    """Replace a leading ``~/`` with the user's home directory."""
    filename = os.fspath(filename)
    if filename.startswith("~/"):
        return str(Path.home()) + filename[1:]
    return filename


class NVStore:
    """In-memory view of one configuration file.

    Parameters
    ----------
    filename : str or os.PathLike
        File to load and, on close, to write back. A leading ``~/`` is
        expanded once here; the store keeps using that path afterwards.

    Notes
    -----
    Typed accessors resolve *path* against :attr:`current_path` without any
    vector handling. To read fields of a vector element, ``change_path`` into
    the element first and read relative to it.
    """

    def __init__(self, filename: Union[str, "os.PathLike[str]"]) -> None:
        self._filename: str = expand_filename(filename)
        self._nav = PathNavigator()
        self._table: FlatTable = read_table(self._filename)
        self._dirty: bool = False
        self._closed: bool = False
        logger.debug("Opened %s (%d entries)", self._filename, len(self._table))

    @classmethod
    def open(cls, filename: Union[str, "os.PathLike[str]"]) -> "NVStore":
        return cls(filename)

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"path={self.current_path!r}"
        return f"<NVStore {self._filename!r} {state}>"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def __enter__(self) -> "NVStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def current_path(self) -> str:
        return self._nav.current_path

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def vector_depth(self) -> int:
        return self._nav.depth

    @property
    def table(self) -> FlatTable:
        return self._table

    def close(self) -> bool:
        """Write the file if modified and release all state.

        Returns True if the store was open. A failed write is logged, not
        reported here.
        """
        if self._closed:
            return False

        if self._dirty:
            if write_table(self._filename, self._table):
                logger.info("Saved %d entries to %s", len(self._table), self._filename)
            else:
                logger.warning("Changes to %s were not saved", self._filename)

        if self._nav.depth:
            logger.debug("Discarding %d open vector frame(s) on close", self._nav.depth)
        self._nav.reset()
        self._table.clear()
        self._dirty = False
        self._closed = True
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def change_path(self, segment: str) -> None:
        """Descend into *segment*, or ascend one level with ``".."``."""
        if self._closed:
            return
        self._nav.change_path(segment)

    def vector_begin(self) -> None:
        if self._closed:
            return
        self._nav.vector_begin()

    def vector_end(self) -> None:
        if self._closed:
            return
        self._nav.vector_end()

    @contextmanager
    def vector(self) -> Iterator["NVStore"]:
        """``vector_begin``/``vector_end`` as a ``with`` block."""
        self.vector_begin()
        try:
            yield self
        finally:
            self.vector_end()

    @contextmanager
    def descend(self, segment: str) -> Iterator["NVStore"]:
        """``change_path(segment)`` for the duration of a ``with`` block.

        Leaves with a single ``".."``, so *segment* must be one path component.
        """
        self.change_path(segment)
        try:
            yield self
        finally:
            self.change_path("..")

    def path_present(self, segment: str) -> bool:
        """Return True if *segment* (or anything below it) holds a value.

        Inside a vector scope this checks the next element, e.g. ``items[2]``.
        """
        if self._closed:
            return False
        return self._table.has_subtree(self._nav.probe(segment))

    def delete_recursive(self, path: str) -> None:
        """Remove *path* and everything below it; ``"."`` means the current path."""
        if self._closed:
            return
        root = self._nav.subtree_root(path)
        removed = self._table.remove_subtree(root)
        if removed:
            logger.debug("Deleted %d entries under %s", removed, root)
            self._dirty = True

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------
    def _lookup(self, path: str) -> Optional[str]:
        if self._closed:
            return None
        return self._table.get(self._nav.resolve(path))

    def _store(self, path: str, value: str) -> None:
        if self._closed:
            return
        self._table.set(self._nav.resolve(path), value)
        self._dirty = True

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------
    def read_boolean(self, path: str) -> bool:
        return self.read_boolean_default(path, False)

    def read_boolean_default(self, path: str, default: bool) -> bool:
        text = self._lookup(path)
        if text is None:
            return default
        return values.parse_boolean(text)

    def read_int(self, path: str) -> int:
        return self.read_int_default(path, 0)

    def read_int_default(self, path: str, default: int) -> int:
        text = self._lookup(path)
        if text is None:
            return default
        return values.parse_int(text)

    def read_int_token(self, path: str, tokens: Sequence[str]) -> int:
        return self.read_int_token_default(path, tokens, 0)

    def read_int_token_default(self, path: str, tokens: Sequence[str], default: int) -> int:
        """Return the index of the stored token, *default* if missing or unknown."""
        text = self._lookup(path)
        if text is None:
            return default
        index = values.token_index(text, tokens)
        return default if index is None else index

    def read_float(self, path: str) -> float:
        return self.read_float_default(path, 0.0)

    def read_float_default(self, path: str, default: float) -> float:
        text = self._lookup(path)
        if text is None:
            return default
        return values.parse_float(text)

    def read_string(self, path: str) -> str:
        return self.read_string_default(path, "")

    def read_string_default(self, path: str, default: str) -> str:
        text = self._lookup(path)
        if text is None:
            return default
        return text

    # ------------------------------------------------------------------
    # Typed writes
    # ------------------------------------------------------------------
    def write_boolean(self, path: str, value: bool) -> None:
        self._store(path, values.format_boolean(value))

    def write_int(self, path: str, value: int) -> None:
        self._store(path, values.format_int(value))

    def write_int_token(self, path: str, value: int, tokens: Sequence[str]) -> None:
        self._store(path, values.format_int_token(value, tokens))

    def write_float(self, path: str, value: float) -> None:
        self._store(path, values.format_float(value))

    def write_string(self, path: str, value: str) -> None:
        self._store(path, value)


def open_store(filename: Union[str, "os.PathLike[str]"]) -> NVStore:
    """Open *filename* as a store (a missing file gives an empty store)."""
    return NVStore.open(filename)
