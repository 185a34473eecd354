from __future__ import annotations

"""In-memory flat table backing an :class:`~nvstore.core.store.NVStore`.

Keys are full paths (``/fsv/mode``, ``/colors/items[0]/name``), values are
plain strings. The table has no notion of hierarchy of its own: subtrees are
found by scanning keys with an exact-boundary prefix test.
"""

from typing import Dict, Iterator, List, Optional, Tuple

__all__ = ["FlatTable", "in_subtree"]


def in_subtree(key: str, root: str) -> bool:
    """Return True if *key* is *root* itself or lies below it.

    ``/a/b`` contains ``/a/b`` and ``/a/b/c`` but not ``/a/bc``.
    """
    if not key.startswith(root):
        return False
    return len(key) == len(root) or key[len(root)] == "/"


class FlatTable:
    """Mapping of full path -> string value (last write wins)."""

    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(entries) if entries else {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"FlatTable({len(self._data)} entries)"

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def items_sorted(self) -> List[Tuple[str, str]]:
        """Return all entries ordered by key (plain code point order)."""
        return sorted(self._data.items(), key=lambda kv: kv[0])

    def has_subtree(self, root: str) -> bool:
        for key in self._data:
            if in_subtree(key, root):
                return True
        return False

    def subtree_keys(self, root: str) -> List[str]:
        return [key for key in self._data if in_subtree(key, root)]

    def remove_subtree(self, root: str) -> int:
        """Delete *root* and every key below it; return how many were removed."""
        doomed = self.subtree_keys(root)
        for key in doomed:
            del self._data[key]
        return len(doomed)

    def clear(self) -> None:
        self._data.clear()
