from __future__ import annotations

"""Working-path state and vector addressing for a store.

A :class:`PathNavigator` keeps the store's current path (``""`` for the root,
otherwise ``/a/b`` without a trailing slash) and a stack of
:class:`VectorFrame` objects.

Vector addressing
-----------------
Between :meth:`PathNavigator.vector_begin` and :meth:`PathNavigator.vector_end`
the first segment navigated to names the repeated field. Each later
navigation to that same segment appends ``name[N]`` with N counting up from 0.
Only the innermost frame is consulted.

The indexed segment is appended to the path that is current *at call time*,
so callers iterating over elements must ascend with ``".."`` after each one;
otherwise elements nest (``/items[0]/items[1]``) instead of being siblings.
"""

from dataclasses import dataclass
from typing import List, Optional

__all__ = ["VectorFrame", "PathNavigator", "PARENT", "CURRENT"]

PARENT = ".."
CURRENT = "."


@dataclass
class VectorFrame:
    """Iteration state of one ``vector_begin``/``vector_end`` scope."""

    key_prefix: Optional[str] = None
    counter: int = 0

    def claim(self, segment: str) -> bool:
        """Adopt *segment* as the field name if unset; report whether it matches."""
        if self.key_prefix is None:
            self.key_prefix = segment
        return segment == self.key_prefix

    def next_index(self) -> int:
        index = self.counter
        self.counter += 1
        return index


class PathNavigator:
    """Resolve relative segments against a current path.

    No normalisation is done: segments are expected to be single, well formed
    path components (or ``".."`` for :meth:`change_path`).
    """

    def __init__(self) -> None:
        self._current_path: str = ""
        # Most recent frame last.
        self._frames: List[VectorFrame] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def depth(self) -> int:
        """Number of open vector frames."""
        return len(self._frames)

    @property
    def top_frame(self) -> Optional[VectorFrame]:
        return self._frames[-1] if self._frames else None

    def reset(self) -> None:
        self._current_path = ""
        self._frames.clear()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve(self, segment: str) -> str:
        """Return the full path of *segment* below the current path.

        A segment that already starts with ``/`` supplies its own separator,
        so ``resolve("/fsv/mode")`` at the root is ``/fsv/mode``.
        """
        if segment.startswith("/"):
            return self._current_path + segment
        return f"{self._current_path}/{segment}"

    def _indexed(self, segment: str, index: int) -> str:
        return f"{self.resolve(segment)}[{index}]"

    def _matching_frame(self, segment: str) -> Optional[VectorFrame]:
        frame = self.top_frame
        if frame is None or not frame.claim(segment):
            return None
        return frame

    def change_path(self, segment: str) -> None:
        """Move the current path.

        ``".."`` drops the last component (a no-op at the root, vector frames
        are ignored). Inside a vector scope the frame's field name gets an
        index suffix; anything else is appended as a plain child segment.
        """
        if segment == PARENT:
            cut = self._current_path.rfind("/")
            if cut >= 0:
                self._current_path = self._current_path[:cut]
            return

        frame = self._matching_frame(segment)
        if frame is not None:
            self._current_path = self._indexed(segment, frame.next_index())
            return

        self._current_path = self.resolve(segment)

    def probe(self, segment: str) -> str:
        """Return the path :meth:`change_path` would move to, without moving.

        Inside a vector scope the candidate carries the frame's current index,
        and the index is left alone: the usual loop is "probe element N, then
        ``change_path`` into it", which is what advances the counter.
        Probing may still name the frame's field if it had none yet.
        """
        frame = self._matching_frame(segment)
        if frame is not None:
            return self._indexed(segment, frame.counter)
        return self.resolve(segment)

    def subtree_root(self, path: str) -> str:
        """Root of a recursive delete: ``"."`` is the current path itself."""
        if path == CURRENT:
            return self._current_path
        return self.resolve(path)

    # ------------------------------------------------------------------
    # Vector frames
    # ------------------------------------------------------------------
    def vector_begin(self) -> VectorFrame:
        frame = VectorFrame()
        self._frames.append(frame)
        return frame

    def vector_end(self) -> Optional[VectorFrame]:
        """Close the innermost vector scope; no-op when none is open."""
        if not self._frames:
            return None
        return self._frames.pop()
