from __future__ import annotations

"""Reader and writer for the flat ``path = value`` configuration format.

The on-disk format is line oriented::

    # fsv configuration file
    /fsv/mode = mapv
    /window/width = 640

Blank lines and ``#`` comments are ignored, the key is everything before the
first ``=``, the value everything after it, both trimmed. Nothing is escaped:
a value containing a newline or starting with ``#`` does not survive a round
trip. Output is always sorted by key so that rewrites are deterministic.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .table import FlatTable

__all__ = [
    "FILE_HEADER",
    "parse_line",
    "parse_lines",
    "read_table",
    "format_table",
    "write_table",
]

logger = logging.getLogger(__name__)

FILE_HEADER = "# fsv configuration file"

_KEY_BLANKS = " \t"
_VALUE_TRAILING = " \t\r\n"

PathLike = Union[str, Path]

# Undecodable bytes survive a read/write cycle unchanged.
_ENCODING_ERRORS = "surrogateescape"


def _is_content(line: str) -> bool:
    body = line.lstrip(_KEY_BLANKS)
    return bool(body) and body[0] not in "#\r\n"


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Split one line into ``(key, value)``.

    Returns None for blank lines, comments, lines without ``=`` and lines with
    an empty key.
    """
    if not _is_content(line):
        return None

    key, sep, value = line.lstrip(_KEY_BLANKS).partition("=")
    if not sep:
        return None

    key = key.rstrip(_KEY_BLANKS)
    if not key:
        return None
    return key, value.lstrip(_KEY_BLANKS).rstrip(_VALUE_TRAILING)


def parse_lines(lines: Iterable[str], table: Optional[FlatTable] = None) -> FlatTable:
    """Parse *lines* into *table* (a new one if omitted); later keys win."""
    if table is None:
        table = FlatTable()

    for lineno, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is not None:
            table.set(*entry)
        elif _is_content(line):
            logger.debug("Skipping malformed line %d: %r", lineno, line)
    return table


def read_table(path: PathLike) -> FlatTable:
    """Load *path* into a new table.

    A missing or unreadable file yields an empty table; this never raises for
    I/O problems. Bytes that are not valid UTF-8 are carried through as
    surrogate escapes so that :func:`write_table` puts them back unchanged.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors=_ENCODING_ERRORS)
    except FileNotFoundError:
        logger.debug("No configuration file at %s, starting empty", path)
        return FlatTable()
    except OSError as exc:
        logger.warning("Could not read configuration file %s: %s", path, exc)
        return FlatTable()

    # Split on LF only; a stray CR stays on the line and is trimmed from values.
    return parse_lines(text.split("\n"))


def format_table(table: FlatTable) -> str:
    """Render *table* in file format: header line, then sorted entries."""
    out = [FILE_HEADER]
    for key, value in table.items_sorted():
        out.append(f"{key} = {value}")
    return "\n".join(out) + "\n"


def write_table(path: PathLike, table: FlatTable) -> bool:
    """Overwrite *path* with *table*; return False if the file could not be written.

    The new content goes to a sibling temp file which then replaces *path*,
    so a failed write leaves the previous file intact.
    """
    path = Path(path)
    try:
        payload = format_table(table).encode("utf-8", errors=_ENCODING_ERRORS)
    except UnicodeError as exc:
        logger.warning("Could not encode configuration for %s: %s", path, exc)
        return False

    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_bytes(payload)
        os.replace(tmp, path)
    except OSError as exc:
        logger.warning("Could not write configuration file %s: %s", path, exc)
        try:
            tmp.unlink()
        except OSError:
            pass
        return False
    return True
