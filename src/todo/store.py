"""Read and append the todo.txt store file.

TodoStore is the public API:
    store = TodoStore("todo.txt")
    for entry in store.list_entries():
        print(entry.display())
    store.add("Buy milk")

File layout: one entry per line, ``<index> <content>``, newline terminated.
Lines are kept in the order they were appended; sorting happens on read.

Concurrent writes: add() holds flock(LOCK_EX) from read to append so two
processes cannot hand out the same index. list_entries() reads under LOCK_SH.
"""

from __future__ import annotations

import fcntl
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from todo.errors import NotEnoughArgumentsError, StoreIOError
from todo.models import Entry

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("todo.store")


def parse_entries(text: str) -> list[Entry]:
    """Parse store text into entries in file order. Stops at the first bad line."""
    entries: list[Entry] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        entries.append(Entry.from_line(line, lineno))
    return entries


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Sort by index; entries sharing an index keep their input order."""
    return sorted(entries)


def next_index(entries: Iterable[Entry]) -> int:
    """Return the first gap in the run 1, 2, 3, ... of the sorted entries.

    The scan stops at the first entry that does not match the expected
    index, so {1, 3, 4} gives 2 and {1, 1, 2} gives 2 as well.
    """
    candidate = 1
    for entry in entries:
        if entry.index != candidate:
            break
        candidate += 1
    return candidate


class TodoStore:
    """Flat-file todo store."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read_entries(self) -> list[Entry]:
        """Load entries in file order. A missing file is an error, not an empty list."""
        try:
            with self.path.open(encoding="utf-8") as f:
                fcntl.flock(f, fcntl.LOCK_SH)
                text = f.read()
        except (OSError, UnicodeError) as exc:
            raise StoreIOError(self.path, exc) from exc
        entries = parse_entries(text)
        logger.debug("read %d entries from %s", len(entries), self.path)
        return entries

    def list_entries(self) -> list[Entry]:
        """Load all entries sorted by index. The file itself is left untouched."""
        return sort_entries(self.read_entries())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add(self, content: str | None) -> Entry:
        """Append ``content`` under the next free index and return the new entry.

        Creates the store file if it does not exist. Nothing is written if the
        existing contents fail to parse.
        """
        if content is None:
            raise NotEnoughArgumentsError

        try:
            with self.path.open("a+", encoding="utf-8") as f:
                fcntl.flock(f, fcntl.LOCK_EX)
                f.seek(0)
                text = f.read()
                entry = Entry(index=next_index(sort_entries(parse_entries(text))), content=content)
                line = entry.to_line() + "\n"
                if text and not text.endswith("\n"):
                    line = "\n" + line
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except (OSError, UnicodeError) as exc:
            raise StoreIOError(self.path, exc) from exc

        logger.info("added entry %d to %s", entry.index, self.path)
        return entry
