"""Flat-file todo list: ./todo.txt is the whole database.

Layout:
    todo.txt
        2 Something else
        1 Something
        4 Another thing

Each line is ``<index> <content>``. Indices are positive integers chosen by
``add`` (first gap in 1, 2, 3, ...); the file keeps append order and ``list``
sorts on the way out. Duplicate indices are tolerated on read.

Concurrent writes: add() holds flock(LOCK_EX) on todo.txt while it reads,
picks the index and appends.
"""

from todo.config import DEFAULT_STORE_PATH, TodoConfig
from todo.errors import (
    InvalidCommandError,
    NotEnoughArgumentsError,
    ParseError,
    StoreIOError,
    TodoError,
)
from todo.models import Entry
from todo.store import TodoStore, next_index, parse_entries, sort_entries

__all__ = [
    "DEFAULT_STORE_PATH",
    "Entry",
    "InvalidCommandError",
    "NotEnoughArgumentsError",
    "ParseError",
    "StoreIOError",
    "TodoConfig",
    "TodoError",
    "TodoStore",
    "next_index",
    "parse_entries",
    "sort_entries",
]
