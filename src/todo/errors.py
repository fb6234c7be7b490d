"""Exceptions raised by the todo store and dispatcher.

Every failure is terminal for the invocation. The library raises these;
only ``todo.cli`` turns them into a non-zero exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TodoError(Exception):
    """Base class for all todo failures."""


class NotEnoughArgumentsError(TodoError):
    """No verb was given, or ``add`` was given no text."""

    def __init__(self) -> None:
        super().__init__("Not enough arguments")


class InvalidCommandError(TodoError):
    """The verb is not one of the known commands."""

    def __init__(self, verb: str) -> None:
        super().__init__("Invalid command")
        self.verb = verb


class StoreIOError(TodoError):
    """The store file could not be opened, read, written or decoded as UTF-8."""

    def __init__(self, path: Path, cause: OSError | UnicodeError) -> None:
        reason = cause.strerror if isinstance(cause, OSError) else None
        super().__init__(f"{path}: {reason or cause}")
        self.path = path


class ParseError(TodoError):
    """A stored line does not start with an integer index."""

    def __init__(self, line: str, lineno: int | None = None) -> None:
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}invalid index in {line!r}")
        self.line = line
        self.lineno = lineno
