"""Data model for the todo store file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from todo.errors import ParseError

# ASCII digits only; int() alone would also take "١٢", " 1" and "1_000"
_INDEX_RE = re.compile(r"[+-]?[0-9]+")
# Indices must fit a signed 64-bit integer, larger tokens count as overflow.
_INDEX_MAX = 2**63 - 1
_INDEX_MIN = -(2**63)


@dataclass(frozen=True, order=True)
class Entry:
    """One todo line: ``<index> <content>``.

    Equality and ordering look at ``index`` only, so two entries sharing an
    index compare equal whatever their text.
    """

    index: int
    content: str = field(default="", compare=False)

    @classmethod
    def from_line(cls, line: str, lineno: int | None = None) -> Entry:
        """Parse a stored line. Raises ParseError if the first token is not an integer."""
        tokens = line.removesuffix("\r").split(" ")
        head = tokens[0]
        if _INDEX_RE.fullmatch(head) is None:
            raise ParseError(line, lineno)
        try:
            index = int(head, 10)
        except ValueError as exc:
            # past sys.get_int_max_str_digits()
            raise ParseError(line, lineno) from exc
        if not _INDEX_MIN <= index <= _INDEX_MAX:
            raise ParseError(line, lineno)
        return cls(index=index, content=" ".join(tokens[1:]))

    def to_line(self) -> str:
        return f"{self.index} {self.content}"

    def display(self) -> str:
        return f"{self.index}. {self.content}"
