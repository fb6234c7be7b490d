"""TodoConfig: what one invocation was asked to do.

There is no config file and no environment lookup. Everything comes from the
positional arguments:

    todo list
    todo add Buy milk      # verb="add", noun="Buy milk"

The store path is fixed per run (``todo.txt`` in the working directory) but is
a field so callers such as tests can point it elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from todo.errors import NotEnoughArgumentsError

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_STORE_PATH = Path("todo.txt")


@dataclass(frozen=True)
class TodoConfig:
    """Resolved command for a single run."""

    verb: str
    noun: str | None = None
    store_path: Path = field(default=DEFAULT_STORE_PATH)

    @classmethod
    def from_args(cls, args: Sequence[str], store_path: Path | str | None = None) -> TodoConfig:
        """Resolve ``[program, verb, *words]``. The verb itself is not checked here."""
        if len(args) < 2:
            raise NotEnoughArgumentsError
        rest = args[2:]
        return cls(
            verb=args[1],
            noun=" ".join(rest) if rest else None,
            store_path=Path(store_path) if store_path is not None else DEFAULT_STORE_PATH,
        )
