"""todo CLI: numbered todo list kept in ./todo.txt.

Commands:
    todo list              print entries sorted by index
    todo add TEXT...       append TEXT under the next free index
"""

from __future__ import annotations

import logging

import click

from todo.config import TodoConfig
from todo.errors import InvalidCommandError, NotEnoughArgumentsError, TodoError
from todo.store import TodoStore

logger = logging.getLogger("todo.cli")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _list(store: TodoStore) -> None:
    for entry in store.list_entries():
        click.echo(entry.display())


def _add(store: TodoStore, noun: str | None) -> None:
    if noun is None:
        raise NotEnoughArgumentsError
    store.add(noun)


def dispatch(config: TodoConfig, store: TodoStore | None = None) -> None:
    """Route ``config.verb`` to the store. Raises TodoError on any failure."""
    store = store or TodoStore(config.store_path)
    logger.debug("dispatch verb=%s store=%s", config.verb, store.path)
    if config.verb == "list":
        _list(store)
    elif config.verb == "add":
        _add(store, config.noun)
    else:
        raise InvalidCommandError(config.verb)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """todo: list or add numbered entries in ./todo.txt.

    \b
    todo list
    todo add Buy milk
    """
    try:
        config = TodoConfig.from_args([ctx.info_name or "todo", *args])
        dispatch(config)
    except TodoError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(message)s")
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
