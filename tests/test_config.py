from __future__ import annotations

import unittest
from pathlib import Path

from todo.config import DEFAULT_STORE_PATH, TodoConfig
from todo.errors import NotEnoughArgumentsError


class TestTodoConfig(unittest.TestCase):
    def test_noun_joins_remaining_words(self) -> None:
        config = TodoConfig.from_args(["prog", "add", "Buy", "milk"])
        self.assertEqual("add", config.verb)
        self.assertEqual("Buy milk", config.noun)

    def test_verb_only_has_no_noun(self) -> None:
        config = TodoConfig.from_args(["prog", "add"])
        self.assertEqual("add", config.verb)
        self.assertIsNone(config.noun)

    def test_missing_verb_raises(self) -> None:
        with self.assertRaises(NotEnoughArgumentsError) as ctx:
            TodoConfig.from_args(["prog"])
        self.assertEqual("Not enough arguments", str(ctx.exception))

    def test_unknown_verb_is_not_rejected_here(self) -> None:
        self.assertEqual("delete", TodoConfig.from_args(["prog", "delete"]).verb)

    def test_store_path_defaults_and_can_be_injected(self) -> None:
        self.assertEqual(DEFAULT_STORE_PATH, TodoConfig.from_args(["prog", "list"]).store_path)
        config = TodoConfig.from_args(["prog", "list"], store_path="/tmp/other.txt")
        self.assertEqual(Path("/tmp/other.txt"), config.store_path)


if __name__ == "__main__":
    unittest.main()
