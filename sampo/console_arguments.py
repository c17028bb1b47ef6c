"""Parsing of ``-key value`` pairs from a command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_instance: ConsoleArguments | None = None


def _to_int(text: str) -> int:
    """Read the leading integer of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class ConsoleArguments:
    """Key/value arguments given as ``-key value`` on the command line.

    A key needs a value after it that does not itself start with ``-``.
    When a key is given more than once, the first value is kept.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        self._arguments: dict[str, str] = {}
        self._parse(list(argv))

    def _parse(self, argv: list[str]) -> None:
        if len(argv) <= 1:
            return
        tokens = iter(zip(argv, argv[1:]))
        for key, value in tokens:
            if not key.startswith("-") or value.startswith("-"):
                continue
            self._arguments.setdefault(key[1:], value)
            next(tokens, None)

    def clear(self) -> None:
        """Forget every parsed argument."""
        self._arguments.clear()

    def has_argument(self, key: str) -> bool:
        """Whether ``key`` was given."""
        return key in self._arguments

    def _find(self, key: str) -> str | None:
        value = self._arguments.get(key)
        return value or None

    def get_int(self, key: str) -> int | None:
        """The value of ``key`` read as an integer, or None if absent or empty."""
        value = self._find(key)
        return None if value is None else _to_int(value)

    def get_string(self, key: str) -> str | None:
        """The value of ``key``, or None if absent or empty."""
        return self._find(key)


def create(argv: Sequence[str]) -> bool:
    """Create the shared instance; False if one already exists."""
    global _instance
    if _instance is not None:
        return False
    _instance = ConsoleArguments(argv)
    return True


def get_instance() -> ConsoleArguments:
    """Return the shared instance."""
    if _instance is None:
        raise RuntimeError("ConsoleArguments instance does not exist")
    return _instance


def shutdown() -> None:
    """Clear and drop the shared instance."""
    global _instance
    if _instance is None:
        raise RuntimeError("ConsoleArguments instance does not exist")
    _instance.clear()
    _instance = None