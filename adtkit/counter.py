"""Simple counters that step through integers or characters."""

from __future__ import annotations

from typing import Any


class Counter:
    """A counter that starts at a value, counts upward and resets to that value.

    Integer-like values are stepped by adding one. Single characters step to
    the next code point.
    """

    def __init__(self, start: Any = 0) -> None:
        self._start = start
        self._count = start

    @property
    def count(self) -> Any:
        """The current value of the counter."""
        return self._count

    @staticmethod
    def _next(value: Any) -> Any:
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("only single characters can be counted")
            return chr(ord(value) + 1)
        return value + 1

    def increment(self) -> None:
        """Advance the counter by one step."""
        self._count = self._next(self._count)

    def reset(self) -> None:
        """Return the counter to its reset value."""
        self._count = self._start

    def __str__(self) -> str:
        return str(self._count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._count!r})"


class IntCounter(Counter):
    """An integer counter; resetting always returns it to zero."""

    def __init__(self, value: int = 0) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("IntCounter needs an integer value")
        super().__init__(value)
        self._start = 0

    def increment(self) -> None:
        """Add one to the counter."""
        self._count += 1

    def reset(self) -> None:
        """Set the counter back to zero."""
        self._count = 0

    def __str__(self) -> str:
        return str(self._count)


class CharCounter(Counter):
    """A character counter; resetting always returns it to 'A'."""

    _RESET = "A"

    def __init__(self, value: str = _RESET) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("CharCounter needs a single character")
        super().__init__(value)
        self._start = self._RESET

    def increment(self) -> None:
        """Step to the next character."""
        self._count = chr(ord(self._count) + 1)

    def reset(self) -> None:
        """Set the counter back to 'A'."""
        self._count = self._RESET

    def __str__(self) -> str:
        return self._count