from __future__ import annotations

import typing


class SequenceError(Exception):
    """Base class for every error raised while traversing a sequence."""


class CardinalityError(SequenceError, ValueError):
    """The sequence has a different number of elements than required."""

    expected: str
    actual: int | None

    def __init__(self, expected: str, actual: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        found = "" if actual is None else f", found {actual}"
        super().__init__(f"Expected {expected} element(s){found}")


class EmptySequenceError(CardinalityError):
    """A reduction that needs at least one element got an empty sequence."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("at least 1", 0)
        self.args = (f"Can't {operation} an empty sequence",)


class IndexOutOfRangeError(SequenceError, IndexError):
    """Index points before the beginning or after the end of the sequence."""

    index: int

    def __init__(self, index: int, message: str | None = None) -> None:
        self.index = index
        super().__init__(message or f"Index {index} is out of the sequence bounds")

    @classmethod
    def before_begin(cls, index: int) -> IndexOutOfRangeError:
        return cls(index, f"Index {index} points before the beginning of the sequence")

    @classmethod
    def after_end(cls, index: int) -> IndexOutOfRangeError:
        return cls(index, f"Index {index} points after the end of the sequence")


class ReuseError(SequenceError, RuntimeError):
    """A run-once sequence was traversed a second time."""

    def __init__(self) -> None:
        super().__init__("This sequence can only be traversed once")


class DuplicateError(SequenceError, ValueError):
    """A strict conversion met the same key twice."""

    key: typing.Any
    subject: str

    def __init__(self, key: typing.Any, subject: str) -> None:
        self.key = key
        self.subject = subject
        super().__init__(f"Duplicates are not allowed in {subject}: {key!r}")


__all__ = (
    "CardinalityError",
    "DuplicateError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "ReuseError",
    "SequenceError",
)
