"""Chunk combinator"""

from __future__ import annotations

import itertools
import typing
from collections.abc import Iterator
from dataclasses import dataclass

from .._helpers import hint_of, opened
from .._types import LengthHint
from ..source import FixedSeq, SourceSeq


@dataclass(frozen=True, slots=True, eq=False)
class ChunkSeq[T](SourceSeq[T, FixedSeq[T]]):
    """
    Output of chunk(): consecutive groups of `size` elements.

    The last group is shorter unless `pad` completes it with `fill`.
    """

    size: int
    pad: bool = False
    pad_value: T | None = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("ChunkSeq.size must be >= 1")

    def __iter__(self) -> Iterator[FixedSeq[T]]:
        with opened(self.source) as it:
            while True:
                block = tuple(itertools.islice(it, self.size))
                if not block:
                    return
                short = len(block) < self.size
                if short and self.pad:
                    block += (typing.cast("T", self.pad_value),) * (self.size - len(block))
                yield FixedSeq(block)
                if short:
                    return

    @property
    def length_hint(self) -> LengthHint:
        hint = hint_of(self.source)
        return None if hint is None else -(-hint // self.size)


__all__ = ("ChunkSeq",)
