"""Shared fixtures: sources that record how they are consumed."""

import pytest


class Counting:
    """Re-iterable source that counts traversals started and elements pulled."""

    def __init__(self, items):
        self.items = list(items)
        self.starts = 0
        self.pulls = 0
        self.closed = 0

    def __iter__(self):
        self.starts += 1
        try:
            for x in self.items:
                self.pulls += 1
                yield x
        finally:
            self.closed += 1


@pytest.fixture
def counting():
    """Factory: counting([1, 2, 3]) -> Counting."""
    return Counting
