"""Shared pytest fixtures for doubleseq tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from doubleseq.core.sequence import DoubleLinkedSeq

# ============================================================================
# Sequence Fixtures
# ============================================================================


@pytest.fixture
def empty_seq() -> DoubleLinkedSeq:
    """Create an empty sequence."""
    return DoubleLinkedSeq()


@pytest.fixture
def three_seq() -> DoubleLinkedSeq:
    """Create <1.1, 2.2, 3.3> with no current element."""
    return DoubleLinkedSeq.from_iterable([1.1, 2.2, 3.3])


@pytest.fixture
def five_seq() -> DoubleLinkedSeq:
    """Create <1.0, 2.0, 3.0, 4.0, 5.0> with no current element."""
    return DoubleLinkedSeq.from_iterable([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def move_to() -> Callable[[DoubleLinkedSeq, int], DoubleLinkedSeq]:
    """Return a helper that makes the element at an index current."""

    def _move(seq: DoubleLinkedSeq, index: int) -> DoubleLinkedSeq:
        seq.reset_to_front()
        for _ in range(index):
            seq.advance()
        return seq

    return _move
