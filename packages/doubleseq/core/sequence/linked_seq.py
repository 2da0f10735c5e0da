"""Linked sequence of floats with a movable current element."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray

from doubleseq.core.sequence.errors import InvalidStateError, NullArgumentError, SequenceError
from doubleseq.core.sequence.node import DoubleNode, iter_nodes, list_copy_with_tail
from doubleseq.core.utils.formatting import format_value, join_elements

logger = logging.getLogger(__name__)

_NO_CURRENT = "There is no current element."


class DoubleLinkedSeq:
    """Singly-linked sequence of floats with a "current element" cursor.

    The cursor is tracked together with its predecessor (the precursor) so
    that insertion before the cursor and removal at the cursor are O(1).

    Equality compares display strings, so two sequences holding the same
    values are only equal when the same position is current.

    Example:
        >>> seq = DoubleLinkedSeq.from_iterable([1.1, 2.2, 3.3])
        >>> seq.reset_to_front()
        >>> seq.advance()
        >>> str(seq)
        '<1.1, [2.2], 3.3>'
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        """Initialize an empty sequence with no current element."""
        self._head: DoubleNode | None = None
        self._tail: DoubleNode | None = None
        self._cursor: DoubleNode | None = None
        self._precursor: DoubleNode | None = None
        self._count = 0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> DoubleLinkedSeq:
        """Build a sequence holding values in order, with no current element.

        Args:
            values: Values to append (any iterable of numbers, numpy arrays included)

        Returns:
            New sequence
        """
        seq = cls()
        for value in values:
            seq.insert_after(value)
        seq._cursor = None
        seq._precursor = None
        return seq

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def has_current(self) -> bool:
        """Return True if a current element is set."""
        return self._cursor is not None

    def current(self) -> float:
        """Return the value of the current element.

        Raises:
            InvalidStateError: If there is no current element
        """
        if self._cursor is None:
            raise InvalidStateError(_NO_CURRENT)
        return self._cursor.value

    def __iter__(self) -> Iterator[float]:
        for node in iter_nodes(self._head):
            yield node.value

    def to_array(self) -> NDArray[np.float64]:
        """Return the values head to tail as a float64 array."""
        return np.fromiter(self, dtype=np.float64, count=self._count)

    # ------------------------------------------------------------------
    # Cursor positioning
    # ------------------------------------------------------------------

    def reset_to_front(self) -> None:
        """Make the first element current (no current element if empty)."""
        self._cursor = self._head
        self._precursor = None

    def advance(self) -> None:
        """Move the cursor to the next element.

        Advancing from the last element leaves no current element.

        Raises:
            InvalidStateError: If there is no current element
        """
        if self._cursor is None:
            raise InvalidStateError(_NO_CURRENT)

        if self._cursor.link is None:
            self._cursor = None
            self._precursor = None
        else:
            self._precursor = self._cursor
            self._cursor = self._cursor.link

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_before(self, value: float) -> None:
        """Insert value before the current element, or at the front if none.

        The new element becomes current.

        Args:
            value: Value to insert
        """
        value = float(value)

        if self._count == 0:
            self._head = DoubleNode(value)
            self._tail = self._head
            self._cursor = self._head
        elif self._cursor is None or self._cursor is self._head:
            self._head = DoubleNode(value, self._head)
            self._cursor = self._head
            self._precursor = None
        else:
            assert self._precursor is not None
            self._cursor = self._precursor.add_node_after(value)

        self._count += 1

    def insert_after(self, value: float) -> None:
        """Insert value after the current element, or at the end if none.

        The new element becomes current.

        Args:
            value: Value to insert
        """
        value = float(value)

        if self._count == 0:
            self._head = DoubleNode(value)
            self._tail = self._head
            self._cursor = self._head
        elif self._cursor is None or self._cursor is self._tail:
            assert self._tail is not None
            self._precursor = self._tail
            self._tail = self._tail.add_node_after(value)
            self._cursor = self._tail
        else:
            self._precursor = self._cursor
            self._cursor = self._cursor.add_node_after(value)

        self._count += 1

    def append_all(self, other: DoubleLinkedSeq | None) -> None:
        """Append copies of other's elements to the end of this sequence.

        The current element of this sequence is unchanged and other is never
        modified. On an empty sequence this becomes a copy of other's values
        with no current element.

        Args:
            other: Sequence whose values are appended

        Raises:
            NullArgumentError: If other is None
        """
        if other is None:
            raise NullArgumentError("other sequence is None")
        if other._count == 0:
            return

        added = other._count
        head, tail = list_copy_with_tail(other._head)

        if self._tail is None:
            self._head = head
        else:
            self._tail.link = head
        self._tail = tail
        self._count += added

        logger.debug(f"Appended {added} elements (size={self._count})")

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove_current(self) -> None:
        """Remove the current element.

        The element after the removed one becomes current; removing the last
        element leaves no current element.

        Raises:
            InvalidStateError: If there is no current element
        """
        if self._cursor is None:
            raise InvalidStateError(_NO_CURRENT)

        if self._count == 1:
            self._head = None
            self._tail = None
            self._cursor = None
            self._precursor = None
        elif self._cursor is self._head:
            self._head = self._cursor.link
            self._cursor = self._head
            self._precursor = None
        elif self._cursor is self._tail:
            assert self._precursor is not None
            self._precursor.remove_node_after()
            self._tail = self._precursor
            self._cursor = None
            self._precursor = None
        else:
            assert self._precursor is not None
            self._precursor.remove_node_after()
            self._cursor = self._precursor.link

        self._count -= 1

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def _cursor_index(self) -> int | None:
        if self._cursor is None:
            return None
        for index, node in enumerate(iter_nodes(self._head)):
            if node is self._cursor:
                return index
        raise SequenceError("cursor is not reachable from head")

    def deep_copy(self) -> DoubleLinkedSeq:
        """Return an independent copy of this sequence.

        The copy has freshly allocated nodes, and its current element sits
        at the same position as this sequence's current element.
        """
        copy = DoubleLinkedSeq()
        copy._head, copy._tail = list_copy_with_tail(self._head)
        copy._count = self._count

        index = self._cursor_index()
        if index is not None:
            copy.reset_to_front()
            for _ in range(index):
                copy.advance()

        logger.debug(f"Copied sequence of {self._count} elements (cursor index={index})")
        return copy

    def __copy__(self) -> DoubleLinkedSeq:
        return self.deep_copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> DoubleLinkedSeq:
        return self.deep_copy()

    @staticmethod
    def concatenate(s1: DoubleLinkedSeq | None, s2: DoubleLinkedSeq | None) -> DoubleLinkedSeq:
        """Return a new sequence with s1's elements followed by s2's.

        The result has no current element and neither input is modified.

        Raises:
            NullArgumentError: If s1 or s2 is None
        """
        if s1 is None or s2 is None:
            raise NullArgumentError("s1 or s2 is None")

        result = DoubleLinkedSeq()
        result.append_all(s1)
        result.append_all(s2)
        return result

    # ------------------------------------------------------------------
    # Rendering & equality
    # ------------------------------------------------------------------

    def to_display_string(self) -> str:
        """Render as <e1, e2, ..., en> with the current element in [brackets]."""
        return join_elements(
            f"[{format_value(node.value)}]" if node is self._cursor else format_value(node.value)
            for node in iter_nodes(self._head)
        )

    def to_debug_string(self) -> str:
        """Render with cursor [x], precursor (x) and tail {x} marked.

        Markers only appear while a current element is set; otherwise this
        matches to_display_string().
        """
        if self._cursor is None:
            return self.to_display_string()

        def mark(node: DoubleNode) -> str:
            text = format_value(node.value)
            if node is self._cursor:
                return f"[{text}]"
            if node is self._precursor:
                return f"({text})"
            if node is self._tail:
                return f"{{{text}}}"
            return text

        return join_elements(mark(node) for node in iter_nodes(self._head))

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"DoubleLinkedSeq({self.to_display_string()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleLinkedSeq):
            return NotImplemented
        return self.to_display_string() == other.to_display_string()

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        """Verify the head/tail/cursor/count bookkeeping.

        Raises:
            SequenceError: If any structural invariant does not hold
        """
        if self._count == 0:
            if self._head is not None or self._tail is not None:
                raise SequenceError("empty sequence has head or tail set")
            if self._cursor is not None or self._precursor is not None:
                raise SequenceError("empty sequence has a cursor")
            return

        nodes = list(iter_nodes(self._head))
        if len(nodes) != self._count:
            raise SequenceError(f"count is {self._count} but chain has {len(nodes)} nodes")
        if nodes[-1] is not self._tail:
            raise SequenceError("tail is not the last node of the chain")

        if self._cursor is None:
            if self._precursor is not None:
                raise SequenceError("precursor set without a cursor")
            return

        index = self._cursor_index()
        expected = nodes[index - 1] if index else None
        if self._precursor is not expected:
            raise SequenceError("precursor is not the node before the cursor")


def concatenate(s1: DoubleLinkedSeq | None, s2: DoubleLinkedSeq | None) -> DoubleLinkedSeq:
    """Module-level alias for DoubleLinkedSeq.concatenate."""
    return DoubleLinkedSeq.concatenate(s1, s2)
