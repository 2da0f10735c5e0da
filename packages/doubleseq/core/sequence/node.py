"""Singly-linked node holding one float value."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class DoubleNode:
    """Link in a sequence chain.

    Nodes compare by identity: two nodes with equal values are still
    different positions in a chain.
    """

    value: float
    link: DoubleNode | None = None

    def add_node_after(self, value: float) -> DoubleNode:
        """Splice a new node directly after this one.

        Args:
            value: Value for the new node

        Returns:
            The new node
        """
        self.link = DoubleNode(value, self.link)
        return self.link

    def remove_node_after(self) -> None:
        """Unlink this node's successor (no-op at the end of a chain)."""
        if self.link is not None:
            self.link = self.link.link


def iter_nodes(head: DoubleNode | None) -> Iterator[DoubleNode]:
    node = head
    while node is not None:
        yield node
        node = node.link


def list_length(head: DoubleNode | None) -> int:
    """Count the nodes reachable from head."""
    return sum(1 for _ in iter_nodes(head))


def list_copy_with_tail(
    source: DoubleNode | None,
) -> tuple[DoubleNode | None, DoubleNode | None]:
    """Copy a chain into freshly allocated nodes.

    Args:
        source: Head of the chain to copy

    Returns:
        Tuple of (head, tail) of the copy, both None for an empty chain
    """
    if source is None:
        return (None, None)

    head = DoubleNode(source.value)
    tail = head
    for node in iter_nodes(source.link):
        tail = tail.add_node_after(node.value)

    return (head, tail)


def list_copy(source: DoubleNode | None) -> DoubleNode | None:
    """Copy a chain and return the new head."""
    head, _ = list_copy_with_tail(source)
    return head
