"""Linked float sequence with a movable current element."""

from doubleseq.core.sequence.errors import InvalidStateError, NullArgumentError, SequenceError
from doubleseq.core.sequence.linked_seq import DoubleLinkedSeq, concatenate
from doubleseq.core.sequence.node import (
    DoubleNode,
    iter_nodes,
    list_copy,
    list_copy_with_tail,
    list_length,
)

__all__ = [
    # Sequence
    "DoubleLinkedSeq",
    "concatenate",
    # Nodes
    "DoubleNode",
    "iter_nodes",
    "list_copy",
    "list_copy_with_tail",
    "list_length",
    # Errors
    "SequenceError",
    "InvalidStateError",
    "NullArgumentError",
]
