"""Exceptions raised by sequence operations."""


class SequenceError(Exception):
    """Base class for sequence errors."""

    pass


class InvalidStateError(SequenceError):
    """Raised when an operation needs a current element and none is set."""

    pass


class NullArgumentError(SequenceError, TypeError):
    """Raised when a required sequence argument is None."""

    pass
