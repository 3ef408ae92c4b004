"""Error taxonomy for the sequence library."""

ILLEGAL_ARGUMENT_EMPTY_ITERABLE = "Illegal argument error: iterable must not be empty!"
ALREADY_BUILT = "Unsupported operation: Sequence has already been built!"
EMPTY_FOCUS_RING = "FocusRing: Can't construct a focus ring from an empty iterable!"
ZERO_STEP = "Illegal argument error: step must not be zero!"


class SequenceError(Exception):
    """Base class for all errors raised by the sequence library."""
    pass


class IllegalArgumentError(SequenceError, ValueError):
    """Raised when an operation receives an argument it cannot work with."""
    pass


class IllegalStateError(SequenceError, RuntimeError):
    """Raised when an object is used in a state that forbids the call."""
    pass
