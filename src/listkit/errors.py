"""Error definitions for listkit combinators.

Only argument and bounds violations are errors. Absence of a value (e.g. the
head of an empty sequence) is modelled with `listkit.maybe` instead.
"""

# ============================================================================
#                               Base error
# ============================================================================


class ListkitError(Exception):
    """Base class for all listkit errors."""


# ============================================================================
#                           Bounds violations
# ============================================================================


class OutOfRangeError(ListkitError, IndexError):
    """Raised when an index or removal falls outside a sequence's bounds.

    Attributes:
        operation (str): Name of the combinator that was called.
        index (int | None): The offending index, or None when removing from an
            empty sequence.
        size (int): Size of the sequence at the time of the call.
    """

    def __init__(self, operation: str, index: int | None, size: int) -> None:
        if index is None:
            message = f"{operation}: cannot remove an element from an empty sequence"
        else:
            message = f"{operation}: index {index} out of range for size {size}"
        super().__init__(message)
        self.operation = operation
        self.index = index
        self.size = size


# ============================================================================
#                         Precondition violations
# ============================================================================


class InvalidArgumentError(ListkitError, ValueError):
    """Raised when an argument violates a combinator's precondition.

    Attributes:
        operation (str): Name of the combinator that was called.
        argument (str): Name of the offending parameter.
        reason (str): Human-readable description of the violation.
    """

    def __init__(self, operation: str, argument: str, reason: str) -> None:
        super().__init__(f"{operation}: invalid argument '{argument}': {reason}")
        self.operation = operation
        self.argument = argument
        self.reason = reason
