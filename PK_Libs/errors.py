"""
Exception types raised by Pixel Kit.

Both exceptions subclass the matching builtin so callers can keep catching
ValueError / IndexError.

Classes:
    InvalidArgumentError: Malformed input to a transform or color operation
    IndexOutOfRangeError: Pixel coordinate outside buffer bounds
"""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot accept."""


class IndexOutOfRangeError(IndexError):
    """Raised when a pixel coordinate falls outside the buffer."""
