"""
Error handling for biweight.

Every exception raised by the package derives from ``BiweightError`` and
carries a numeric error code. The concrete classes also derive from
``ValueError`` so callers that already guard numerical code with
``except ValueError`` keep working.

Degenerate numerical outcomes (NaN, Inf) are return values, not errors.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
BW_OK = 0

# General errors (1-9)
BW_ERROR_UNKNOWN = 1

# Argument errors (10-19)
BW_ERROR_INVALID_ARGUMENT = 10
BW_ERROR_DIMENSION_MISMATCH = 11

# Data errors (20-29)
BW_ERROR_EMPTY_SAMPLE = 20


_ERROR_MESSAGES = {
    BW_OK: "Success",
    BW_ERROR_UNKNOWN: "Unknown error",
    BW_ERROR_INVALID_ARGUMENT: "Invalid argument",
    BW_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    BW_ERROR_EMPTY_SAMPLE: "Empty sample",
}


# =============================================================================
# Exception Classes
# =============================================================================

class BiweightError(Exception):
    """
    Base exception for all biweight errors.
    """

    code = BW_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create a biweight exception.

        Args:
            message: Optional detailed message (falls back to the code's
                default message)
            code: Optional error code overriding the class default
        """
        if code is not None:
            self.code = code
        base_msg = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = f"{base_msg}: {message}" if message else base_msg
        super().__init__(f"Biweight Error {self.code}: {self.message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "BiweightError":
        """Create the matching exception subclass for an error code."""
        for klass in (InvalidArgumentError, DimensionMismatchError, EmptySampleError):
            if klass.code == code:
                return klass(context or None)
        return cls(context or None, code=code)


class InvalidArgumentError(BiweightError, ValueError):
    """Raised for out-of-domain parameters (cutoff, axis, iteration limits)."""

    code = BW_ERROR_INVALID_ARGUMENT


class DimensionMismatchError(BiweightError, ValueError):
    """Raised when two paired samples differ in length."""

    code = BW_ERROR_DIMENSION_MISMATCH


class EmptySampleError(BiweightError, ValueError):
    """Raised when no finite values remain and a median is required."""

    code = BW_ERROR_EMPTY_SAMPLE


# =============================================================================
# Argument Checking
# =============================================================================

def check_lengths(n_x: int, n_y: int, context: str = "") -> None:
    """
    Raise ``DimensionMismatchError`` unless both lengths agree.

    Args:
        n_x: Length of the first sample
        n_y: Length of the second sample
        context: Optional name of the calling operation
    """
    if n_x == n_y:
        return
    msg = f"lengths {n_x} and {n_y} differ"
    if context:
        msg = f"{context}: {msg}"
    raise DimensionMismatchError(msg)
