"""
Biweight Type Definitions and Input Coercion.

This module provides type aliases and utility functions for multi-format
inputs. It enables transparent handling of:

    - NumPy arrays (ndarray)
    - SciPy sparse matrices (densified, matrix statistics only)
    - Python sequences (List, Tuple) and other array-likes

All coercion produces float64 numpy arrays. The caller's data is never
modified: when the input already is a float64 array a read-only view is
returned instead of a copy.

Example:
    >>> from biweight._typing import SampleInput, ensure_vector
    >>>
    >>> def my_stat(x: SampleInput) -> float:
    ...     arr = ensure_vector(x)
    ...     ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

import numpy as np

from biweight.error import InvalidArgumentError

if TYPE_CHECKING:
    from scipy import sparse as sp


# =============================================================================
# Type Aliases
# =============================================================================

SampleInput = Union["np.ndarray", Sequence[float]]
"""One-dimensional sample: any array-like of reals."""

MatrixInput = Union["np.ndarray", "sp.spmatrix", Sequence[Sequence[float]]]
"""Two-dimensional data: nested sequences, ndarray, or scipy sparse matrix."""

AxisInput = Optional[int]


# =============================================================================
# Format Detection
# =============================================================================

def is_numpy_array(obj: Any) -> bool:
    """Check if object is a numpy ndarray."""
    return isinstance(obj, np.ndarray)


def is_scipy_sparse(obj: Any) -> bool:
    """Check if object is a scipy sparse matrix or array."""
    try:
        from scipy import sparse as sp
    except ImportError:
        return False
    return sp.issparse(obj)


def get_format(obj: Any) -> str:
    """Get the format name of an input.

    Returns:
        One of "numpy", "scipy_sparse", "sequence", "scalar" or "unknown".
    """
    if is_numpy_array(obj):
        return "numpy"
    if is_scipy_sparse(obj):
        return "scipy_sparse"
    if isinstance(obj, (list, tuple)):
        return "sequence"
    if isinstance(obj, (int, float, np.number)):
        return "scalar"
    return "unknown"


# =============================================================================
# Coercion
# =============================================================================

def as_float_array(obj: Any) -> np.ndarray:
    """Convert any supported input to a read-only float64 ndarray."""
    fmt = get_format(obj)

    if fmt == "scipy_sparse":
        arr = np.asarray(obj.toarray(), dtype=np.float64)
    else:
        try:
            arr = np.asarray(obj, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"cannot interpret input as real numbers: {e}") from e

    view = arr.view()
    view.flags.writeable = False
    return view


def ensure_vector(obj: SampleInput, name: str = "sample") -> np.ndarray:
    """Convert input to a one-dimensional float64 array.

    Scalars are treated as one-element samples. Higher dimensional inputs
    are rejected; use ``axis`` on the statistic instead.

    Raises:
        InvalidArgumentError: If the input has more than one dimension.
    """
    arr = as_float_array(obj)
    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def ensure_matrix(obj: MatrixInput, name: str = "X") -> np.ndarray:
    """Convert input to a two-dimensional float64 array.

    Raises:
        InvalidArgumentError: If the input is not two-dimensional.
    """
    arr = as_float_array(obj)
    if arr.ndim != 2:
        raise InvalidArgumentError(f"{name} must be two-dimensional, got shape {arr.shape}")
    return arr


def normalize_axis(axis: AxisInput, ndim: int) -> Optional[int]:
    """Validate an axis for an ``ndim``-dimensional array.

    Negative axes count from the end as in numpy. ``None`` passes through.

    Raises:
        InvalidArgumentError: If the axis is out of range.
    """
    if axis is None:
        return None
    axis = int(axis)
    if not -ndim <= axis < ndim:
        raise InvalidArgumentError(f"axis {axis} is out of bounds for array of dimension {ndim}")
    return axis % ndim


def variable_axis(axis: int) -> int:
    """Map a sample axis of a 2-D array to the axis holding the variables.

    ``axis=0`` means samples run down the rows, so each column is a variable.

    Raises:
        InvalidArgumentError: If ``axis`` is not 0 or 1.
    """
    if axis not in (0, 1):
        raise InvalidArgumentError(f"axis must be 0 or 1, got {axis!r}")
    return 1 - axis
