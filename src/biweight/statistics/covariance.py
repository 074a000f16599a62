"""
Biweight Midcovariance.

Mathematical Background:
    X and Y are transformed independently, each about its own median with
    its own cutoff, and walked in lock-step. Only pairs where both values
    are within their cutoffs contribute; n counts those pairs:

        s_xy = n * sum(d_i (1-u_i^2)^2 e_i (1-v_i^2)^2)
                 / (sum((1-u_i^2)(1-5u_i^2)) * sum((1-v_i^2)(1-5v_i^2)))

    where d, u come from X and e, v from Y.

Missing Values:
    Values are never dropped pairwise. Any NaN or Inf in either raw sample
    makes the midcovariance NaN.

References:
    NIST: biweight midcovariance, https://www.itl.nist.gov/div898/software/dataplot/refman2/auxillar/biwmidc.htm
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Union

import numpy as np

from biweight._config import config
from biweight._typing import (
    MatrixInput,
    SampleInput,
    as_float_array,
    ensure_matrix,
    ensure_vector,
    normalize_axis,
    variable_axis,
)
from biweight.error import check_lengths
from biweight.statistics.variance import _midvariance_1d, midvariance
from biweight.transform import BiweightTransform

logger = logging.getLogger("biweight.covariance")


# =============================================================================
# Pairwise Helpers
# =============================================================================

def has_nonfinite(x: np.ndarray, y: np.ndarray) -> bool:
    """Check whether either paired sample holds a NaN or Inf."""
    return not (np.isfinite(x).all() and np.isfinite(y).all())


def _midcovariance_pair(x: np.ndarray, y: np.ndarray, c: float) -> float:
    """Midcovariance of two 1-D samples of equal length."""
    check_lengths(x.size, y.size, "midcovariance")
    if has_nonfinite(x, y):
        logger.debug("Non-finite value in paired samples; midcovariance is NaN")
        return math.nan

    dx, u2, flags_x = BiweightTransform.from_sample(x, c=c).components()
    dy, v2, flags_y = BiweightTransform.from_sample(y, c=c).components()
    joint = flags_x & flags_y
    dx, u2 = dx[joint], u2[joint]
    dy, v2 = dy[joint], v2[joint]

    with np.errstate(divide="ignore", invalid="ignore"):
        num = np.sum(dx * (1 - u2) ** 2 * dy * (1 - v2) ** 2)
        den1 = np.sum((1 - u2) * (1 - 5 * u2))
        den2 = np.sum((1 - v2) * (1 - 5 * v2))
        return float(dx.size * num / (den1 * den2))


def pairwise_matrix(
    X: MatrixInput,
    axis: int,
    diagonal: Callable[[np.ndarray], float],
    off_diagonal: Callable[[np.ndarray, np.ndarray], float],
) -> np.ndarray:
    """Fill a symmetric ``k x k`` matrix from per-variable and per-pair functions.

    Each unordered pair is computed once and mirrored.

    Args:
        X: 2-D input.
        axis: Axis along which the samples run; 0 makes each column a
            variable, 1 makes each row a variable.
        diagonal: Called with variable ``i`` for entry ``[i, i]``.
        off_diagonal: Called with variables ``i`` and ``j`` for ``i < j``.
    """
    arr = ensure_matrix(X)
    vardim = variable_axis(normalize_axis(axis, 2))
    variables = np.moveaxis(arr, vardim, 0)
    k = variables.shape[0]

    out = np.zeros((k, k), dtype=np.float64)
    for i in range(k):
        out[i, i] = diagonal(variables[i])
        for j in range(i + 1, k):
            out[i, j] = out[j, i] = off_diagonal(variables[i], variables[j])
    return out


# =============================================================================
# Midcovariance
# =============================================================================

def midcovariance(
    x: Union[SampleInput, MatrixInput],
    y: Optional[SampleInput] = None,
    c: Optional[float] = None,
    axis: int = 0,
) -> Union[float, np.ndarray]:
    """Compute the biweight midcovariance.

    With two vectors, returns their midcovariance. With a single vector,
    returns its midvariance. With a single 2-D array, returns the
    midcovariance matrix (see :func:`midcovariance_matrix`).

    Args:
        x: First sample, or a 2-D array when ``y`` is omitted.
        y: Second sample, same length as ``x``.
        c: Cutoff multiplier. Defaults to ``config.cutoff.scale`` (9.0).
        axis: Only used for the matrix form.

    Returns:
        float, or a ``(k, k)`` array for the matrix form. NaN if either
        sample contains a NaN or Inf.

    Raises:
        DimensionMismatchError: If ``x`` and ``y`` differ in length.
        EmptySampleError: If a sample is empty.

    Examples:
        >>> round(midcovariance([1, 2, 3, 500, 2], [2, 500, 3, 2, 1]), 5)
        0.35061
        >>> midcovariance([1, 2, 3, float("nan"), 2], [2, 1, 3, 2, 1])
        nan

    See Also:
        midvariance: Single-sample case.
        midcorrelation: Normalized midcovariance.
    """
    c = config.resolve_c(c, "scale")
    if y is None:
        arr = as_float_array(x)
        if arr.ndim >= 2:
            return midcovariance_matrix(arr, axis=axis, c=c)
        return midvariance(arr, c=c)
    return _midcovariance_pair(ensure_vector(x, "x"), ensure_vector(y, "y"), c)


def midcovariance_matrix(
    X: MatrixInput,
    axis: int = 0,
    c: Optional[float] = None,
) -> np.ndarray:
    """Compute the variance-covariance matrix using the biweight midcovariance.

    By default each column is a variable, so an ``(m, n)`` input with
    ``axis=0`` gives an ``(n, n)`` matrix; with ``axis=1`` each row is a
    variable and the result is ``(m, m)``. The diagonal holds the
    midvariance of each variable.

    Args:
        X: 2-D array-like or scipy sparse matrix.
        axis: Axis along which the samples run (0 or 1).
        c: Cutoff multiplier. Defaults to ``config.cutoff.scale`` (9.0).

    Raises:
        InvalidArgumentError: If ``X`` is not 2-D or ``axis`` is not 0 or 1.

    Examples:
        >>> X = [[1, 2], [2, 500], [3, 3], [500, 2], [2, 1]]
        >>> C = midcovariance_matrix(X)
        >>> C.shape
        (2, 2)
        >>> C[0, 1] == C[1, 0]
        True
    """
    c = config.resolve_c(c, "scale")
    return pairwise_matrix(
        X,
        axis,
        lambda v: _midvariance_1d(v, c),
        lambda v, w: _midcovariance_pair(v, w, c),
    )


# Short alias
midcov = midcovariance
