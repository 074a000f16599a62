"""
Biweight Midcorrelation.

    r_xy = s_xy / sqrt(s_xx * s_yy)

where s_xx, s_yy are the midvariances of each sample and s_xy is their
midcovariance. The value usually lies in [-1, 1] but is not strictly
bounded. A constant sample has zero midvariance, so its correlation with
anything is NaN or Inf; this propagates unchanged.

References:
    Wikipedia: Biweight midcorrelation, https://en.wikipedia.org/wiki/Biweight_midcorrelation
    NIST: biweight midcorrelation, https://www.itl.nist.gov/div898/software/dataplot/refman2/auxillar/biwmidcr.htm
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np

from biweight._config import config
from biweight._typing import MatrixInput, SampleInput, as_float_array, ensure_vector
from biweight.error import check_lengths
from biweight.statistics.covariance import _midcovariance_pair, has_nonfinite, pairwise_matrix
from biweight.statistics.variance import _midvariance_1d


def _midcorrelation_pair(x: np.ndarray, y: np.ndarray, c: float) -> float:
    check_lengths(x.size, y.size, "midcorrelation")
    if has_nonfinite(x, y):
        return math.nan

    sxy = _midcovariance_pair(x, y, c)
    sxx = _midvariance_1d(x, c)
    syy = _midvariance_1d(y, c)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(sxy) / np.sqrt(np.float64(sxx * syy)))


def midcorrelation(
    x: Union[SampleInput, MatrixInput],
    y: Optional[SampleInput] = None,
    c: Optional[float] = None,
    axis: int = 0,
) -> Union[float, np.ndarray]:
    """Compute the biweight midcorrelation between two variables.

    With a single vector, returns its correlation with itself (1 unless the
    sample is constant). With a single 2-D array, returns the correlation
    matrix (see :func:`midcorrelation_matrix`).

    Args:
        x: First sample, or a 2-D array when ``y`` is omitted.
        y: Second sample, same length as ``x``.
        c: Cutoff multiplier. Defaults to ``config.cutoff.scale`` (9.0).
        axis: Only used for the matrix form.

    Raises:
        DimensionMismatchError: If ``x`` and ``y`` differ in length.

    Examples:
        >>> round(midcorrelation([1, 2, 3, 500, 2], [2, 500, 3, 2, 1]), 5)
        0.68391
    """
    c = config.resolve_c(c, "scale")
    if y is None:
        arr = as_float_array(x)
        if arr.ndim >= 2:
            return midcorrelation_matrix(arr, axis=axis, c=c)
        x = y = arr
    return _midcorrelation_pair(ensure_vector(x, "x"), ensure_vector(y, "y"), c)


def midcorrelation_matrix(
    X: MatrixInput,
    axis: int = 0,
    c: Optional[float] = None,
) -> np.ndarray:
    """Compute the correlation matrix using the biweight midcorrelation.

    Layout follows :func:`midcovariance_matrix`. The diagonal is exactly
    one by construction, even for constant variables.
    """
    c = config.resolve_c(c, "scale")
    return pairwise_matrix(
        X,
        axis,
        lambda v: 1.0,
        lambda v, w: _midcorrelation_pair(v, w, c),
    )


# Short alias
midcor = midcorrelation
