"""
Biweight Location.

The biweight location is a robust estimate of central tendency. Starting
from an initial guess, each iteration re-centers the biweight transform on
the current estimate and replaces it by the biweight-weighted mean of the
values within the cutoff.

Algorithm:
    y = 0 (or the median, see IterationConfig.start)
    repeat up to maxiter times:
        transform the sample about y
        w_i   = (1 - u_i^2)^2            for |u_i| <= 1
        y_new = y + sum(w_i * d_i) / sum(w_i)
        stop if |y_new - y| <= tol
        y = y_new

    A constant sample returns its value without iterating.

Time Complexity:
    O(maxiter * n) plus the median selections of each transform.

References:
    NIST: biweight location, https://www.itl.nist.gov/div898/software/dataplot/refman2/auxillar/biwloc.htm
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

import numpy as np

from biweight._config import IterationConfig, StartPoint, config
from biweight._typing import AxisInput, SampleInput
from biweight.statistics._reduce import reduce_along_axis
from biweight.transform import BiweightTransform, finite_values, robust_median

logger = logging.getLogger("biweight.location")


def location(
    sample: SampleInput,
    c: Optional[float] = None,
    maxiter: Optional[int] = None,
    tol: Optional[float] = None,
    axis: AxisInput = None,
) -> Union[float, np.ndarray]:
    """Iteratively compute the biweight location, a robust measure of location.

    The estimate is refined until ``maxiter`` iterations have run or the
    absolute change between consecutive estimates is at most ``tol``. NaN and
    Inf values are excluded from every iteration.

    Args:
        sample: Array-like of reals.
        c: Cutoff multiplier. Defaults to ``config.cutoff.location`` (9.0).
        maxiter: Maximum number of iterations. Defaults to
            ``config.iteration.maxiter`` (10).
        tol: Absolute convergence tolerance. Defaults to
            ``config.iteration.tol`` (1e-6).
        axis: Axis along which to compute. ``None`` (default) uses the
            flattened input.

    Returns:
        float if ``axis`` is None (or the input is 1-D), otherwise an array
        with ``axis`` removed. A NaN or Inf result means the location is
        undefined for that sample (all weights vanished).

    Raises:
        EmptySampleError: If a sample has no finite values.
        InvalidArgumentError: If ``c``, ``maxiter`` or ``tol`` are out of
            range, or ``axis`` is out of bounds.

    Examples:
        >>> location([1, 2, 3, 500, 2])  # doctest: +ELLIPSIS
        2.0...
        >>> location([[1, 2, 3], [1, 2, 3]], axis=0)
        array([1., 2., 3.])

    See Also:
        scale: Robust measure of spread.
    """
    c = config.resolve_c(c, "location")
    settings = config.resolve_iteration(maxiter, tol)
    return reduce_along_axis(lambda lane: _location_1d(lane, c, settings), sample, axis)


def _location_1d(values: np.ndarray, c: float, settings: IterationConfig) -> float:
    """Biweight location of a single 1-D sample."""
    data = finite_values(values)
    if data.size and data.min() == data.max():
        return float(data[0])
    if settings.start == StartPoint.MEDIAN:
        y = robust_median(data)
    else:
        y = 0.0

    y_new = y
    with np.errstate(divide="ignore", invalid="ignore"):
        for iteration in range(1, settings.maxiter + 1):
            bt = BiweightTransform.from_sample(data, c=c, center=y)
            d, u2, flags = bt.components()
            w = np.where(flags, (1 - u2) ** 2, 0.0)
            y_new = float(bt.center + np.sum(w * d) / np.sum(w))

            if not math.isfinite(y_new):
                logger.debug(f"Location undefined after {iteration} iterations (no weight)")
                return y_new
            if abs(y_new - y) <= settings.tol:
                logger.debug(f"Location converged to {y_new} after {iteration} iterations")
                return y_new
            y = y_new

    logger.debug(f"Location did not converge within {settings.maxiter} iterations; last estimate {y_new}")
    return y_new
