"""
Biweight Midvariance and Scale.

Mathematical Background:
    With the biweight transform of X about its median, summing over the
    n values within the cutoff:

        s_xx = n * sum(d_i^2 (1 - u_i^2)^4) / (sum((1 - u_i^2)(1 - 5 u_i^2)))^2

    and the biweight scale is sqrt(s_xx).

Degenerate Cases:
    - Constant data (zero cutoff): every deviation is zero, result is 0.
    - A vanishing denominator gives Inf or NaN; it is returned, not raised.
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np

from biweight._config import config
from biweight._typing import AxisInput, SampleInput
from biweight.statistics._reduce import reduce_along_axis
from biweight.transform import BiweightTransform


# =============================================================================
# Midvariance
# =============================================================================

def midvariance(
    sample: SampleInput,
    c: Optional[float] = None,
    axis: AxisInput = None,
) -> Union[float, np.ndarray]:
    """Compute the biweight midvariance.

    A single biweight transform is built about the sample median (no
    iteration). NaN and Inf values are excluded.

    Args:
        sample: Array-like of reals.
        c: Cutoff multiplier. Defaults to ``config.cutoff.scale`` (9.0).
        axis: Axis along which to compute. ``None`` (default) uses the
            flattened input.

    Returns:
        float if ``axis`` is None (or the input is 1-D), otherwise an array
        with ``axis`` removed.

    Raises:
        EmptySampleError: If a sample has no finite values.
        InvalidArgumentError: If ``c`` is not positive or ``axis`` is out
            of bounds.

    Examples:
        >>> round(midvariance([1, 2, 3, 500, 2]), 5)
        0.51266
        >>> midvariance([5, 5, 5, 5])
        0.0

    References:
        NIST: biweight midvariance, https://www.itl.nist.gov/div898/software/dataplot/refman2/auxillar/biwmidv.htm

    See Also:
        scale: Square root of the midvariance.
        midcovariance: Paired generalization.
    """
    c = config.resolve_c(c, "scale")
    return reduce_along_axis(lambda lane: _midvariance_1d(lane, c), sample, axis)


def _midvariance_1d(values: np.ndarray, c: float) -> float:
    bt = BiweightTransform.from_sample(values, c=c)
    d, u2, flags = bt.components()
    d = d[flags]
    u2 = u2[flags]

    with np.errstate(divide="ignore", invalid="ignore"):
        num = np.sum(d ** 2 * (1 - u2) ** 4)
        den = np.sum((1 - u2) * (1 - 5 * u2))
        return float(d.size * num / den ** 2)


# =============================================================================
# Scale
# =============================================================================

def scale(
    sample: SampleInput,
    c: Optional[float] = None,
    axis: AxisInput = None,
) -> Union[float, np.ndarray]:
    """Compute the biweight scale, the square root of the midvariance.

    Args and Raises are the same as :func:`midvariance`.

    References:
        NIST: biweight scale, https://www.itl.nist.gov/div898/software/dataplot/refman2/auxillar/biwscale.htm
    """
    c = config.resolve_c(c, "scale")
    return reduce_along_axis(lambda lane: math.sqrt(_midvariance_1d(lane, c)), sample, axis)


# Short alias
midvar = midvariance
