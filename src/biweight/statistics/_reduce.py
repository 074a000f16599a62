"""
Axis handling shared by the univariate statistics.
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np

from biweight._typing import AxisInput, SampleInput, as_float_array, normalize_axis


def reduce_along_axis(
    func: Callable[[np.ndarray], float],
    sample: SampleInput,
    axis: AxisInput = None,
) -> Union[float, np.ndarray]:
    """Apply a 1-D statistic to a flattened array or to each lane of an axis.

    Follows the numpy reduction convention: ``axis=None`` reduces the
    flattened input to a scalar, ``axis=k`` removes dimension ``k``, so for
    a 2-D array ``axis=0`` yields one value per column and ``axis=1`` one
    value per row. Each lane is an independent sample.
    """
    arr = as_float_array(sample)
    axis = normalize_axis(axis, max(arr.ndim, 1))
    if axis is None or arr.ndim <= 1:
        return func(arr.reshape(-1))
    out_shape = arr.shape[:axis] + arr.shape[axis + 1:]
    if 0 in out_shape:
        return np.empty(out_shape, dtype=np.float64)
    return np.apply_along_axis(func, axis, arr)
