"""
Biweight Statistics Module.

This module provides the robust statistics built on the biweight transform:

    - Location (iterative robust center)
    - Scale and midvariance
    - Midcovariance and midcorrelation, for pairs of samples and as
      symmetric matrices over the variables of a 2-D array

Univariate statistics accept an ``axis`` argument with numpy reduction
semantics; matrix statistics take ``axis`` as the direction the samples
run in (``axis=0``: columns are variables).

Example:
    >>> import biweight.statistics as bstats
    >>> bstats.location([1, 2, 3, 500, 2])  # doctest: +ELLIPSIS
    2.0...
    >>> bstats.midcovariance_matrix([[1, 2], [2, 500], [3, 3], [500, 2], [2, 1]]).shape
    (2, 2)
"""

from biweight.statistics.location import (
    location,
)

from biweight.statistics.variance import (
    midvariance,
    midvar,
    scale,
)

from biweight.statistics.covariance import (
    midcovariance,
    midcovariance_matrix,
    midcov,
)

from biweight.statistics.correlation import (
    midcorrelation,
    midcorrelation_matrix,
    midcor,
)

__all__ = [
    # Location
    "location",
    # Spread
    "midvariance",
    "midvar",
    "scale",
    # Covariance
    "midcovariance",
    "midcovariance_matrix",
    "midcov",
    # Correlation
    "midcorrelation",
    "midcorrelation_matrix",
    "midcor",
]
