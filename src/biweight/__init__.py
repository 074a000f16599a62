"""
Biweight - Robust Statistics

Robust estimators of location, scale, variance, covariance and correlation
based on the biweight transform:
- Outliers beyond c * MAD of the center are excluded
- NaN and Inf values are skipped by univariate statistics
- Pairwise statistics return NaN when either sample has a non-finite value

Modules:
- transform: The biweight transform underlying every statistic
- statistics: location, scale, midvariance, midcovariance, midcorrelation
- error: Exception hierarchy

Example:
    >>> import biweight
    >>> X = [1, 2, 3, 500, 2]
    >>> round(biweight.location(X), 4)
    2.0
    >>> round(biweight.midvariance(X), 5)
    0.51266
    >>>
    >>> # Change defaults for the current thread only
    >>> from biweight import CutoffConfig
    >>> with biweight.config.local(cutoff=CutoffConfig(scale=6.0)):
    ...     s = biweight.scale(X)
"""

__version__ = '0.3.0'

from . import statistics
from . import transform

from ._config import (
    BiweightConfig,
    CutoffConfig,
    IterationConfig,
    StartPoint,
    config,
    get_config,
)

from .error import (
    BiweightError,
    DimensionMismatchError,
    EmptySampleError,
    InvalidArgumentError,
)

from .transform import (
    BiweightTransform,
    biweight_transform,
)

from .statistics import (
    location,
    scale,
    midvariance,
    midcovariance,
    midcorrelation,
    midcovariance_matrix,
    midcorrelation_matrix,
    # Aliases
    midvar,
    midcov,
    midcor,
)

__all__ = [
    # Version
    '__version__',

    # Modules
    'statistics',
    'transform',

    # Transform
    'BiweightTransform',
    'biweight_transform',

    # Statistics
    'location',
    'scale',
    'midvariance',
    'midcovariance',
    'midcorrelation',
    'midcovariance_matrix',
    'midcorrelation_matrix',
    'midvar',
    'midcov',
    'midcor',

    # Configuration
    'BiweightConfig',
    'CutoffConfig',
    'IterationConfig',
    'StartPoint',
    'config',
    'get_config',

    # Errors
    'BiweightError',
    'DimensionMismatchError',
    'EmptySampleError',
    'InvalidArgumentError',
]
