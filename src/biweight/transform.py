"""
The Biweight Transform.

The biweight transform is the basis of every statistic in this package. It
is built from the *median* and the *median absolute deviation* (MAD), both
robust estimators, and excludes data beyond a critical cutoff. The analogy
is a sigma-clip using robust statistics instead of the standard deviation
and mean.

Mathematical Background:
    For a sample X with center M (the median unless given):

        MAD    = median(|X_i - M|)
        u_i    = (X_i - M) / (c * MAD)

    and a point takes part in a statistic when u_i^2 <= 1.

    The cutoff factor c relates to a Gaussian standard deviation through
    MAD * 1.4826 ~ sigma, so the default c = 9 clips residuals beyond
    roughly 13.3 sigma. NaN and Inf values are dropped before anything
    else is computed.

Element Semantics:
    Each finite point maps to a triple (d, u2, flag):

        - inside the cutoff:   (X_i - M, u_i^2, True)
        - beyond the cutoff:   (0.0, 0.0, False)
        - cutoff == 0:         (0.0, 0.0, True) for every point

    The zero cutoff case happens when at least half of the values equal
    the center. Spread statistics of constant data are then exactly zero.

References:
    NIST: biweight, https://www.itl.nist.gov/div898/software/dataplot/refman2/ch2/biweight.pdf
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

import numpy as np

from biweight._config import config
from biweight._typing import SampleInput, ensure_vector
from biweight.error import EmptySampleError

logger = logging.getLogger("biweight.transform")

Element = Tuple[float, float, bool]


# =============================================================================
# Helpers
# =============================================================================

def finite_values(sample: SampleInput) -> np.ndarray:
    """Return the finite values of ``sample`` in their original order."""
    arr = ensure_vector(sample)
    mask = np.isfinite(arr)
    if not mask.all():
        logger.debug(f"Dropping {arr.size - int(mask.sum())} non-finite values of {arr.size}")
        return arr[mask]
    return arr


def robust_median(values: np.ndarray, what: str = "median") -> float:
    """Median of an already-filtered array.

    Raises:
        EmptySampleError: If ``values`` is empty.
    """
    if values.size == 0:
        raise EmptySampleError(f"cannot compute the {what} of a sample with no finite values")
    return float(np.median(values))


# =============================================================================
# Transform
# =============================================================================

@dataclass(frozen=True, eq=False)
class BiweightTransform:
    """Immutable biweight transform of a sample.

    Iterating over the transform yields one ``(d, u2, flag)`` element per
    finite value, where ``d`` is the deviation from ``center``, ``u2`` is
    ``(d / cutoff) ** 2`` and ``flag`` tells whether the value is within the
    cutoff. The transform owns its filtered buffer, so it can be iterated any
    number of times with identical results.

    Use :func:`biweight_transform` (or :meth:`from_sample`) to build one
    from raw data.

    Attributes:
        data: The sample with all non-finite values removed.
        center: The reference location (median of ``data`` unless given).
        cutoff: ``c`` times the median absolute deviation about ``center``.
        c: The cutoff multiplier.

    Examples:
        >>> import numpy as np
        >>> X = np.array([1.0, 2.0, 3.0, 1e4, np.nan, 2.0])
        >>> bt = biweight_transform(X)
        >>> len(bt)
        5
        >>> bt[3]
        (0.0, 0.0, False)
        >>> all(np.isfinite(d) for d, _, _ in bt)
        True
    """

    data: np.ndarray
    center: float
    cutoff: float
    c: float
    _columns: Tuple[np.ndarray, np.ndarray, np.ndarray] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        data = np.asarray(self.data, dtype=np.float64).view()
        data.flags.writeable = False
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "_columns", self._compute_columns())

    @classmethod
    def from_sample(
        cls,
        sample: SampleInput,
        c: Optional[float] = None,
        center: Optional[float] = None,
    ) -> "BiweightTransform":
        """Build the transform of ``sample``.

        Args:
            sample: Any one-dimensional array-like of reals. NaN and Inf
                values are dropped.
            c: Cutoff multiplier. Defaults to the configured scale cutoff.
            center: Reference location. Defaults to the median of the finite
                values.

        Raises:
            EmptySampleError: If ``sample`` has no finite values.
            InvalidArgumentError: If ``c`` is not positive and finite.
        """
        c = config.resolve_c(c, "scale")
        data = finite_values(sample)
        if center is None:
            center = robust_median(data)
        else:
            center = float(center)
        mad = robust_median(np.abs(data - center), "MAD")
        return cls(data=data, center=center, cutoff=c * mad, c=c)

    # -------------------------------------------------------------------------
    # Element columns
    # -------------------------------------------------------------------------

    def _compute_columns(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        n = self.data.size
        if self.cutoff == 0:
            logger.debug(f"Zero cutoff around center {self.center}; all {n} values included")
            d, u2, flags = np.zeros(n), np.zeros(n), np.ones(n, dtype=bool)
        else:
            d = self.data - self.center
            u2 = (d / self.cutoff) ** 2
            flags = u2 <= 1
            d = np.where(flags, d, 0.0)
            u2 = np.where(flags, u2, 0.0)
        for column in (d, u2, flags):
            column.flags.writeable = False
        return d, u2, flags

    def components(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return the elements as three read-only arrays ``(d, u2, flags)``."""
        return self._columns

    @property
    def mad(self) -> float:
        """Median absolute deviation about ``center``."""
        return self.cutoff / self.c

    @property
    def n_included(self) -> int:
        """Number of values within the cutoff."""
        return int(np.count_nonzero(self._columns[2]))

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.data.size

    def __getitem__(self, index: int) -> Element:
        d, u2, flags = self._columns
        return float(d[index]), float(u2[index]), bool(flags[index])

    def __iter__(self) -> Iterator[Element]:
        d, u2, flags = self._columns
        for i in range(self.data.size):
            yield float(d[i]), float(u2[i]), bool(flags[i])


def biweight_transform(
    sample: SampleInput,
    c: Optional[float] = None,
    center: Optional[float] = None,
) -> BiweightTransform:
    """Compute the biweight transform of a sample.

    Shorthand for :meth:`BiweightTransform.from_sample`.
    """
    return BiweightTransform.from_sample(sample, c=c, center=center)
