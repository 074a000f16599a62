"""
Biweight Config - Default Parameter Configuration

Holds the default cutoff multipliers and iteration settings used when a
statistic is called without explicit arguments. Explicit arguments always
take precedence over the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from enum import IntEnum
import math
import threading

from biweight.error import InvalidArgumentError


# =============================================================================
# Enumerations
# =============================================================================

class StartPoint(IntEnum):
    """
    Initial center estimate for the iterative location.
    """
    ZERO = 0           # Start from 0
    MEDIAN = 1         # Start from the median of the finite values


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class CutoffConfig:
    """Default cutoff multipliers ``c`` (cutoff = c * MAD)."""
    location: float = 9.0      # location
    scale: float = 9.0         # midvariance, scale, midcovariance, midcorrelation

    def __post_init__(self):
        for name in ("location", "scale"):
            check_cutoff(getattr(self, name), name)


@dataclass(frozen=True)
class IterationConfig:
    """Stopping criteria for the iterative location."""
    maxiter: int = 10
    tol: float = 1e-6
    start: StartPoint = StartPoint.ZERO

    def __post_init__(self):
        check_iteration(self.maxiter, self.tol)
        object.__setattr__(self, "start", StartPoint(self.start))


def check_cutoff(c: float, name: str = "c") -> None:
    """Reject non-positive or non-finite cutoff multipliers."""
    if not (math.isfinite(c) and c > 0):
        raise InvalidArgumentError(f"{name} must be positive and finite, got {c!r}")


def check_iteration(maxiter: int, tol: float) -> None:
    """Reject unusable stopping criteria."""
    if maxiter < 1:
        raise InvalidArgumentError(f"maxiter must be at least 1, got {maxiter!r}")
    if not tol >= 0:
        raise InvalidArgumentError(f"tol must be non-negative, got {tol!r}")


# =============================================================================
# Global Configuration Manager
# =============================================================================

class BiweightConfig:
    """
    Global configuration manager for biweight.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.

    Example:
        # Global configuration
        biweight.config.cutoff = CutoffConfig(location=6.0)

        # Local configuration (context manager)
        with biweight.config.local(iteration=IterationConfig(maxiter=50)):
            loc = biweight.location(sample)
        # Back to global config
    """

    def __init__(self):
        self._global_cutoff = CutoffConfig()
        self._global_iteration = IterationConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def cutoff(self) -> CutoffConfig:
        """Get cutoff configuration."""
        if getattr(self._local, "cutoff", None) is not None:
            return self._local.cutoff
        return self._global_cutoff

    @cutoff.setter
    def cutoff(self, value: CutoffConfig):
        """Set global cutoff configuration."""
        self._global_cutoff = value

    @property
    def iteration(self) -> IterationConfig:
        """Get iteration configuration."""
        if getattr(self._local, "iteration", None) is not None:
            return self._local.iteration
        return self._global_iteration

    @iteration.setter
    def iteration(self, value: IterationConfig):
        """Set global iteration configuration."""
        self._global_iteration = value

    # -------------------------------------------------------------------------
    # Argument Resolution
    # -------------------------------------------------------------------------

    def resolve_c(self, c: Optional[float], family: str = "scale") -> float:
        """Return ``c`` if given, else the configured default for ``family``."""
        if c is None:
            return getattr(self.cutoff, family)
        c = float(c)
        check_cutoff(c)
        return c

    def resolve_iteration(
        self,
        maxiter: Optional[int] = None,
        tol: Optional[float] = None,
    ) -> IterationConfig:
        """Merge explicit stopping criteria over the configured ones."""
        current = self.iteration
        if maxiter is None and tol is None:
            return current
        return replace(
            current,
            maxiter=current.maxiter if maxiter is None else int(maxiter),
            tol=current.tol if tol is None else float(tol),
        )

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (cutoff, iteration)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - {"cutoff", "iteration"}
        if unknown:
            raise InvalidArgumentError(f"unknown config sections: {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        """Set thread-local configuration, returning the values it replaced."""
        previous = {}
        for key, value in kwargs.items():
            if value is not None:
                previous[key] = getattr(self._local, key, None)
                setattr(self._local, key, value)
        return previous

    def _restore_local(self, previous: Dict[str, Any]):
        """Put back thread-local values saved by ``_set_local``."""
        for key, value in previous.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_cutoff = CutoffConfig()
        self._global_iteration = IterationConfig()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "cutoff": {
                "location": self.cutoff.location,
                "scale": self.cutoff.scale,
            },
            "iteration": {
                "maxiter": self.iteration.maxiter,
                "tol": self.iteration.tol,
                "start": self.iteration.start.name,
            },
        }

    def __repr__(self) -> str:
        return f"BiweightConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: BiweightConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._previous: Dict[str, Any] = {}

    def __enter__(self):
        self._previous = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._restore_local(self._previous)
        return False


# =============================================================================
# Global Instance
# =============================================================================

# Global configuration instance
config = BiweightConfig()


def get_config() -> BiweightConfig:
    """Get the global configuration instance."""
    return config
