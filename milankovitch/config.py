"""
milankovitch.config - Runtime configuration

The Berger (1978) series are precise within plus or minus 1,000,000 years
from present.  Years beyond that bound are still evaluated; optionally an
ExtrapolationWarning is emitted for them.

Environment variables (read at import):
    MILANKOVITCH_WARN_EXTRAPOLATION : '1', 'true' or 'yes' to warn on
        years outside the accuracy bound (default: off)
    MILANKOVITCH_ACCURACY_BOUND : accuracy bound in years
        (default: 1000000)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import os
import threading
import warnings
from contextlib import contextmanager

__all__ = [
    'DEFAULT_ACCURACY_BOUND',
    'ExtrapolationWarning',
    # Enable/disable
    'enable_extrapolation_warning',
    'disable_extrapolation_warning',
    'is_extrapolation_warning_enabled',
    # Context managers
    'extrapolation_warning',
    # Accuracy bound
    'get_accuracy_bound',
    'set_accuracy_bound',
]

DEFAULT_ACCURACY_BOUND = 1_000_000  # years from present


class ExtrapolationWarning(UserWarning):
    """Year lies outside the accuracy bound of the orbital series"""


# =============================================================================
# Global State
# =============================================================================

class _ConfigState:
    """Thread-safe configuration state."""

    def __init__(self):
        self._lock = threading.Lock()
        self._warn_extrapolation = False
        self._accuracy_bound = DEFAULT_ACCURACY_BOUND

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # MILANKOVITCH_WARN_EXTRAPOLATION
        warn = os.environ.get('MILANKOVITCH_WARN_EXTRAPOLATION', '').lower()
        if warn in ('1', 'true', 'yes'):
            self._warn_extrapolation = True

        # MILANKOVITCH_ACCURACY_BOUND
        bound = os.environ.get('MILANKOVITCH_ACCURACY_BOUND', '').strip()
        if bound:
            try:
                value = int(bound)
            except ValueError:
                value = 0
            if value > 0:
                self._accuracy_bound = value
            else:
                warnings.warn(
                    f"Ignoring MILANKOVITCH_ACCURACY_BOUND={bound!r}: "
                    f"expected a positive integer, using {DEFAULT_ACCURACY_BOUND}",
                    UserWarning,
                    stacklevel=2
                )

    @property
    def warn_extrapolation(self) -> bool:
        with self._lock:
            return self._warn_extrapolation

    @warn_extrapolation.setter
    def warn_extrapolation(self, value: bool):
        with self._lock:
            self._warn_extrapolation = bool(value)

    @property
    def accuracy_bound(self) -> int:
        with self._lock:
            return self._accuracy_bound

    @accuracy_bound.setter
    def accuracy_bound(self, value: int):
        with self._lock:
            self._accuracy_bound = value


_state = _ConfigState()


# =============================================================================
# Public API
# =============================================================================

def enable_extrapolation_warning() -> None:
    """Warn when a year lies outside the accuracy bound."""
    _state.warn_extrapolation = True


def disable_extrapolation_warning() -> None:
    """Evaluate years outside the accuracy bound silently (default)."""
    _state.warn_extrapolation = False


def is_extrapolation_warning_enabled() -> bool:
    return _state.warn_extrapolation


@contextmanager
def extrapolation_warning(enabled: bool = True):
    """
    Context manager to temporarily toggle the extrapolation warning.

    Example:
        with extrapolation_warning():
            params = compute_orbital_parameters(-2_000_000)
    """
    was_enabled = _state.warn_extrapolation
    _state.warn_extrapolation = enabled
    try:
        yield
    finally:
        _state.warn_extrapolation = was_enabled


def get_accuracy_bound() -> int:
    """Accuracy bound of the orbital series, in years from present"""
    return _state.accuracy_bound


def set_accuracy_bound(years: int) -> None:
    """
    Set the accuracy bound used by the extrapolation warning

    Parameters
    ----------
    years : int
        Positive number of years from present
    """
    if years <= 0:
        raise ValueError(f"Accuracy bound must be positive, got {years}")
    _state.accuracy_bound = int(years)
