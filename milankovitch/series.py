"""
Harmonic series summation

Evaluates sums of the form

    S = sum_i A_i * trig(pi/180 * (dy * f_i / 3600 + delta_i))

for the Berger (1978) tables, where dy is the number of years since the
1950 epoch, f_i is in arcseconds per year and delta_i in degrees.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from typing import Callable, Union

import numpy as np

from .tables import HarmonicTable

__all__ = [
    'EPOCH',
    'year_offset',
    'harmonic_sum',
]

# Constants
EPOCH = 1950  # Reference year of the series (years CE)
_ARCSEC_PER_DEGREE = 3600.0
_DEG_TO_RAD = 2.0 * np.pi / 360.0  # Degrees to radians


def year_offset(year: Union[int, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Years elapsed since the 1950 epoch

    Parameters
    ----------
    year : int or np.ndarray
        Years A.D. are positive, B.C. are negative

    Returns
    -------
    int or np.ndarray
        year - 1950
    """
    return year - EPOCH


def harmonic_sum(table: HarmonicTable,
                 dy: Union[int, float, np.ndarray],
                 trig: Callable = np.cos) -> Union[float, np.ndarray]:
    """
    Sum a harmonic table at one or more year offsets

    Parameters
    ----------
    table : HarmonicTable
        Series coefficients
    dy : int, float or np.ndarray
        Years since 1950 (negative before the epoch)
    trig : callable
        Elementwise trigonometric function, np.sin or np.cos

    Returns
    -------
    float or np.ndarray
        Series sum; a float for scalar dy, otherwise an array with the
        shape of dy

    Notes
    -----
    The argument is formed in degrees, dy*f/3600 + delta, then converted
    to radians.  Terms are accumulated one after another in table order,
    so a scalar offset reproduces a plain loop over the table.
    """
    offset = np.asarray(dy, dtype=np.float64)

    # theta[..., i] = (dy * f_i / 3600 + delta_i) in degrees -> radians
    theta = _DEG_TO_RAD * (offset[..., np.newaxis] * table.frequency
                           / _ARCSEC_PER_DEGREE + table.phase)
    terms = table.amplitude * trig(theta)  # (..., n_terms)

    # np.sum is pairwise; accumulate adds the terms in table order
    total = np.add.accumulate(terms, axis=-1)[..., -1]

    if total.ndim == 0:
        return float(total)
    return total
