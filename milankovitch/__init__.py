"""
milankovitch - Long-term orbital parameters of the Earth

Eccentricity, obliquity and longitude of perihelion from the Berger (1978)
trigonometric series, for any year within plus or minus 1,000,000 years
from present.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    import numpy as np
    import milankovitch

    # Single year
    params = milankovitch.compute_orbital_parameters(1950)
    eccen, obliq, omega_bar = params

    # Many years (vectorised)
    years = np.arange(-125000, 2001, 1000)
    eccen, obliq, omega_bar = milankovitch.compute_orbital_parameters_batch(years)

    # Labelled time series
    ds = milankovitch.orbital_dataset(years)
"""

from . import config
from . import series
from . import tables
from .tables import (
    HarmonicTerm,
    HarmonicTable,
    OBLIQUITY_TABLE,
    ECCENTRICITY_TABLE,
    PRECESSION_TABLE,
    get_table,
)
from .series import (
    EPOCH,
    year_offset,
    harmonic_sum,
)
from .orbital import (
    OrbitalParameters,
    compute_orbital_parameters,
    compute_orbital_parameters_batch,
    orbital_parameters,
    longitude_of_perihelion,
)
from .dataset import (
    orbital_dataset,
    year_range,
)
from .config import (
    ExtrapolationWarning,
    enable_extrapolation_warning,
    disable_extrapolation_warning,
    is_extrapolation_warning_enabled,
    extrapolation_warning,
    get_accuracy_bound,
    set_accuracy_bound,
)

__version__ = '0.1.0'
__all__ = [
    'config',
    'series',
    'tables',
    # Tables
    'HarmonicTerm',
    'HarmonicTable',
    'OBLIQUITY_TABLE',
    'ECCENTRICITY_TABLE',
    'PRECESSION_TABLE',
    'get_table',
    # Series
    'EPOCH',
    'year_offset',
    'harmonic_sum',
    # Orbital parameters
    'OrbitalParameters',
    'compute_orbital_parameters',
    'compute_orbital_parameters_batch',
    'orbital_parameters',
    'longitude_of_perihelion',
    # Dataset
    'orbital_dataset',
    'year_range',
    # Configuration
    'ExtrapolationWarning',
    'enable_extrapolation_warning',
    'disable_extrapolation_warning',
    'is_extrapolation_warning_enabled',
    'extrapolation_warning',
    'get_accuracy_bound',
    'set_accuracy_bound',
]
