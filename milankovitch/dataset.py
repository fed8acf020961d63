"""
milankovitch.dataset - Orbital parameter time series as xarray Datasets

Usage:
    from milankovitch.dataset import orbital_dataset, year_range

    ds = orbital_dataset(year_range(-125000, 2000, 1000))
    ds.obliquity.sel(year=-21000)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np
import xarray as xr

from . import config
from .orbital import compute_orbital_parameters_batch
from .series import EPOCH

__all__ = ['orbital_dataset', 'year_range']

# CF-style variable attributes
_VARIABLE_ATTRS = {
    'eccentricity': {
        'long_name': "Eccentricity of the Earth's orbit",
        'units': '1',
    },
    'obliquity': {
        'long_name': 'Mean obliquity (axial tilt) of the Earth',
        'units': 'degrees',
    },
    'longitude_perihelion': {
        'long_name': 'Longitude of perihelion relative to the vernal equinox',
        'units': 'degrees',
    },
}


def year_range(start: int, stop: int, step: int = 1) -> np.ndarray:
    """
    Integer year grid including both end points when reachable

    Parameters
    ----------
    start : int
        First year
    stop : int
        Last year (included if it falls on the grid)
    step : int
        Spacing in years, non-zero; negative steps count backwards

    Returns
    -------
    np.ndarray
        Years (int64)
    """
    if step == 0:
        raise ValueError("step must be non-zero")
    end = stop + (1 if step > 0 else -1)
    return np.arange(start, end, step, dtype=np.int64)


def orbital_dataset(years) -> xr.Dataset:
    """
    Orbital parameters for a set of years

    Parameters
    ----------
    years : array_like
        Years A.D. are positive, B.C. are negative (1D, whole numbers)

    Returns
    -------
    xr.Dataset
        Variables eccentricity, obliquity and longitude_perihelion on
        the year coordinate

    Raises
    ------
    ValueError
        If years are not whole numbers or not one-dimensional
    """
    years = np.atleast_1d(np.asarray(years))
    if not np.issubdtype(years.dtype, np.integer):
        if not np.all(np.isfinite(years)) or np.any(years != np.round(years)):
            raise ValueError("years must be whole numbers")
    years = years.astype(np.int64)
    if years.ndim != 1:
        raise ValueError(f"years must be one-dimensional, got shape {years.shape}")

    eccentricity, obliquity, omega_bar = compute_orbital_parameters_batch(years)

    data_vars = {
        'eccentricity': ('year', eccentricity, _VARIABLE_ATTRS['eccentricity']),
        'obliquity': ('year', obliquity, _VARIABLE_ATTRS['obliquity']),
        'longitude_perihelion': ('year', omega_bar,
                                 _VARIABLE_ATTRS['longitude_perihelion']),
    }
    coords = {
        'year': ('year', years, {
            'long_name': 'year',
            'units': 'years A.D. (B.C. negative)',
            'axis': 'T',
        }),
    }
    attrs = {
        'title': 'Orbital parameters of the Earth',
        'source': 'Berger (1978), JAS v.35 p.2362',
        'epoch': EPOCH,
        'accuracy_bound_years': config.get_accuracy_bound(),
    }
    return xr.Dataset(data_vars=data_vars, coords=coords, attrs=attrs)
