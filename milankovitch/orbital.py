"""
Orbital parameters of the Earth from the Berger (1978) solution

Computes eccentricity, obliquity and longitude of perihelion as a
function of calendar year.  The source of these calculations is:

    Andre L. Berger, 1978, "Long-Term Variations of Daily Insolation and
    Quaternary Climatic Changes", JAS, v.35, p.2362.

Also useful is: Andre L. Berger, May 1978, "A Simple Algorithm to Compute
Long Term Variations of Daily Insolation", Institut d'Astronomie et de
Geophysique, Universite Catholique de Louvain, Louvain-la-Neuve, No. 18.

The generated orbital parameters are precise within plus or minus
1,000,000 years from present.  Years outside that range are evaluated
all the same (see milankovitch.config for the optional warning).

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import warnings
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

import numpy as np

from . import config
from .series import EPOCH, harmonic_sum, year_offset
from .tables import ECCENTRICITY_TABLE, OBLIQUITY_TABLE, PRECESSION_TABLE

__all__ = [
    'OrbitalParameters',
    'compute_orbital_parameters',
    'compute_orbital_parameters_batch',
    'orbital_parameters',
    'longitude_of_perihelion',
]

# OBLIQ# = 23.320556 (degrees)             Equation 5.5 (15)
_MEAN_OBLIQUITY = 23.320556
# PSI# = 50.439273 (seconds of degree)     Equation 7.5 (16)
_PSI_RATE = 50.439273
# ZETA = 3.392506 (degrees)                Equation 7.5 (17)
_ZETA = 3.392506

_ARCSEC_PER_DEGREE = 3600.0
_TWO_PI = 2.0 * np.pi
_DEG_TO_RAD = _TWO_PI / 360.0


@dataclass(frozen=True)
class OrbitalParameters:
    """
    Milankovitch parameters for one year

    Attributes
    ----------
    eccentricity : float
        Eccentricity of the orbital ellipse (dimensionless)
    obliquity : float
        Latitude of the Tropic of Cancer (degrees)
    longitude_perihelion : float
        Spatial angle from vernal equinox to perihelion with the Sun as
        vertex (degrees, 0 <= value < 360)
    """
    eccentricity: float
    obliquity: float
    longitude_perihelion: float

    @property
    def obliquity_radians(self) -> float:
        return float(np.deg2rad(self.obliquity))

    @property
    def longitude_perihelion_radians(self) -> float:
        return float(np.deg2rad(self.longitude_perihelion))

    @property
    def precession_angle(self) -> float:
        """Orbit orientation used for rendering, 360 - longitude of perihelion"""
        return 360.0 - self.longitude_perihelion

    def __iter__(self) -> Iterator[float]:
        yield self.eccentricity
        yield self.obliquity
        yield self.longitude_perihelion


def longitude_of_perihelion(pie: Union[float, np.ndarray],
                            psi: Union[float, np.ndarray]
                            ) -> Union[float, np.ndarray]:
    """
    Longitude of perihelion from the perihelion and precession angles

    Parameters
    ----------
    pie : float or np.ndarray
        atan2(ECCEN sin(pi), ECCEN cos(pi)) (radians)
    psi : float or np.ndarray
        General precession in longitude (radians)

    Returns
    -------
    float or np.ndarray
        Longitude of perihelion (degrees, 0 <= value < 360)
    """
    # OMEGVP = PIE + PSI + pi                 Equation 6 (4.5)
    omega_bar = np.mod(pie + psi + 0.5 * _TWO_PI, _TWO_PI)

    # convert to conventions
    omega_bar = omega_bar * 180.0 / np.pi - 180.0
    omega_bar = np.where(omega_bar < 0.0, omega_bar + 360.0, omega_bar)
    # a tiny negative angle can round up to exactly 360
    omega_bar = np.where(omega_bar >= 360.0, omega_bar - 360.0, omega_bar)

    if np.ndim(omega_bar) == 0:
        return float(omega_bar)
    return omega_bar


def _compose(dy):
    """Evaluate the three series at year offsets dy (scalar or array)."""
    # Obliquity from Table 1 (2):
    # OBLIQD = OBLIQ# + sum[A cos(ft+delta)]   Equation 1 (5)
    sumc = harmonic_sum(OBLIQUITY_TABLE, dy, np.cos)
    obliquity = _MEAN_OBLIQUITY + sumc / _ARCSEC_PER_DEGREE

    # Eccentricity from Table 4 (1):
    # ECCEN sin(pi) = sum[M sin(gt+beta)]      Equation 4 (1)
    # ECCEN cos(pi) = sum[M cos(gt+beta)]      Equation 4 (1)
    esinpi = harmonic_sum(ECCENTRICITY_TABLE, dy, np.sin)
    ecospi = harmonic_sum(ECCENTRICITY_TABLE, dy, np.cos)
    eccentricity = np.sqrt(esinpi * esinpi + ecospi * ecospi)

    # Perihelion from Equation 4,6,7 (9) and Table 4,5 (1,3):
    # PSI = PSI# t + ZETA + sum[F sin(ft+delta)]   Equation 7 (9)
    pie = np.arctan2(esinpi, ecospi)
    fsinfd = harmonic_sum(PRECESSION_TABLE, dy, np.sin)
    psi = _DEG_TO_RAD * (_ZETA + (dy * _PSI_RATE + fsinfd) / _ARCSEC_PER_DEGREE)

    return eccentricity, obliquity, longitude_of_perihelion(pie, psi)


def _check_accuracy_bound(years) -> None:
    if not config.is_extrapolation_warning_enabled():
        return
    bound = config.get_accuracy_bound()
    distance = np.abs(np.asarray(years) - EPOCH)
    if np.any(distance > bound):
        worst = int(np.max(distance))
        warnings.warn(
            f"Orbital parameters requested {worst} years from {EPOCH}; "
            f"the Berger (1978) series are precise within {bound} years "
            "and the result is an extrapolation.",
            config.ExtrapolationWarning,
            stacklevel=3
        )


def compute_orbital_parameters(year: int) -> OrbitalParameters:
    """
    Compute the three Milankovitch parameters for a year

    Parameters
    ----------
    year : int
        Years A.D. are positive, B.C. are negative

    Returns
    -------
    OrbitalParameters
        Eccentricity, obliquity (degrees) and longitude of perihelion
        (degrees)

    Examples
    --------
    >>> from milankovitch import compute_orbital_parameters
    >>> eccen, obliq, omega_bar = compute_orbital_parameters(1950)
    """
    _check_accuracy_bound(year)
    eccentricity, obliquity, omega_bar = _compose(year_offset(year))
    return OrbitalParameters(
        eccentricity=float(eccentricity),
        obliquity=float(obliquity),
        longitude_perihelion=float(omega_bar),
    )


orbital_parameters = compute_orbital_parameters


def compute_orbital_parameters_batch(years: np.ndarray
                                     ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute Milankovitch parameters for many years at once

    Parameters
    ----------
    years : array_like
        Years A.D. are positive, B.C. are negative

    Returns
    -------
    eccentricity : np.ndarray
        Eccentricity (dimensionless), shape of years
    obliquity : np.ndarray
        Obliquity (degrees), shape of years
    longitude_perihelion : np.ndarray
        Longitude of perihelion (degrees), shape of years
    """
    years = np.asarray(years)
    _check_accuracy_bound(years)
    dy = np.atleast_1d(year_offset(years))
    eccentricity, obliquity, omega_bar = _compose(dy)
    shape = years.shape
    return (np.reshape(eccentricity, shape),
            np.reshape(obliquity, shape),
            np.reshape(omega_bar, shape))
