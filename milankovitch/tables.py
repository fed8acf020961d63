"""
Harmonic series tables for the Berger (1978) orbital solution

Coefficients of the three trigonometric series used to evaluate the
long-term variations of Earth's orbit:

- Table 1 (2): obliquity relative to the mean ecliptic of date
- Table 4 (1): fundamental elements of the ecliptic, ECCEN sin(pi)
- Table 5 (3): general precession in longitude, psi

Table numbers refer to Berger (1978), JAS v.35 p.2362; the numbers in
parentheses refer to Berger (May 1978), Institut d'Astronomie et de
Geophysique, Universite Catholique de Louvain, No. 18.  The coefficients
are those of the GISS FORTRAN routine ORBPAR by Gary L. Russell, which are
slightly more precise than either publication.

Each row is (amplitude, frequency, phase):
    amplitude : arcseconds (obliquity, precession) or dimensionless
                (eccentricity)
    frequency : arcseconds per year
    phase     : degrees

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from typing import Dict, Iterator, NamedTuple, Sequence

import numpy as np

__all__ = [
    'HarmonicTerm',
    'HarmonicTable',
    'OBLIQUITY_TABLE',
    'ECCENTRICITY_TABLE',
    'PRECESSION_TABLE',
    'TABLES',
    'get_table',
]


class HarmonicTerm(NamedTuple):
    """One oscillating component of a harmonic series"""
    amplitude: float
    frequency: float
    phase: float


class HarmonicTable:
    """
    Immutable ordered table of harmonic terms

    Parameters
    ----------
    name : str
        Short table name
    terms : Sequence
        Rows of (amplitude, frequency, phase)
    description : str, optional
        Human readable description

    Notes
    -----
    Rows are stored in a read-only float64 array of shape (n_terms, 3).
    Row order is preserved; it only affects summation rounding.
    """

    def __init__(self, name: str, terms: Sequence, description: str = ''):
        data = np.array(terms, dtype=np.float64)
        if data.ndim != 2 or data.shape[1] != 3:
            raise ValueError(
                f"Harmonic table '{name}' must have shape (n_terms, 3), "
                f"got {data.shape}"
            )
        if data.shape[0] == 0:
            raise ValueError(f"Harmonic table '{name}' has no terms")
        data.flags.writeable = False
        self._name = name
        self._description = description
        self._data = data

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def data(self) -> np.ndarray:
        """Read-only (n_terms, 3) coefficient array"""
        return self._data

    @property
    def amplitude(self) -> np.ndarray:
        return self._data[:, 0]

    @property
    def frequency(self) -> np.ndarray:
        """Frequencies (arcseconds per year)"""
        return self._data[:, 1]

    @property
    def phase(self) -> np.ndarray:
        """Phases (degrees)"""
        return self._data[:, 2]

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> HarmonicTerm:
        amplitude, frequency, phase = self._data[index]
        return HarmonicTerm(float(amplitude), float(frequency), float(phase))

    def __iter__(self) -> Iterator[HarmonicTerm]:
        for i in range(len(self)):
            yield self[i]

    def __repr__(self) -> str:
        return f"HarmonicTable(name={self._name!r}, n_terms={len(self)})"


# Table 1 (2).  Obliquity relative to mean ecliptic of date: OBLIQD
_OBLIQUITY = (
    (-2462.2214466, 31.609974, 251.9025),
    (-857.3232075, 32.620504, 280.8325),
    (-629.3231835, 24.172203, 128.3057),
    (-414.2804924, 31.983787, 292.7252),
    (-311.7632587, 44.828336, 15.3747),
    (308.9408604, 30.973257, 263.7951),
    (-162.5533601, 43.668246, 308.4258),
    (-116.1077911, 32.246691, 240.0099),
    (101.1189923, 30.599444, 222.9725),
    (-67.6856209, 42.681324, 268.7809),
    (24.9079067, 43.836462, 316.7998),
    (22.5811241, 47.439436, 319.6024),
    (-21.1648355, 63.219948, 143.8050),
    (-15.6549876, 64.230478, 172.7351),
    (15.3936813, 1.010530, 28.9300),
    (14.6660938, 7.437771, 123.5968),
    (-11.7273029, 55.782177, 20.2082),
    (10.2742696, 0.373813, 40.8226),
    (6.4914588, 13.218362, 123.4722),
    (5.8539148, 62.583231, 155.6977),
    (-5.4872205, 63.593761, 184.6277),
    (-5.4290191, 76.438310, 267.2772),
    (5.1609570, 45.815258, 55.0196),
    (5.0786314, 8.448301, 152.5268),
    (-4.0735782, 56.792707, 49.1382),
    (3.7227167, 49.747842, 204.6609),
    (3.3971932, 12.058272, 56.5233),
    (-2.8347004, 75.278220, 200.3284),
    (-2.6550721, 65.241008, 201.6651),
    (-2.5717867, 64.604291, 213.5577),
    (-2.4712188, 1.647247, 17.0374),
    (2.4625410, 7.811584, 164.4194),
    (2.2464112, 12.207832, 94.5422),
    (-2.0755511, 63.856665, 131.9124),
    (-1.9713669, 56.155990, 61.0309),
    (-1.8813061, 77.448840, 296.2073),
    (-1.8468785, 6.801054, 135.4894),
    (1.8186742, 62.209418, 114.8750),
    (1.7601888, 20.656133, 247.0691),
    (-1.5428851, 48.344406, 256.6114),
    (1.4738838, 55.145460, 32.1008),
    (-1.4593669, 69.000539, 143.6804),
    (1.4192259, 11.071350, 16.8784),
    (-1.1818980, 74.291298, 160.6835),
    (1.1756474, 11.047742, 27.5932),
    (-1.1316126, 0.636717, 348.1074),
    (1.0896928, 12.844549, 82.6496),
)

# Table 4 (1).  Fundamental elements of the ecliptic: ECCEN sin(pi)
_ECCENTRICITY = (
    (0.01860798, 4.207205, 28.620089),
    (0.01627522, 7.346091, 193.788772),
    (-0.01300660, 17.857263, 308.307024),
    (0.00988829, 17.220546, 320.199637),
    (-0.00336700, 16.846733, 279.376984),
    (0.00333077, 5.199079, 87.195000),
    (-0.00235400, 18.231076, 349.129677),
    (0.00140015, 26.216758, 128.443387),
    (0.00100700, 6.359169, 154.143880),
    (0.00085700, 16.210016, 291.269597),
    (0.00064990, 3.065181, 114.860583),
    (0.00059900, 16.583829, 332.092251),
    (0.00037800, 18.493980, 296.414411),
    (-0.00033700, 6.190953, 145.769910),
    (0.00027600, 18.867793, 337.237063),
    (0.00018200, 17.425567, 152.092288),
    (-0.00017400, 6.186001, 126.839891),
    (-0.00012400, 18.417441, 210.667199),
    (0.00001250, 0.667863, 72.108838),
)

# Table 5 (3).  General precession in longitude: psi
_PRECESSION = (
    (7391.0225890, 31.609974, 251.9025),
    (2555.1526947, 32.620504, 280.8325),
    (2022.7629188, 24.172203, 128.3057),
    (-1973.6517951, 0.636717, 348.1074),
    (1240.2321818, 31.983787, 292.7252),
    (953.8679112, 3.138886, 165.1686),
    (-931.7537108, 30.973257, 263.7951),
    (872.3795383, 44.828336, 15.3747),
    (606.3544732, 0.991874, 58.5749),
    (-496.0274038, 0.373813, 40.8226),
    (456.9608039, 43.668246, 308.4258),
    (346.9462320, 32.246691, 240.0099),
    (-305.8412902, 30.599444, 222.9725),
    (249.6173246, 2.147012, 106.5937),
    (-199.1027200, 10.511172, 114.5182),
    (191.0560889, 42.681324, 268.7809),
    (-175.2936572, 13.650058, 279.6869),
    (165.9068833, 0.986922, 39.6448),
    (161.1285917, 9.874455, 126.4108),
    (139.7878093, 13.013341, 291.5795),
    (-133.5228399, 0.262904, 307.2848),
    (117.0673811, 0.004952, 18.9300),
    (104.6907281, 1.142024, 273.7596),
    (95.3227476, 63.219948, 143.8050),
    (86.7824524, 0.205021, 191.8927),
    (86.0857729, 2.151964, 125.5237),
    (70.5893698, 64.230478, 172.7351),
    (-69.9719343, 43.836462, 316.7998),
    (-62.5817473, 47.439436, 319.6024),
    (61.5450059, 1.384343, 69.7526),
    (-57.9364011, 7.437771, 123.5968),
    (57.1899832, 18.829299, 217.6432),
    (-57.0236109, 9.500642, 85.5882),
    (-54.2119253, 0.431696, 156.2147),
    (53.2834147, 1.160090, 66.9489),
    (52.1223575, 55.782177, 20.2082),
    (-49.0059908, 12.639528, 250.7568),
    (-48.3118757, 1.155138, 48.0188),
    (-45.4191685, 0.168216, 8.3739),
    (-42.2357920, 1.647247, 17.0374),
    (-34.7971099, 10.884985, 155.3409),
    (34.4623613, 5.610937, 94.1709),
    (-33.8356643, 12.658184, 221.1120),
    (33.6689362, 1.010530, 28.9300),
    (-31.2521586, 1.983748, 117.1498),
    (-30.8798701, 14.023871, 320.5095),
    (28.4640769, 0.560178, 262.3602),
    (-27.1960802, 1.273434, 336.2148),
    (27.0860736, 12.021467, 233.0046),
    (-26.3437456, 62.583231, 155.6977),
    (24.7253740, 63.593761, 184.6277),
    (24.6732126, 76.438310, 267.2772),
    (24.4272733, 4.280910, 78.9281),
    (24.0127327, 13.218362, 123.4722),
    (21.7150294, 17.818769, 188.7132),
    (-21.5375347, 8.359495, 180.1364),
    (18.1148363, 56.792707, 49.1382),
    (-16.9603104, 8.448301, 152.5268),
    (-16.1765215, 1.978796, 98.2198),
    (15.5567653, 8.863925, 97.4808),
    (15.4846529, 0.186365, 221.5376),
    (15.2150632, 8.996212, 168.2438),
    (14.5047426, 6.771027, 161.1199),
    (-14.3873316, 45.815258, 55.0196),
    (13.1351419, 12.002811, 262.6495),
    (12.8776311, 75.278220, 200.3284),
    (11.9867234, 65.241008, 201.6651),
    (11.9385578, 18.870667, 294.6547),
    (11.7030822, 22.009553, 99.8233),
    (11.6018181, 64.604291, 213.5577),
    (-11.2617293, 11.498094, 154.1631),
    (-10.4664199, 0.578834, 232.7153),
    (10.4333970, 9.237738, 138.3034),
    (-10.2377466, 49.747842, 204.6609),
    (10.1934446, 2.147012, 106.5938),
    (-10.1280191, 1.196895, 250.4676),
    (10.0289441, 2.133898, 332.3345),
    (-10.0034259, 0.173168, 27.3039),
)

OBLIQUITY_TABLE = HarmonicTable(
    'obliquity', _OBLIQUITY,
    'Obliquity relative to mean ecliptic of date (arcseconds)'
)
ECCENTRICITY_TABLE = HarmonicTable(
    'eccentricity', _ECCENTRICITY,
    'Fundamental elements of the ecliptic, ECCEN sin(pi)'
)
PRECESSION_TABLE = HarmonicTable(
    'precession', _PRECESSION,
    'General precession in longitude (arcseconds)'
)

TABLES: Dict[str, HarmonicTable] = {
    table.name: table
    for table in (OBLIQUITY_TABLE, ECCENTRICITY_TABLE, PRECESSION_TABLE)
}


def get_table(name: str) -> HarmonicTable:
    """
    Get a harmonic table by name

    Parameters
    ----------
    name : str
        'obliquity', 'eccentricity' or 'precession' (case-insensitive)

    Returns
    -------
    HarmonicTable
    """
    try:
        return TABLES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown harmonic table '{name}'. "
            f"Available: {', '.join(sorted(TABLES))}"
        ) from None
