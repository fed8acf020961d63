"""
Command line interface

    milankovitch 1950 -21000
    echo "0 -100000" | milankovitch --csv

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import argparse
import sys
from typing import List, Optional

from . import config
from .orbital import compute_orbital_parameters

_FIELDS = ('eccentricity', 'obliquity', 'longitude_perihelion')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='milankovitch',
        description='Compute eccentricity, obliquity and longitude of '
                    'perihelion of the Earth (Berger 1978)',
    )
    parser.add_argument(
        'years', nargs='*', type=int, metavar='YEAR',
        help='years A.D. are positive, B.C. are negative '
             '(read from stdin when omitted)',
    )
    parser.add_argument(
        '--csv', action='store_true',
        help='print a header and one comma-separated row per year',
    )
    parser.add_argument(
        '--digits', type=int, default=10,
        help='significant digits of the printed values, at least 6 (default: 10)',
    )
    parser.add_argument(
        '--warn-extrapolation', action='store_true',
        help='warn for years outside the accuracy bound of the series',
    )
    return parser


def _read_years(parser: argparse.ArgumentParser, stream) -> List[int]:
    years = []
    for token in stream.read().split():
        try:
            years.append(int(token))
        except ValueError:
            parser.error(f"invalid year: {token!r}")
    if not years:
        parser.error('no years given')
    return years


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.digits < 6:
        parser.error('--digits must be at least 6')

    years = args.years or _read_years(parser, sys.stdin)
    fmt = f'#.{args.digits}g'

    with config.extrapolation_warning(
            args.warn_extrapolation or config.is_extrapolation_warning_enabled()):
        results = [(year, compute_orbital_parameters(year)) for year in years]

    if args.csv:
        print(','.join(('year',) + _FIELDS))
        for year, params in results:
            print(','.join([str(year)] + [format(v, fmt) for v in params]))
    else:
        blocks = []
        for year, params in results:
            lines = [f'year: {year}']
            lines += [f'{name}: {value:{fmt}}'
                      for name, value in zip(_FIELDS, params)]
            blocks.append('\n'.join(lines))
        print('\n\n'.join(blocks))
    return 0


if __name__ == '__main__':
    sys.exit(main())
