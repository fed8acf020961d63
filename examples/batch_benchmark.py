#!/usr/bin/env python
"""
Benchmark runner script

Compares performance of:
1. milankovitch (one call per year)
2. milankovitch (vectorised batch)

and prints the extremes of each parameter over the last glacial cycles.
"""

import sys
import time
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import milankovitch

# Configuration
N_REPEATS = 3

# Test sizes
SIZES = {
    'small': {'start': -1000, 'stop': 2000, 'step': 10, 'label': 'Small (300 years)'},
    'medium': {'start': -125000, 'stop': 2000, 'step': 50, 'label': 'Medium (2,500 years)'},
    'large': {'start': -1000000, 'stop': 0, 'step': 20, 'label': 'Large (50,000 years)'},
}


def run_scalar(years):
    """One call per year"""
    return [milankovitch.compute_orbital_parameters(int(y)) for y in years]


def run_batch(years):
    """Single vectorised call"""
    return milankovitch.compute_orbital_parameters_batch(years)


def time_it(func, *args):
    """Best wall time over N_REPEATS runs (seconds)"""
    best = np.inf
    for _ in range(N_REPEATS):
        t0 = time.perf_counter()
        func(*args)
        best = min(best, time.perf_counter() - t0)
    return best


def main():
    print("=" * 60)
    print("milankovitch benchmark")
    print("=" * 60)

    for size in SIZES.values():
        years = milankovitch.year_range(size['start'], size['stop'], size['step'])
        t_scalar = time_it(run_scalar, years)
        t_batch = time_it(run_batch, years)
        print(f"\n{size['label']}")
        print(f"  scalar: {t_scalar * 1000:10.2f} ms")
        print(f"  batch:  {t_batch * 1000:10.2f} ms  ({t_scalar / t_batch:.1f}x)")

    # Last 800,000 years
    ds = milankovitch.orbital_dataset(milankovitch.year_range(-800000, 2000, 100))
    print("\nExtremes over the last 800,000 years")
    for name in ('eccentricity', 'obliquity'):
        var = ds[name]
        print(f"  {name:14s} min {float(var.min()):.6f} at {int(var.idxmin())}, "
              f"max {float(var.max()):.6f} at {int(var.idxmax())}")


if __name__ == '__main__':
    main()
