"""
Benchmark script for reading input.gacode files.

Writes a synthetic input.gacode with the requested sizes to a temporary
file and measures the time needed to read it back.

Usage:
    python benchmark_reader.py [--nexp NEXP] [--nion NION] [--repeat N] [--verbose]

Example:
    python benchmark_reader.py --nexp 501 --nion 6 --repeat 20 --verbose
"""

import argparse
import sys
import tempfile
import time
from pathlib import Path

import numpy as np

# Add parent directory to path to import gacode_reader
sys.path.insert(0, str(Path(__file__).parent.parent))

from gacode_reader import read_input_gacode


def synthetic_gacode(nexp, nion, shot=200000):
    """
    Build input.gacode text with smooth synthetic profiles.

    Args:
        nexp: Number of radial grid points
        nion: Number of ion species

    Returns:
        File content as a string
    """
    rho = np.linspace(0.0, 1.0, nexp)
    lines = [
        "#  *original : null",
        "# *statefile : null",
        f"# shot\n{shot}",
        f"# nexp\n{nexp}",
        f"# nion\n{nion}",
        "# name\n" + " ".join(f"S{i}" for i in range(nion)),
        "# masse\n 5.4488741E-04",
        "# mass\n" + " ".join(f"{2.0 * (i + 1):.7E}" for i in range(nion)),
        "# ze\n-1.0000000E+00",
        "# z\n" + " ".join(f"{float(i + 1):.7E}" for i in range(nion)),
    ]
    profiles = {
        'polflux | Wb/radian': 0.5 * rho ** 2,
        'ne | 10^19/m^3': 5.0 * (1.0 - rho ** 2) + 0.5,
        'te | keV': 3.0 * (1.0 - rho ** 2) ** 1.5 + 0.1,
    }
    for label, values in profiles.items():
        lines.append(f"# {label}")
        lines.extend(f"{i + 1:4d} {v: .7E}" for i, v in enumerate(values))
    for label in ('ni | 10^19/m^3', 'ti | keV'):
        lines.append(f"# {label}")
        for i, r in enumerate(rho):
            row = " ".join(f"{(1.0 - r ** 2) / (k + 1) + 0.1: .7E}" for k in range(nion))
            lines.append(f"{i + 1:4d} {row}")
    return "\n".join(lines) + "\n"


def benchmark_reader(nexp, nion, repeat, verbose=False):
    """
    Benchmark reading a synthetic file.

    Returns:
        Tuple of (mean_time, best_time) in seconds
    """
    if verbose:
        print(f"\n{'='*70}")
        print(f"Benchmarking read_input_gacode (nexp={nexp}, nion={nion})")
        print(f"{'='*70}")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / 'input.gacode'
        path.write_text(synthetic_gacode(nexp, nion))

        times = []
        for i in range(repeat):
            start_time = time.time()
            plasma = read_input_gacode(path)
            times.append(time.time() - start_time)
            if verbose:
                print(f"  Run {i + 1}: {times[-1] * 1000:.2f} ms")

    assert plasma.nexp == nexp and plasma.nion == nion and plasma.shot == 200000
    return sum(times) / len(times), min(times)


def main():
    parser = argparse.ArgumentParser(
        description='Benchmark input.gacode reading'
    )
    parser.add_argument('--nexp', type=int, default=201,
                        help='Number of grid points (default: 201)')
    parser.add_argument('--nion', type=int, default=5,
                        help='Number of ion species (default: 5)')
    parser.add_argument('--repeat', type=int, default=10,
                        help='Number of timed reads (default: 10)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print verbose progress messages')

    args = parser.parse_args()

    mean_time, best_time = benchmark_reader(args.nexp, args.nion, args.repeat, verbose=args.verbose)

    print(f"\n{'='*70}")
    print(f"READER BENCHMARK RESULTS")
    print(f"{'='*70}")
    print(f"  Mean: {mean_time * 1000:.2f} ms")
    print(f"  Best: {best_time * 1000:.2f} ms")
    print(f"{'='*70}\n")


if __name__ == '__main__':
    main()
