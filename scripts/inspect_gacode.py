"""
Print a summary of an input.gacode file.

Reads the file with gacode_reader and prints sizes, species, scalar fields
and the range of every profile that was present in the file.

Usage:
    python scripts/inspect_gacode.py FILE [--positive-psi] [-v]

    --positive-psi    Keep the polflux sign as written in the file
    -v, --verbose     Increase log verbosity (-v INFO, -vv DEBUG)

Exit status is 1 if the file cannot be opened and 2 if it cannot be parsed.
"""

import argparse
from pathlib import Path
import sys

# Add parent directory to path to import gacode_reader
sys.path.insert(0, str(Path(__file__).parent.parent))

from gacode_reader import GacodeParseError, load_input_gacode
from gacode_reader.logging import setup_logging

PROFILES = ['polflux', 'ne', 'te']
SPECIES_PROFILES = ['ni', 'ti']


def summarize(plasma):
    """
    Build the summary lines for a parsed Plasma.

    Args:
        plasma: Plasma returned by the reader

    Returns:
        list[str]: Lines to print
    """
    lines = [
        f"shot:    {plasma.shot}",
        f"nexp:    {plasma.nexp}",
        f"nion:    {plasma.nion}",
        f"masse:   {plasma.masse}",
        f"ze:      {plasma.ze}",
        "",
        f"{'species':<10}{'mass':>12}{'z':>8}",
    ]
    for i in range(plasma.nion):
        name = plasma.species_identifiers[i] if i < len(plasma.species_identifiers) else '?'
        lines.append(f"{name:<10}{plasma.mass[i]:>12.4g}{plasma.z[i]:>8.3g}")

    lines.extend(["", f"{'profile':<12}{'min':>14}{'max':>14}"])
    for key in PROFILES:
        if key in plasma.seen:
            values = getattr(plasma, key)
            lines.append(f"{key:<12}{values.min():>14.5g}{values.max():>14.5g}")
    for key in SPECIES_PROFILES:
        if key in plasma.seen:
            values = getattr(plasma, key)
            for i in range(plasma.nion):
                label = f"{key}[{i}]"
                lines.append(f"{label:<12}{values[i].min():>14.5g}{values[i].max():>14.5g}")
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Summarize an input.gacode profile file'
    )
    parser.add_argument(
        'file',
        type=str,
        help='Path to input.gacode'
    )
    parser.add_argument(
        '--positive-psi',
        action='store_true',
        help='Do not negate polflux (default: negate to match G-EQDSK)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase log verbosity'
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        result = load_input_gacode(args.file, negative_psi=not args.positive_psi)
    except GacodeParseError as e:
        print(f"Could not parse {args.file}: {e}", file=sys.stderr)
        return 2

    if not result.ok:
        print(f"Could not open {args.file}: {result.error}", file=sys.stderr)
        return 1

    print(f"\n{'='*50}")
    print(f"{args.file}")
    print(f"{'='*50}")
    for line in summarize(result.plasma):
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
