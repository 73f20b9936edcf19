"""
Shared pytest fixtures for gacode_reader tests.

This file is automatically discovered by pytest and makes fixtures available
to all test files in this directory.
"""

import logging
import re

import pytest


# Reference input with nexp=3 grid points and nion=2 species (D, C).
# Mixes directives with commentary and fields the reader does not map.
SAMPLE_GACODE = """\
#  *original : null
# *statefile : null
#     *gfile : g200000.01000
# shot
 200000
# nexp
3
# nion
2
# name
D C
# type
[therm] [therm]
# masse
 5.4488741E-04
# mass
 2.0000000E+00 1.2000000E+01
# ze
-1.0000000E+00
# z
 1.0000000E+00 6.0000000E+00
# torfluxa | Wb/radian
-1.2345678E+00
# rcentr | m
 1.6955000E+00
# polflux | Wb/radian
 1 0.0000000E+00
 2 1.0000000E-01
 3 2.5000000E-01
# ne | 10^19/m^3
 1 5.0000000E+00
 2 4.0000000E+00
 3 1.0000000E+00
# ni | 10^19/m^3
 1 4.0000000E+00 1.5000000E-01
 2 3.2000000E+00 1.3000000E-01
 3 8.0000000E-01 3.0000000E-02
# te | keV
 1 3.0000000E+00
 2 2.0000000E+00
 3 5.0000000E-01
# ti | keV
 1 2.8000000E+00 2.7000000E+00
 2 1.9000000E+00 1.8000000E+00
 3 4.0000000E-01 3.0000000E-01
# rho | -
 1 0.0000000E+00
 2 5.0000000E-01
 3 1.0000000E+00
"""

# Expected values for SAMPLE_GACODE (polflux as written, before sign convention)
SAMPLE_EXPECTED = {
    'shot': 200000,
    'nexp': 3,
    'nion': 2,
    'species_identifiers': ['D', 'C'],
    'masse': 5.4488741e-04,
    'ze': -1.0,
    'mass': [2.0, 12.0],
    'z': [1.0, 6.0],
    'polflux': [0.0, 0.1, 0.25],
    'ne': [5.0, 4.0, 1.0],
    'te': [3.0, 2.0, 0.5],
    'ni': [[4.0, 3.2, 0.8], [0.15, 0.13, 0.03]],
    'ti': [[2.8, 1.9, 0.4], [2.7, 1.8, 0.3]],
}

# Minimal input from the format description
MINIMAL_GACODE = "# nion\n2\n# nexp\n3\n# name\nD C\n# masse\n9.1e-31\n# z\n1 6\n# ne\n1 1.0e19 2 1.2e19 3 1.5e19"


def relabel_indices(text, labels):
    """
    Replace the leading index label of every 'index value...' row.

    Args:
        text: input.gacode content
        labels: Mapping old label -> new label

    Returns:
        Content with relabelled rows; values are untouched
    """
    def replace(match):
        old = int(match.group(2))
        return f"{match.group(1)}{labels.get(old, old)} "

    return re.sub(r'^(\s*)(\d+) ', replace, text, flags=re.MULTILINE)


@pytest.fixture
def sample_text():
    return SAMPLE_GACODE


@pytest.fixture
def sample_expected():
    return SAMPLE_EXPECTED


@pytest.fixture
def minimal_text():
    return MINIMAL_GACODE


@pytest.fixture
def write_gacode(tmp_path):
    """Factory writing content to an input.gacode file under tmp_path."""
    def write(text, name='input.gacode'):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write


@pytest.fixture
def sample_file(write_gacode, sample_text):
    return write_gacode(sample_text)


@pytest.fixture
def restore_logger():
    """Undo setup_logging changes to the gacode_reader logger."""
    logger = logging.getLogger('gacode_reader')
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
