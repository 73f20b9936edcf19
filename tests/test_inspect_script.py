"""
Test the inspect_gacode command-line script.
"""
import importlib.util
from pathlib import Path

import pytest

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures('restore_logger')]

SCRIPT = Path(__file__).parent.parent / 'scripts' / 'inspect_gacode.py'


@pytest.fixture(scope='module')
def inspect_gacode():
    spec = importlib.util.spec_from_file_location('inspect_gacode', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_summary(inspect_gacode, sample_file, capsys):
    assert inspect_gacode.main([str(sample_file)]) == 0

    out = capsys.readouterr().out
    assert 'shot:    200000' in out
    assert 'nexp:    3' in out
    assert 'ni[1]' in out
    lines = out.splitlines()
    assert any(line.startswith('D ') for line in lines)
    assert any(line.startswith('C ') for line in lines)
    polflux = next(line for line in lines if line.startswith('polflux'))
    assert [float(v) for v in polflux.split()[1:]] == [-0.25, 0.0]


def test_positive_psi(inspect_gacode, sample_file, capsys):
    assert inspect_gacode.main([str(sample_file), '--positive-psi']) == 0
    polflux = next(line for line in capsys.readouterr().out.splitlines() if line.startswith('polflux'))
    assert [float(v) for v in polflux.split()[1:]] == [0.0, 0.25]


def test_missing_file(inspect_gacode, tmp_path, capsys):
    assert inspect_gacode.main([str(tmp_path / 'missing')]) == 1
    assert 'Could not open' in capsys.readouterr().err


def test_unparseable_file(inspect_gacode, write_gacode, capsys):
    path = write_gacode("# nion\n2\n")
    assert inspect_gacode.main([str(path)]) == 2
    assert 'nexp' in capsys.readouterr().err
