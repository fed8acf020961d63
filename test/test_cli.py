"""
test_cli.py
Tests for the milankovitch command line interface
"""
import io

import numpy as np
import pytest

from milankovitch import cli, config


def _significant_digits(text):
    """Number of significant digits in a printed decimal"""
    mantissa = text.lstrip('+-').lower().split('e')[0]
    return len(mantissa.replace('.', '').lstrip('0'))


def test_labeled_output(capsys):
    assert cli.main(['1950']) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split(': ')[0] for line in out] == [
        'year', 'eccentricity', 'obliquity', 'longitude_perihelion',
    ]
    assert out[0] == 'year: 1950'
    values = [float(line.split(': ')[1]) for line in out[1:]]
    assert np.allclose(values, [0.016723932997, 23.446271289398, 102.0390495176],
                       rtol=1e-9, atol=0.0)


def test_multiple_years(capsys):
    assert cli.main(['1950', '-21000']) == 0
    out = capsys.readouterr().out
    blocks = out.strip().split('\n\n')
    assert len(blocks) == 2
    assert blocks[1].startswith('year: -21000')


def test_csv_output(capsys):
    assert cli.main(['--csv', '--digits', '6', '1950', '0']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'year,eccentricity,obliquity,longitude_perihelion'
    assert out[1] == '1950,0.0167239,23.4463,102.039'
    assert out[2] == '0,0.0174657,23.6954,68.8197'
    assert len(out) == 3


@pytest.mark.parametrize("digits", ['6', '8', '12'])
@pytest.mark.parametrize("year", ['1950', '-100000', '-400000'])
def test_significant_digits(digits, year, capsys):
    """Every printed value carries the requested significant digits"""
    assert cli.main(['--csv', '--digits', digits, year]) == 0
    row = capsys.readouterr().out.splitlines()[1].split(',')
    for field in row[1:]:
        assert _significant_digits(field) == int(digits)


def test_default_digits(capsys):
    assert cli.main(['1950']) == 0
    out = capsys.readouterr().out.splitlines()
    for line in out[1:]:
        assert _significant_digits(line.split(': ')[1]) >= 6


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('1950\n 2000 \n'))
    assert cli.main(['--csv']) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split(',')[0] for line in out[1:]] == ['1950', '2000']


@pytest.mark.parametrize("argv", [
    ['abc'],
    ['19.5'],
    ['--digits', '5', '1950'],
    ['--digits', '2', '1950'],
    ['--digits', '-1', '1950'],
])
def test_invalid_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


def test_invalid_stdin(monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('1950 nineteen'))
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2


def test_empty_stdin(monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO(''))
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2


def test_warn_extrapolation(capsys):
    config.disable_extrapolation_warning()
    with pytest.warns(config.ExtrapolationWarning):
        assert cli.main(['--warn-extrapolation', '-3000000']) == 0
    assert config.is_extrapolation_warning_enabled() is False
