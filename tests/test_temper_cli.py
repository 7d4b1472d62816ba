from __future__ import annotations

import sys

import pytest

import temper
from constants.error import DegreesParseError, InvalidScale, MissingArgument
from utils.scales import Scale


def _run(capsys, *args):
    code = temper.main(["temper", *args])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_full_sentence(capsys):
    code, out, err = _run(capsys, "50", "c", "f")
    assert code == 0
    assert out == "50.00 celsius is 122.00 fahrenheit\n"
    assert err == ""


def test_result_only(capsys):
    code, out, err = _run(capsys, "50", "c", "f", "-ro")
    assert code == 0
    assert out == "122.00\n"
    assert err == ""


def test_result_only_flag_anywhere_after_positionals(capsys):
    code, out, _ = _run(capsys, "581.67", "RANK", "Celsius", "extra", "-ro")
    assert code == 0
    assert out == "50.00\n"


def test_scientific_notation_degrees(capsys):
    code, out, _ = _run(capsys, "5e1", "celsius", "kelvin")
    assert code == 0
    assert out == "50.00 celsius is 323.15 kelvin\n"


@pytest.mark.parametrize(
    "args,message",
    [
        ((), "Didn't get a degrees value"),
        (("50",), "Didn't get the origin temperature scale"),
        (("50", "c"), "Didn't get the result temperature scale"),
        (("abc", "c"), "Didn't get the result temperature scale"),
        (("abc", "c", "f"), "Couldn't parse the degrees"),
        (("-ro", "c", "f"), "Couldn't parse the degrees"),
        (("50", "x", "f"), "Invalid origin temperature scale"),
        (("50", "c", "elvin"), "Invalid result temperature scale"),
        (("50", "x", "y"), "Invalid origin temperature scale"),
    ],
)
def test_argument_errors(capsys, args, message):
    code, out, err = _run(capsys, *args)
    assert code == 1
    assert out == ""
    assert err.startswith("Usage: temper <degrees> (origin scale) (result scale) [options]\n")
    assert err.rstrip("\n").endswith(f"Arguments error: {message}")


def test_usage_lists_scales_and_options(capsys):
    temper.usage("prog")
    err = capsys.readouterr().err
    assert "Usage: prog <degrees>" in err
    assert "Temperature scales:\n" in err
    assert "Celsius, 'c' for short.\n" in err
    assert "Fahrenheit, 'f' for short.\n" in err
    assert "Kelvin, 'k' for short.\n" in err
    assert "Rankine, 'r' for short.\n" in err
    assert "-ro: Result Only.\n" in err


def test_verbose_logs_to_stderr_only(capsys):
    code, out, err = _run(capsys, "50", "c", "f", "-v")
    assert code == 0
    assert out == "50.00 celsius is 122.00 fahrenheit\n"
    assert "DEBUG" in err
    assert "Converted" in err


def test_config_from_args():
    config = temper.Config.from_args(["-40", "f", "c", "-ro"])
    assert config.result_only is True
    assert config.verbose is False
    assert config.conversion.from_scale is Scale.FAHRENHEIT
    assert config.conversion.to_scale is Scale.CELSIUS
    assert config.conversion.result == pytest.approx(-40.0)


def test_config_errors_carry_context():
    with pytest.raises(MissingArgument) as missing:
        temper.Config.from_args(["10"])
    assert missing.value.argument == "origin"

    with pytest.raises(DegreesParseError) as bad_degrees:
        temper.Config.from_args(["ten", "c", "f"])
    assert bad_degrees.value.value == "ten"
    assert isinstance(bad_degrees.value.original, ValueError)

    with pytest.raises(InvalidScale) as bad_scale:
        temper.Config.from_args(["10", "c", "q"])
    assert bad_scale.value.message == "Invalid result temperature scale"
    assert isinstance(bad_scale.value.__cause__, InvalidScale)


def test_empty_scale_defaults_to_celsius(capsys):
    code, out, _ = _run(capsys, "10", "", "k")
    assert code == 0
    assert out == "10.00 celsius is 283.15 kelvin\n"


@pytest.mark.parametrize(
    "degrees,expected",
    [
        (" 50 ", "50.00 celsius is 122.00 fahrenheit\n"),
        ("1_0", "10.00 celsius is 50.00 fahrenheit\n"),
        ("Infinity", "inf celsius is inf fahrenheit\n"),
        ("inf", "inf celsius is inf fahrenheit\n"),
        ("NaN", "nan celsius is nan fahrenheit\n"),
    ],
)
def test_degrees_use_the_float_parser(capsys, degrees, expected):
    code, out, err = _run(capsys, degrees, "c", "f")
    assert code == 0
    assert out == expected
    assert err == ""


class _ClosedPipe:
    def write(self, text):
        raise BrokenPipeError("pipe closed")

    def flush(self):
        pass


def test_output_failure_reports_application_error(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdout", _ClosedPipe())
    code = temper.main(["temper", "50", "c", "f"])
    monkeypatch.undo()
    err = capsys.readouterr().err
    assert code == 1
    assert err.startswith("Usage: temper <degrees>")
    assert err.endswith("Application error: pipe closed\n")
