"""Tests for the command line interface."""

import numpy as np
import pytest

import gausspivot.cli as cli
from gausspivot.core.result import SolveReport, Status


class RecordingRun:
    """Stand-in for pipeline.run that records the config it receives."""

    def __init__(self, status=Status.SOLVED, message="Correct solution found."):
        self.status = status
        self.message = message
        self.config = None

    def __call__(self, config):
        self.config = config
        return SolveReport(config.size, self.status, 0.25, np.zeros(config.size),
                           self.message)


def test_cli_small_run(capsys):
    """End to end on a small system."""
    assert cli.main(["-s", "16"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Size: 16 rows"
    assert out[1].startswith("Time: ")
    assert out[1].endswith(" seconds")
    assert out[2] == "Correct solution found."


def test_cli_default_size(monkeypatch, capsys):
    fake = RecordingRun()
    monkeypatch.setattr(cli, "run", fake)

    assert cli.main([]) == 0
    assert fake.config.size == 1024
    assert fake.config.verify
    assert "Time: 0.250000 seconds" in capsys.readouterr().out


def test_cli_non_positive_size_keeps_default(monkeypatch, capsys):
    fake = RecordingRun()
    monkeypatch.setattr(cli, "run", fake)

    assert cli.main(["-s", "-3"]) == 0
    assert fake.config.size == 1024
    assert "-s is negative... using 1024" in capsys.readouterr().out

    assert cli.main(["-s", "0"]) == 0
    assert fake.config.size == 1024


def test_cli_options_reach_config(monkeypatch):
    fake = RecordingRun()
    monkeypatch.setattr(cli, "run", fake)

    cli.main(["--size", "12", "--atol", "0", "--no-verify"])

    assert fake.config.size == 12
    assert fake.config.atol == 0.0
    assert not fake.config.verify


def test_cli_singular_exit_status(monkeypatch, capsys):
    monkeypatch.setattr(cli, "run", RecordingRun(Status.SINGULAR, "singular"))

    assert cli.main(["-s", "4"]) == cli.EXIT_SINGULAR
    assert "The matrix is singular" in capsys.readouterr().out


def test_cli_mismatch_exit_status(monkeypatch, capsys):
    monkeypatch.setattr(cli, "run", RecordingRun(Status.MISMATCH, "bad x"))

    assert cli.main(["-s", "4"]) == cli.EXIT_MISMATCH
    assert "bad x" in capsys.readouterr().err


def test_cli_unknown_flag():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-q"])
    assert excinfo.value.code != 0


def test_cli_non_integer_size():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-s", "big"])
    assert excinfo.value.code == 2


def test_cli_invalid_atol_is_usage_error(monkeypatch, capsys):
    """Bad tolerances exit with status 2 before anything is solved."""
    fake = RecordingRun()
    monkeypatch.setattr(cli, "run", fake)

    for value in ("-1", "nan"):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-s", "4", "--atol", value])
        assert excinfo.value.code == 2

    assert fake.config is None
    assert "atol must be finite and non-negative" in capsys.readouterr().err


def test_cli_help_mentions_output_order(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])
    assert excinfo.value.code == 0
    assert "Size and Time are printed before the outcome" in capsys.readouterr().out
