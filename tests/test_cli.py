"""Tests for the typing-bench command line."""

import msgspec
import pytest

from typing_bench.cli import main

pytestmark = pytest.mark.usefixtures("clean_env")


def test_main_runs_user_variant(capsys):
    assert main(["--iterations", "5", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Running with 5 iterations..." in out
    assert "Explicit Declaration: " in out
    assert "Implicit Declaration: " in out
    assert "Difference (explicit - implicit): " in out


def test_main_prints_json_result(capsys):
    assert main(["--variant", "tree", "-n", "1", "--json"]) == 0

    last_line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = msgspec.json.decode(last_line)
    assert payload["variant"] == "tree"
    assert payload["explicit_count"] == 1
    assert payload["implicit_count"] == 1
    assert payload["verdict"] in {"explicit_faster", "implicit_faster", "same_time"}


def test_main_reads_iterations_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("TYPING_BENCH_ITERATIONS", "3")

    assert main(["--randomize-order"]) == 0
    assert "Running with 3 iterations..." in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--iterations", "0"],
        ["--variant", "tree", "--backend", "pydantic"],
        ["--log-level", "chatty"],
    ],
)
def test_main_rejects_invalid_configuration(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    assert "Invalid benchmark configuration" in capsys.readouterr().err


def test_main_rejects_unknown_variant():
    with pytest.raises(SystemExit) as exc_info:
        main(["--variant", "huge"])

    assert exc_info.value.code == 2


def test_invalid_configuration_is_reported_once(capsys):
    with pytest.raises(SystemExit):
        main(["--iterations", "0"])

    err = capsys.readouterr().err
    assert err.count("Invalid benchmark configuration") == 1
