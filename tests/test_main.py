"""End-to-end tests for the rangesum CLI."""

from __future__ import annotations

import json

import pytest


def test_prompted_run(run_cli) -> None:
    code, out, err = run_cli("1\n4\n")

    assert code == 0
    assert out == "n = m = 1\n-2\n3\n-4\nsum = -4\ngcd (n, m) = 1\n"
    assert err == ""


def test_single_iteration(run_cli) -> None:
    code, out, _ = run_cli("5 5\n")

    assert code == 0
    assert out.splitlines()[-3:] == ["n = m = 5", "sum = 10", "gcd (n, m) = 5"]


def test_empty_range(run_cli) -> None:
    code, out, _ = run_cli("4\n2\n")

    assert code == 0
    assert out == "n = m = sum = 0\ngcd (n, m) = 2\n"


def test_bounds_from_arguments_skip_prompts(run_cli) -> None:
    code, out, _ = run_cli(argv=["1", "4"])

    assert code == 0
    assert out == "1\n-2\n3\n-4\nsum = -4\ngcd (n, m) = 1\n"


def test_no_prompt_flag(run_cli) -> None:
    code, out, _ = run_cli("5 5", argv=["--no-prompt"])

    assert code == 0
    assert out == "5\nsum = 10\ngcd (n, m) = 5\n"


def test_show_prompts_env(run_cli, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOW_PROMPTS", "false")
    _, out, _ = run_cli("5 5")
    assert out.startswith("5\n")


def test_identical_input_gives_identical_output(run_cli, streams) -> None:
    _, first, _ = run_cli("3 9")
    out, _ = streams
    out.seek(0)
    out.truncate()
    _, second, _ = run_cli("3 9")
    assert first == second


def test_invalid_input_exits_nonzero(run_cli) -> None:
    code, out, err = run_cli("1\nfour\n")

    assert code == 1
    assert "sum =" not in out
    assert "Error:" in err
    assert "'four'" in err


def test_truncated_input(run_cli) -> None:
    code, _, err = run_cli("7\n")
    assert code == 1
    assert "missing value for m" in err


def test_gcd_step_limit(run_cli) -> None:
    code, out, err = run_cli(argv=["0", "2", "--gcd-max-steps", "100"])

    assert code == 3
    assert out == "0\n1\n-2\nsum = -2\n"
    assert "did not converge" in err


def test_sum_is_printed_before_gcd_diverges(run_cli) -> None:
    code, out, _ = run_cli(argv=["0", "3", "--gcd-max-steps", "50"])

    assert code == 3
    assert out.splitlines()[-1] == "sum = 4"
    assert "gcd (n, m)" not in out


def test_only_one_bound_is_a_usage_error(run_cli) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_cli(argv=["3"])
    assert excinfo.value.code == 2


def test_output_file(run_cli, tmp_path) -> None:
    target = tmp_path / "out" / "result.json"
    code, _, _ = run_cli("1 4", argv=["--output", str(target)])

    assert code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data == {"n": 1, "m": 4, "sum": -4, "gcd": 1, "iterations": 4}


def test_output_file_from_env(run_cli, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    target = tmp_path / "env_result.json"
    monkeypatch.setenv("RANGESUM_OUTPUT", str(target))

    code, _, _ = run_cli(argv=["5", "5"])

    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["gcd"] == 5
