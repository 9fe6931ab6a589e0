"""CLI tests for the wrapcalc entry point: one-shot mode and the prompt loop."""

import io
import sys

import pytest

from wrapcalc.cli import main
from wrapcalc.display import HEX, OCT, format_value
from wrapcalc.kinds import I8, I32, U8, Value


def run(capsys, *args: str) -> tuple[int, str, str]:
    code = main(list(args))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_one_shot_default_kind(capsys) -> None:
    code, out, err = run(capsys, "(10 + 2) * 5")
    assert code == 0
    assert out == format_value(Value(I32, 60), HEX) + "\n"
    assert err == ""


def test_words_are_joined(capsys) -> None:
    code, out, _ = run(capsys, "-t", "u8", "255", "+", "1")
    assert code == 0
    assert out == format_value(Value(U8, 0), HEX) + "\n"


def test_negative_expression_is_not_a_flag(capsys) -> None:
    code, out, _ = run(capsys, "--type", "i8", "-128")
    assert code == 0
    assert out == format_value(Value(I8, -128), HEX) + "\n"


def test_double_negation_is_not_a_flag(capsys) -> None:
    code, out, err = run(capsys, "-t", "i8", "--1")
    assert code == 0
    assert out == format_value(Value(I8, 1), HEX) + "\n"
    assert err == ""


def test_octal(capsys) -> None:
    code, out, _ = run(capsys, "--oct", "-t", "u8", "200")
    assert code == 0
    assert out.splitlines() == [
        "       200 ₁₀",
        " 3   1   0 ₈",
        "11 001 000 ₂",
    ]


def test_hex_after_oct_wins(capsys) -> None:
    code, out, _ = run(capsys, "--oct", "--hex", "-t", "u8", "5")
    assert code == 0
    assert out == format_value(Value(U8, 5), HEX) + "\n"
    assert format_value(Value(U8, 5), OCT) not in out


def test_echo(capsys) -> None:
    code, out, _ = run(capsys, "--echo", "1+2*3")
    assert code == 0
    assert out.splitlines()[0] == "1 + 2 * 3"
    assert out.splitlines()[1].strip() == "7 ₁₀"


def test_double_dash_ends_flags(capsys) -> None:
    code, _, err = run(capsys, "--", "-t")
    assert code == 1
    assert "parse error" in err


def test_parse_error_exit_code(capsys) -> None:
    code, out, err = run(capsys, "(10 + 1")
    assert code == 1
    assert out == ""
    assert err.startswith("wrapcalc: parse error: expected ')'")


def test_eval_error_exit_code(capsys) -> None:
    code, out, err = run(capsys, "1 / 0")
    assert code == 1
    assert out == ""
    assert "wrapcalc: error: division by zero" in err


def test_literal_range_error(capsys) -> None:
    code, _, err = run(capsys, "-t", "u32", "4294967296")
    assert code == 1
    assert "literal '4294967296' invalid for u32" in err


def test_empty_expression(capsys) -> None:
    code, _, err = run(capsys, "  ")
    assert code == 1
    assert "empty expression" in err


@pytest.mark.parametrize(
    "args",
    [["--bogus"], ["-x", "1"], ["-t"], ["-t", "u7", "1"]],
    ids=["unknown-long", "unknown-short", "missing-type", "bad-type"],
)
def test_usage_errors(capsys, args: list[str]) -> None:
    code, out, err = run(capsys, *args)
    assert code == 2
    assert out == ""
    assert err.startswith("wrapcalc: ")


def test_help(capsys) -> None:
    code, out, _ = run(capsys, "--help")
    assert code == 0
    assert "Options:" in out
    assert "--type KIND" in out


def test_repl_reads_until_eof(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 + 1\n\n   \n1 +\n2 * 3\n"))
    code, out, err = run(capsys, "-t", "u8")
    assert code == 0
    assert out == (
        format_value(Value(U8, 2), HEX) + "\n" + format_value(Value(U8, 6), HEX) + "\n"
    )
    # blank lines are skipped; the bad line reports and the loop goes on
    assert err.count("wrapcalc: parse error") == 1


def test_repl_continues_after_eval_error(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("256\n255\n"))
    code, out, err = run(capsys, "-t", "u8")
    assert code == 0
    assert "literal '256' invalid for u8" in err
    assert out == format_value(Value(U8, 255), HEX) + "\n"


def test_repl_skips_form_feed_lines(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("\f\v\n1\f+ 2\n"))
    code, out, err = run(capsys, "-t", "u8")
    assert code == 0
    assert err == ""
    assert out == format_value(Value(U8, 3), HEX) + "\n"
