"""Tests for the calcexpr command-line tool."""

import io
import logging
import sys

import pytest

from calcexpr.calcexpr_cli import main


class TestCalcExprCLI:
    """Test the command-line entry point."""

    def test_evaluate_expression(self, capsys):
        """Test evaluating a single expression."""
        assert main(["(2 + 3) * 4"]) == 0
        assert capsys.readouterr().out == "20.0\n"

    @pytest.mark.parametrize("number_type,expression,expected", [
        ("int", "7 / 2", "3\n"),
        ("float", "7 / 2", "3.5\n"),
        ("decimal", "0.1 + 0.2", "0.3\n"),
        ("fraction", "1 / 3", "1/3\n"),
    ])
    def test_number_types(self, capsys, number_type, expression, expected):
        """Test selecting the numeric type."""
        assert main(["--type", number_type, expression]) == 0
        assert capsys.readouterr().out == expected

    def test_postfix(self, capsys):
        """Test printing the postfix form."""
        assert main(["--postfix", "--", "-3 + 5"]) == 0
        assert capsys.readouterr().out == "3 neg 5 +\n"

    def test_invalid_expression(self, capsys):
        """Test that invalid expressions report to stderr and exit with status 1."""
        assert main(["1 / 0"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Division by zero" in captured.err

    def test_stdin(self, capsys, monkeypatch):
        """Test reading one expression per line from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1+2\n\n3*4\n"))
        assert main(["--type", "int", "-"]) == 0
        assert capsys.readouterr().out == "3\n12\n"

    def test_stdin_continues_after_error(self, capsys, monkeypatch):
        """Test that one bad line doesn't stop the rest, but sets the exit status."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1+\n2*3\n"))
        assert main(["--type", "int", "-"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "6\n"
        assert "missing an operand" in captured.err

    def test_unknown_type_rejected(self, capsys):
        """Test that argparse rejects unknown numeric types."""
        with pytest.raises(SystemExit):
            main(["--type", "complex", "1"])

    def test_verbose_logs_debug(self, caplog):
        """Test that verbose mode emits debug logging from the pipeline."""
        with caplog.at_level(logging.DEBUG):
            assert main(["-v", "1+2"]) == 0

        assert any(record.name == "CalcExprEvaluator" for record in caplog.records)

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
        reason="interpreter has no integer string conversion limit"
    )
    def test_result_too_large_to_print(self, capsys):
        """Test that a valid result too long to convert to text is reported, not raised."""
        expression = "*".join(["9999999999"] * 500)
        assert main(["--type", "int", expression]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Result too large to format" in captured.err
