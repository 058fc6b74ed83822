"""Tests for diagnostics records, the error hierarchy and the reporters."""

import io

from lox.diagnostics import Reporter, SilentReporter
from lox.errors import ErrorKind, LoxError, LoxScanError, ScanError


class TestScanError:
    def test_of_uses_standard_message(self):
        error = ScanError.of(ErrorKind.UNTERMINATED_STRING, 4)

        assert error.kind is ErrorKind.UNTERMINATED_STRING
        assert error.line == 4
        assert error.message == "Unterminated string."

    def test_str_is_diagnostic_line(self):
        error = ScanError.of(ErrorKind.UNTERMINATED_BLOCK_COMMENT, 12)

        assert str(error) == "[line 12] Error: Unterminated block comment."

    def test_every_kind_has_a_message(self):
        messages = {ScanError.of(kind, 1).message for kind in ErrorKind}

        assert messages == {
            "Unexpected character.",
            "Unterminated string.",
            "Unterminated block comment.",
            "Invalid number literal.",
        }


class TestLoxError:
    def test_with_cause(self):
        cause = ValueError("bad")
        err = LoxError("wrapper", cause=cause)

        assert str(err) == "wrapper"
        assert err.cause is cause

    def test_scan_error_carries_diagnostics(self):
        errors = [
            ScanError.of(ErrorKind.UNEXPECTED_CHARACTER, 1),
            ScanError.of(ErrorKind.INVALID_NUMBER_LITERAL, 2),
        ]
        err = LoxScanError(errors)

        assert isinstance(err, LoxError)
        assert err.errors == errors
        assert str(err) == (
            "[line 1] Error: Unexpected character.\n[line 2] Error: Invalid number literal."
        )


class TestReporter:
    def test_writes_one_line_per_error(self):
        stream = io.StringIO()
        reporter = Reporter(stream)

        reporter.report(ScanError.of(ErrorKind.UNEXPECTED_CHARACTER, 1))
        reporter.report(ScanError.of(ErrorKind.UNTERMINATED_STRING, 3))

        assert stream.getvalue() == (
            "[line 1] Error: Unexpected character.\n[line 3] Error: Unterminated string.\n"
        )
        assert reporter.had_error
        assert len(reporter.history) == 2

    def test_defaults_to_stderr(self, capsys):
        Reporter().report(ScanError.of(ErrorKind.UNEXPECTED_CHARACTER, 2))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "[line 2] Error: Unexpected character.\n"

    def test_reset(self):
        reporter = SilentReporter()
        reporter.report(ScanError.of(ErrorKind.UNEXPECTED_CHARACTER, 1))

        reporter.reset()

        assert not reporter.had_error

    def test_silent_reporter_records_without_writing(self, capsys):
        reporter = SilentReporter()

        reporter.report(ScanError.of(ErrorKind.UNEXPECTED_CHARACTER, 1))

        assert capsys.readouterr().err == ""
        assert reporter.had_error
