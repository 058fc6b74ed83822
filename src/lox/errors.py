"""Diagnostics and the error hierarchy for the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNTERMINATED_STRING = "unterminated_string"
    UNTERMINATED_BLOCK_COMMENT = "unterminated_block_comment"
    INVALID_NUMBER_LITERAL = "invalid_number_literal"


MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNEXPECTED_CHARACTER: "Unexpected character.",
    ErrorKind.UNTERMINATED_STRING: "Unterminated string.",
    ErrorKind.UNTERMINATED_BLOCK_COMMENT: "Unterminated block comment.",
    ErrorKind.INVALID_NUMBER_LITERAL: "Invalid number literal.",
}


@dataclass(slots=True, frozen=True)
class ScanError:
    """A single diagnostic recorded during a scan."""

    kind: ErrorKind
    line: int
    message: str

    @classmethod
    def of(cls, kind: ErrorKind, line: int) -> ScanError:
        return cls(kind=kind, line=line, message=MESSAGES[kind])

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LoxError(Exception):
    """Base error for everything raised by this package."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class LoxScanError(LoxError):
    """One or more diagnostics were recorded while scanning."""

    def __init__(self, errors: list[ScanError], *, cause: Exception | None = None):
        super().__init__("\n".join(str(error) for error in errors), cause=cause)
        self.errors = list(errors)
