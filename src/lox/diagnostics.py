import sys
from typing import TextIO

from lox.errors import ScanError


class Reporter:
    """Writes each diagnostic as one line to a stream and keeps a record of it."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self.history: list[ScanError] = []

    @property
    def had_error(self) -> bool:
        return bool(self.history)

    def report(self, error: ScanError) -> None:
        self.history.append(error)
        stream = self._stream if self._stream is not None else sys.stderr
        print(error, file=stream)

    def reset(self) -> None:
        self.history.clear()


class SilentReporter(Reporter):
    def report(self, error: ScanError) -> None:
        self.history.append(error)
