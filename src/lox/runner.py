import logging
import sys
from pathlib import Path
from typing import TextIO

from lox.config import ScannerConfig
from lox.diagnostics import Reporter
from lox.scanner import ScanResult, scan

logger = logging.getLogger(__name__)

PROMPT = "> "


def run(
    source: str,
    *,
    config: ScannerConfig | None = None,
    reporter: Reporter | None = None,
    out: TextIO | None = None,
) -> ScanResult:
    result = scan(source, config=config, reporter=reporter)

    output = out if out is not None else sys.stdout
    for token in result.tokens:
        print(token, file=output)

    return result


def run_file(
    path: str | Path,
    *,
    config: ScannerConfig | None = None,
    reporter: Reporter | None = None,
    out: TextIO | None = None,
) -> ScanResult:
    source_path = Path(path)
    logger.debug("loading %s", source_path)
    source = source_path.read_text(encoding="utf-8")
    return run(source, config=config, reporter=reporter, out=out)


def run_prompt(
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    *,
    config: ScannerConfig | None = None,
    reporter: Reporter | None = None,
) -> None:
    """Scan standard input one line at a time until end of stream.

    Errors on a line are reported and the loop moves on to the next line.
    """
    input_stream = stdin if stdin is not None else sys.stdin
    output = out if out is not None else sys.stdout

    while True:
        output.write(PROMPT)
        output.flush()

        line = input_stream.readline()
        if line == "":
            break

        run(line.rstrip("\r\n"), config=config, reporter=reporter, out=output)
