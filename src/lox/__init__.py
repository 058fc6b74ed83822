from lox.config import ScannerConfig
from lox.diagnostics import Reporter, SilentReporter
from lox.errors import ErrorKind, LoxError, LoxScanError, ScanError
from lox.runner import run, run_file, run_prompt
from lox.scanner import ScanResult, Scanner, scan
from lox.token import Token, TokenType

__all__ = [
    "ErrorKind",
    "LoxError",
    "LoxScanError",
    "Reporter",
    "ScanError",
    "ScanResult",
    "Scanner",
    "ScannerConfig",
    "SilentReporter",
    "Token",
    "TokenType",
    "run",
    "run_file",
    "run_prompt",
    "scan",
]
