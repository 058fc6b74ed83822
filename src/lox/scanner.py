import logging
from dataclasses import dataclass, field

from lox.config import ScannerConfig
from lox.diagnostics import Reporter
from lox.errors import ErrorKind, LoxScanError, ScanError
from lox.helpers import is_alpha, is_alpha_numeric, is_digit, keyword_type
from lox.token import Literal, Token, TokenType, eof

logger = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become their two-character variant when followed by "=".
EQUAL_SUFFIXED_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \r\t")

NUL = "\0"


@dataclass(slots=True)
class ScanResult:
    tokens: list[Token] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise LoxScanError(self.errors)


class Scanner:
    """Single-pass scanner turning Lox source text into tokens.

    Malformed input never stops the pass: every problem is reported to the
    ``reporter`` with its line number and scanning resumes with the next
    character. The token list always ends with an EOF token.
    """

    def __init__(
        self,
        source: str,
        config: ScannerConfig | None = None,
        reporter: Reporter | None = None,
    ):
        self._source = source
        self._config = config or ScannerConfig()
        self._reporter = reporter or Reporter()
        self._tokens: list[Token] = []
        self._errors: list[ScanError] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._done = False

    def scan(self) -> ScanResult:
        if not self._done:
            logger.debug("scanning %d characters", len(self._source))
            while not self._is_at_end():
                self._start = self._current
                self._scan_token()

            self._tokens.append(eof(self._line))
            self._done = True
            logger.debug(
                "scanned %d tokens with %d errors", len(self._tokens), len(self._errors)
            )
        return ScanResult(tokens=list(self._tokens), errors=list(self._errors))

    def scan_tokens(self) -> list[Token]:
        return self.scan().tokens

    def _scan_token(self) -> None:
        char = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self._add_token(token_type)
            return

        pair = EQUAL_SUFFIXED_TOKENS.get(char)
        if pair is not None:
            single, double = pair
            self._add_token(double if self._match("=") else single)
            return

        if char == "/":
            if self._match("/"):
                self._line_comment()
            elif self._match("*"):
                self._block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            self._error(ErrorKind.UNEXPECTED_CHARACTER)

    def _line_comment(self) -> None:
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _block_comment(self) -> None:
        depth = 1
        while depth > 0:
            if self._is_at_end():
                self._error(ErrorKind.UNTERMINATED_BLOCK_COMMENT)
                return

            char = self._peek()
            if char == "\n":
                self._line += 1
                self._advance()
            elif char == "/" and self._peek_next() == "*":
                self._advance()
                if self._config.nested_block_comments:
                    self._advance()
                    depth += 1
            elif char == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                depth -= 1
            else:
                self._advance()

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(ErrorKind.UNTERMINATED_STRING)
            return

        # The closing quote.
        self._advance()
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        try:
            value = float(self._lexeme())
        except ValueError:
            self._error(ErrorKind.INVALID_NUMBER_LITERAL)
            value = 0.0
        self._add_token(TokenType.NUMBER, value)

    def _identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        self._add_token(keyword_type(self._lexeme()) or TokenType.IDENTIFIER)

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return NUL
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return NUL
        return self._source[self._current + 1]

    def _lexeme(self) -> str:
        return self._source[self._start : self._current]

    def _add_token(self, token_type: TokenType, literal: Literal | None = None) -> None:
        self._tokens.append(Token(token_type, self._lexeme(), literal, self._line))

    def _error(self, kind: ErrorKind) -> None:
        error = ScanError.of(kind, self._line)
        self._errors.append(error)
        self._reporter.report(error)


def scan(
    source: str,
    config: ScannerConfig | None = None,
    reporter: Reporter | None = None,
) -> ScanResult:
    return Scanner(source, config=config, reporter=reporter).scan()
