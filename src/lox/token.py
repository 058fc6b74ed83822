from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    # Single-character tokens.
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"

    # One or two character tokens.
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals.
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords.
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FOR = "FOR"
    FUN = "FUN"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF = "EOF"


Literal = str | float

_LITERAL_TYPES: dict[TokenType, type] = {
    TokenType.STRING: str,
    TokenType.NUMBER: float,
}


@dataclass(slots=True, frozen=True)
class Token:
    """A classified slice of source text.

    ``literal`` is only set for STRING (the raw text between the quotes) and
    NUMBER (the parsed float) tokens; every other kind carries ``None``.
    """

    type: TokenType
    lexeme: str
    literal: Literal | None
    line: int

    def __post_init__(self) -> None:
        expected = _LITERAL_TYPES.get(self.type)
        if expected is None:
            if self.literal is not None:
                raise ValueError(f"{self.type.value} token cannot carry a literal")
        elif not isinstance(self.literal, expected):
            raise ValueError(
                f"{self.type.value} token requires a {expected.__name__} literal, "
                f"got {self.literal!r}"
            )

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.value} {self.lexeme} {literal}"


def eof(line: int) -> Token:
    return Token(TokenType.EOF, "", None, line)
