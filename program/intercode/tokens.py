from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from .base_generator import ErrorKind, MalformedExpressionError
from .options import DEFAULT_OPTIONS, TranslationOptions

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = LETTERS | DIGITS | {'_'}
NUMBER_CHARS = DIGITS | {'.'}
OPERATOR_CHARS = frozenset('+-*/%^')
PARENTHESES = frozenset('()')


class TokenType(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    PARENTHESIS = "parenthesis"


@dataclass(frozen=True)
class Token:
    """
    A classified slice of the source expression.

    ``position`` is the offset of the first character and is kept only for
    diagnostics, it does not take part in comparisons.
    """

    type: TokenType
    value: str
    position: Optional[int] = field(default=None, compare=False)

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.IDENTIFIER)

    @property
    def is_open_paren(self) -> bool:
        return self.type is TokenType.PARENTHESIS and self.value == '('

    @property
    def is_close_paren(self) -> bool:
        return self.type is TokenType.PARENTHESIS and self.value == ')'


def _scan(expression: str, start: int, allowed) -> int:
    end = start
    while end < len(expression) and expression[end] in allowed:
        end += 1
    return end


def _is_well_formed_number(literal: str) -> bool:
    return literal.count('.') <= 1 and not literal.endswith('.')


def tokenize(expression: str, options: Optional[TranslationOptions] = None) -> Iterator[Token]:
    """
    Lazily split ``expression`` into tokens, left to right.

    Args:
        expression: Source text of an infix arithmetic expression
        options: Leniency switches, permissive when omitted

    Yields:
        Token: Numbers, identifiers, operators and parentheses; whitespace
        produces nothing

    Raises:
        MalformedExpressionError: only when ``options`` disables a leniency
    """
    options = options or DEFAULT_OPTIONS
    i = 0
    while i < len(expression):
        c = expression[i]

        if c.isspace():
            i += 1
        elif c in DIGITS:
            end = _scan(expression, i, NUMBER_CHARS)
            literal = expression[i:end]
            if not options.allow_malformed_numbers and not _is_well_formed_number(literal):
                raise MalformedExpressionError(
                    ErrorKind.MALFORMED_NUMBER,
                    f"malformed numeric literal '{literal}'",
                    i
                )
            yield Token(TokenType.NUMBER, literal, i)
            i = end
        elif c in LETTERS:
            end = _scan(expression, i, IDENTIFIER_CHARS)
            yield Token(TokenType.IDENTIFIER, expression[i:end], i)
            i = end
        elif c in OPERATOR_CHARS:
            yield Token(TokenType.OPERATOR, c, i)
            i += 1
        elif c in PARENTHESES:
            yield Token(TokenType.PARENTHESIS, c, i)
            i += 1
        else:
            if not options.allow_unknown_characters:
                raise MalformedExpressionError(
                    ErrorKind.UNRECOGNIZED_CHARACTER,
                    f"unrecognized character '{c}'",
                    i
                )
            i += 1


class Tokenizer:
    """Eager front end over :func:`tokenize` bound to one set of options."""

    def __init__(self, options: Optional[TranslationOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    def tokenize(self, expression: str) -> List[Token]:
        return list(tokenize(expression, self.options))
