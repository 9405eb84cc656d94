"""
Tokenizer and validator for propositional formulas.

Validation runs before tokenization and rejects empty input, characters
outside the alphabet and unbalanced parentheses. Tokenization then splits
the text into variable, operator and parenthesis tokens, and the structure
check guarantees the resulting stream can be reduced by the stack machines
in ``proplogic.postfix``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple, Union

from .errors import (
    EmptyExpression,
    InvalidCharacter,
    MalformedExpression,
    MalformedToken,
    UnbalancedParentheses,
)
from .symbols import LPAREN, RPAREN, UNARY_OPERATORS, is_operator, is_variable


class TokenKind(Enum):
    VARIABLE = "variable"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """Atomic lexical unit."""

    kind: TokenKind
    symbol: str

    @property
    def is_unary(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.symbol in UNARY_OPERATORS

    def __str__(self) -> str:
        return self.symbol


def validate_expression(text: str) -> None:
    """
    Reject malformed input before any parsing is attempted.

    Callers strip surrounding whitespace first; whitespace inside the
    formula is an invalid character.

    Raises:
        EmptyExpression: text is empty or blank
        InvalidCharacter: first character outside the alphabet, spaces included
        UnbalancedParentheses: a ')' without its '(' or unclosed '('
    """
    if text is None or not text.strip():
        raise EmptyExpression()

    balance = 0
    for pos, ch in enumerate(text):
        if not (is_variable(ch) or is_operator(ch) or ch in (LPAREN, RPAREN)):
            raise InvalidCharacter(ch, pos)
        if ch == LPAREN:
            balance += 1
        elif ch == RPAREN:
            balance -= 1
        if balance < 0:
            raise UnbalancedParentheses()
    if balance != 0:
        raise UnbalancedParentheses()


def _flush(buf: List[str], out: List[Token]) -> None:
    if not buf:
        return
    word = "".join(buf)
    buf.clear()
    if len(word) > 1:
        raise MalformedToken(word)
    if not is_variable(word):
        raise InvalidCharacter(word)
    out.append(Token(TokenKind.VARIABLE, word))


def tokenize(text: str) -> Tuple[Token, ...]:
    """Split ``text`` into tokens. Whitespace flushes the buffer and is dropped."""
    tokens: List[Token] = []
    buf: List[str] = []
    for ch in text:
        if is_operator(ch):
            _flush(buf, tokens)
            tokens.append(Token(TokenKind.OPERATOR, ch))
        elif ch == LPAREN:
            _flush(buf, tokens)
            tokens.append(Token(TokenKind.LPAREN, ch))
        elif ch == RPAREN:
            _flush(buf, tokens)
            tokens.append(Token(TokenKind.RPAREN, ch))
        elif ch.isspace():
            _flush(buf, tokens)
        else:
            buf.append(ch)
    _flush(buf, tokens)
    return tuple(tokens)


def check_structure(tokens: Iterable[Token]) -> None:
    """
    Check operand/operator alternation.

    Tracks whether the next token must start an operand (variable, '¬' or
    '(') or must follow one (binary operator or ')').
    """
    expect_operand = True
    previous = None
    for tok in tokens:
        if expect_operand:
            if tok.kind is TokenKind.VARIABLE:
                expect_operand = False
            elif tok.kind is TokenKind.LPAREN or tok.is_unary:
                pass
            elif previous is None:
                raise MalformedExpression(f"missing operand before {tok.symbol!r}")
            else:
                raise MalformedExpression(
                    f"missing operand between {previous.symbol!r} and {tok.symbol!r}"
                )
        else:
            if tok.kind is TokenKind.RPAREN:
                pass
            elif tok.kind is TokenKind.OPERATOR and not tok.is_unary:
                expect_operand = True
            else:
                raise MalformedExpression(f"missing operator before {tok.symbol!r}")
        previous = tok
    if previous is None:
        raise EmptyExpression()
    if expect_operand:
        raise MalformedExpression(f"missing operand after {previous.symbol!r}")


def parse_tokens(text: str) -> Tuple[Token, ...]:
    """Validate, tokenize and structure-check ``text``."""
    validate_expression(text)
    tokens = tokenize(text)
    check_structure(tokens)
    return tokens


def extract_variables(source: Union[str, Iterable[Token]]) -> List[str]:
    """Return the distinct variables of a formula in alphabetical order."""
    if isinstance(source, str):
        found = {ch for ch in source if is_variable(ch)}
    else:
        found = {tok.symbol for tok in source if tok.kind is TokenKind.VARIABLE}
    return sorted(found)
