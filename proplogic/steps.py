"""Sub-expression trace: every operator application, in reduction order."""

from typing import List, Sequence, Tuple

from .errors import PostfixArityError
from .symbols import LPAREN, RPAREN
from .tokenizer import Token, TokenKind


def enumerate_subexpressions(postfix: Sequence[Token]) -> Tuple[str, ...]:
    """
    Replay ``postfix`` over a stack of strings.

    Each operator pops its operand strings, wraps them with the operator in
    one pair of parentheses, records the result and pushes it back. The last
    entry is the whole formula fully parenthesized.
    """
    stack: List[str] = []
    trace: List[str] = []
    for tok in postfix:
        if tok.kind is TokenKind.VARIABLE:
            stack.append(tok.symbol)
            continue
        if tok.is_unary:
            if not stack:
                raise PostfixArityError(f"{tok.symbol!r} has no operand")
            sub = f"{LPAREN}{tok.symbol}{stack.pop()}{RPAREN}"
        else:
            if len(stack) < 2:
                raise PostfixArityError(f"{tok.symbol!r} needs two operands")
            b = stack.pop()
            a = stack.pop()
            sub = f"{LPAREN}{a}{tok.symbol}{b}{RPAREN}"
        trace.append(sub)
        stack.append(sub)
    return tuple(trace)


def format_steps(trace: Sequence[str]) -> str:
    return "\n".join(trace)
