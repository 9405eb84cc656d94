"""
Postfix conversion and evaluation.

Two independent explicit stack machines: ``to_postfix`` (shunting-yard)
turns an infix token stream into postfix order, ``evaluate_postfix``
reduces a postfix sequence to a single boolean under an assignment.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

from .errors import PostfixArityError
from .symbols import OP_AND, OP_IFF, OP_IMP, OP_NOT, OP_OR, OPERATOR_PRECEDENCE
from .tokenizer import Token, TokenKind, parse_tokens

BINARY_OPS: Dict[str, Callable[[bool, bool], bool]] = {
    OP_AND: lambda a, b: a and b,
    OP_OR: lambda a, b: a or b,
    OP_IMP: lambda a, b: (not a) or b,
    OP_IFF: lambda a, b: a == b,
}


def to_postfix(tokens: Sequence[Token]) -> Tuple[Token, ...]:
    """
    Convert validated infix tokens to postfix order.

    Binary operators pop stacked operators of equal or higher precedence
    (left associativity). Negation is a prefix operator and is pushed
    without popping, so ``¬¬P`` becomes ``P¬¬``.

    Args:
        tokens: token stream accepted by ``tokenizer.parse_tokens``

    Returns:
        Postfix token tuple
    """
    ops: List[Token] = []
    out: List[Token] = []
    for tok in tokens:
        if tok.kind is TokenKind.VARIABLE:
            out.append(tok)
        elif tok.kind is TokenKind.OPERATOR:
            if not tok.is_unary:
                prec = OPERATOR_PRECEDENCE[tok.symbol]
                while (
                    ops
                    and ops[-1].kind is TokenKind.OPERATOR
                    and OPERATOR_PRECEDENCE[ops[-1].symbol] >= prec
                ):
                    out.append(ops.pop())
            ops.append(tok)
        elif tok.kind is TokenKind.LPAREN:
            ops.append(tok)
        elif tok.kind is TokenKind.RPAREN:
            while ops and ops[-1].kind is not TokenKind.LPAREN:
                out.append(ops.pop())
            ops.pop()
    while ops:
        out.append(ops.pop())
    return tuple(out)


def evaluate_postfix(postfix: Sequence[Token], assignment: Mapping[str, bool]) -> bool:
    """Reduce ``postfix`` to one boolean using the values in ``assignment``."""
    stack: List[bool] = []
    for tok in postfix:
        if tok.kind is TokenKind.VARIABLE:
            stack.append(assignment[tok.symbol])
        elif tok.symbol == OP_NOT:
            if not stack:
                raise PostfixArityError(f"{tok.symbol!r} has no operand")
            stack.append(not stack.pop())
        else:
            if len(stack) < 2:
                raise PostfixArityError(f"{tok.symbol!r} needs two operands")
            b = stack.pop()
            a = stack.pop()
            stack.append(BINARY_OPS[tok.symbol](a, b))
    if len(stack) != 1:
        raise PostfixArityError(f"postfix left {len(stack)} values on the stack")
    return stack[0]


@lru_cache(maxsize=4096)
def postfix_of(expression: str) -> Tuple[Token, ...]:
    """Parse ``expression`` and return its postfix form (cached)."""
    return to_postfix(parse_tokens(expression))


def format_postfix(postfix: Sequence[Token]) -> str:
    return "".join(tok.symbol for tok in postfix)
