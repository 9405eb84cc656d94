"""
Symbol tables for the propositional truth-table engine.

Supports variables P, Q, R, S and connectives ¬, ∧, ∨, →, ↔.
All tables are read-only and shared process-wide.
"""

from types import MappingProxyType
from typing import Mapping

VARIABLES = "PQRS"

OP_NOT = "¬"
OP_AND = "∧"
OP_OR = "∨"
OP_IMP = "→"
OP_IFF = "↔"

LPAREN = "("
RPAREN = ")"

# Higher binds tighter.
OPERATOR_PRECEDENCE: Mapping[str, int] = MappingProxyType({
    OP_NOT: 4,
    OP_AND: 3,
    OP_OR: 2,
    OP_IMP: 1,
    OP_IFF: 0,
})

OPERATORS = "".join(OPERATOR_PRECEDENCE)

UNARY_OPERATORS = frozenset({OP_NOT})

# Plain tables and LaTeX tables use different letters for true/false.
PLAIN_TRUE, PLAIN_FALSE = "V", "F"
LATEX_TRUE, LATEX_FALSE = "T", "F"

LATEX_MACROS: Mapping[str, str] = MappingProxyType({
    OP_NOT: "\\neg ",
    OP_AND: "\\land ",
    OP_OR: "\\lor ",
    OP_IMP: "\\to ",
    OP_IFF: "\\leftrightarrow ",
})

# Keyboard-friendly spellings accepted by the command line. Longest first so
# "<->" is not read as "<" followed by "->".
ASCII_ALIASES = (
    ("<->", OP_IFF),
    ("->", OP_IMP),
    ("/\\", OP_AND),
    ("\\/", OP_OR),
    ("~", OP_NOT),
    ("!", OP_NOT),
    ("&", OP_AND),
    ("|", OP_OR),
)


def is_variable(ch: str) -> bool:
    return len(ch) == 1 and ch in VARIABLES


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in OPERATORS


def plain_symbol(value: bool) -> str:
    return PLAIN_TRUE if value else PLAIN_FALSE


def latex_symbol(value: bool) -> str:
    return LATEX_TRUE if value else LATEX_FALSE


def normalize_symbols(text: str) -> str:
    """Map ASCII connective spellings to their Unicode symbols and drop all
    whitespace, so typed input like ``P -> Q`` reaches validation as ``P→Q``."""
    if text is None:
        return ""
    for alias, symbol in ASCII_ALIASES:
        if alias in text:
            text = text.replace(alias, symbol)
    return "".join(text.split())
