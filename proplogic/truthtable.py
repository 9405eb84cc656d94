# -*- coding: utf-8 -*-
"""
Exhaustive truth-table generation for propositional formulas.

Row i assigns to the variable at sorted position j the value of bit
(n - j - 1) of i, so the first variable is the most significant bit and
row 0 is the all-false assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .postfix import evaluate_postfix, postfix_of
from .symbols import plain_symbol
from .tokenizer import Token

RESULT_HEADER = "R"

TAUTOLOGY = "tautology"
CONTRADICTION = "contradiction"
CONTINGENCY = "contingency"


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment with the formula value and, optionally, step values."""

    index: int
    assignment: Tuple[Tuple[str, bool], ...]
    step_values: Tuple[bool, ...]
    result: bool

    @property
    def values(self) -> Tuple[bool, ...]:
        return tuple(value for _, value in self.assignment)

    def as_dict(self) -> Dict[str, bool]:
        return dict(self.assignment)


def row_count(variables: Sequence[str]) -> int:
    return 1 << len(variables)


def iter_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of ``variables`` in canonical row order."""
    n = len(variables)
    for i in range(row_count(variables)):
        yield {var: bool((i >> (n - j - 1)) & 1) for j, var in enumerate(variables)}


def iter_rows(
    postfix: Sequence[Token],
    variables: Sequence[str],
    trace: Sequence[str] = (),
) -> Iterator[TruthTableRow]:
    """
    Lazily evaluate the formula (and each trace entry) at every assignment.

    Each trace entry is converted to postfix independently; conversions are
    cached by ``postfix_of`` and reused across rows.
    """
    step_postfix = [postfix_of(sub) for sub in trace]
    for index, assignment in enumerate(iter_assignments(variables)):
        step_values = tuple(evaluate_postfix(p, assignment) for p in step_postfix)
        yield TruthTableRow(
            index=index,
            assignment=tuple((var, assignment[var]) for var in variables),
            step_values=step_values,
            result=evaluate_postfix(postfix, assignment),
        )


def render_simple_table(rows: Iterable[TruthTableRow], variables: Sequence[str]) -> str:
    lines: List[str] = ["".join(f"{v}\t" for v in variables) + f"| {RESULT_HEADER}"]
    for row in rows:
        cells = "".join(f"{plain_symbol(v)}\t" for v in row.values)
        lines.append(f"{cells}| {plain_symbol(row.result)}")
    return "\n".join(lines) + "\n"


def render_detailed_table(
    rows: Iterable[TruthTableRow],
    variables: Sequence[str],
    trace: Sequence[str],
) -> str:
    """
    Render variables, every trace entry and the result column.

    The result column is the value of the last trace entry, which is the
    whole formula; a bare variable has no trace and falls back to the
    evaluated result.
    """
    header = "".join(f"{v}\t" for v in variables) + "".join(f"{s}\t" for s in trace)
    lines: List[str] = [f"{header}| {RESULT_HEADER}"]
    for row in rows:
        cells = "".join(f"{plain_symbol(v)}\t" for v in row.values)
        cells += "".join(f"{plain_symbol(v)}\t" for v in row.step_values)
        final = row.step_values[-1] if row.step_values else row.result
        lines.append(f"{cells}| {plain_symbol(final)}")
    return "\n".join(lines) + "\n"


def classify(rows: Iterable[TruthTableRow]) -> str:
    """Return 'tautology', 'contradiction' or 'contingency'."""
    results = {row.result for row in rows}
    if results == {True}:
        return TAUTOLOGY
    if results == {False}:
        return CONTRADICTION
    return CONTINGENCY
