"""
Single entry point of the truth-table engine.

process() is a pure function of its input string: it validates the
formula, converts it to postfix, enumerates sub-expressions, evaluates
every assignment and renders the plain, detailed and LaTeX views.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .latex import latex_formula, render_latex_table
from .postfix import format_postfix, to_postfix
from .steps import enumerate_subexpressions, format_steps
from .tokenizer import Token, extract_variables, parse_tokens
from .truthtable import (
    TruthTableRow,
    classify,
    iter_rows,
    render_detailed_table,
    render_simple_table,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Everything the presentation layer shows for one formula."""

    formula: str
    variables: Tuple[str, ...]
    postfix: Tuple[Token, ...]
    step_trace: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]
    simple_table: str
    detailed_table: str
    latex_formula: str
    latex_detailed_table: str
    classification: str

    @property
    def step_analysis(self) -> str:
        return format_steps(self.step_trace)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dictionary."""
        return {
            "formula": self.formula,
            "variables": list(self.variables),
            "postfix": format_postfix(self.postfix),
            "step_trace": list(self.step_trace),
            "rows": [
                {
                    "assignment": row.as_dict(),
                    "steps": list(row.step_values),
                    "result": row.result,
                }
                for row in self.rows
            ],
            "simple_table": self.simple_table,
            "detailed_table": self.detailed_table,
            "latex_formula": self.latex_formula,
            "latex_detailed_table": self.latex_detailed_table,
            "classification": self.classification,
        }


def process(formula: str) -> ProcessResult:
    """
    Evaluate ``formula`` under every assignment and render all views.

    Args:
        formula: Formula over P, Q, R, S using ¬ ∧ ∨ → ↔ and parentheses.
            Leading and trailing whitespace is ignored.

    Returns:
        ProcessResult

    Raises:
        ValidationError: empty input, invalid character, unbalanced
            parentheses, or a token stream that cannot be reduced
    """
    expression = (formula or "").strip()
    tokens = parse_tokens(expression)
    postfix = to_postfix(tokens)
    variables = tuple(extract_variables(tokens))
    trace = enumerate_subexpressions(postfix)
    logger.debug(
        "processing %r: %d variable(s), %d step(s)", expression, len(variables), len(trace)
    )

    simple_rows = tuple(iter_rows(postfix, variables))
    detailed_rows = tuple(iter_rows(postfix, variables, trace))

    return ProcessResult(
        formula=expression,
        variables=variables,
        postfix=postfix,
        step_trace=trace,
        rows=detailed_rows,
        simple_table=render_simple_table(simple_rows, variables),
        detailed_table=render_detailed_table(detailed_rows, variables, trace),
        latex_formula=latex_formula(expression),
        latex_detailed_table=render_latex_table(detailed_rows, variables, trace),
        classification=classify(simple_rows),
    )
