"""
LaTeX rendering of formulas and detailed truth tables.

The tabular form uses T/F for true/false while the plain tables use V/F.
"""

from typing import Iterable, List, Sequence

from .symbols import LATEX_MACROS, latex_symbol
from .truthtable import RESULT_HEADER, TruthTableRow


def to_latex(expression: str) -> str:
    """Replace each connective with its LaTeX macro; nothing else changes."""
    out = []
    for ch in expression:
        out.append(LATEX_MACROS.get(ch, ch))
    return "".join(out)


def from_latex(markup: str) -> str:
    """Reverse ``to_latex``."""
    for symbol, macro in LATEX_MACROS.items():
        markup = markup.replace(macro, symbol)
    return markup


def latex_formula(expression: str) -> str:
    return f"\\({to_latex(expression)}\\)"


def column_spec(variables: Sequence[str], trace: Sequence[str]) -> str:
    cols = ["c"] * (len(variables) + len(trace))
    return " ".join(cols + ["| c"])


def render_latex_table(
    rows: Iterable[TruthTableRow],
    variables: Sequence[str],
    trace: Sequence[str],
) -> str:
    """
    Build a ``tabular`` block: one column per variable and per trace entry,
    a separator, then the result column taken from the full-formula value.
    """
    lines: List[str] = [f"\\begin{{tabular}}{{{column_spec(variables, trace)}}}"]
    header = list(variables)
    header += [f"\\( {to_latex(sub)}\\)" for sub in trace]
    header.append(RESULT_HEADER)
    lines.append(" & ".join(header) + " \\\\ \\hline")
    for row in rows:
        cells = [latex_symbol(v) for v in row.values]
        cells += [latex_symbol(v) for v in row.step_values]
        cells.append(latex_symbol(row.result))
        lines.append(" & ".join(cells) + " \\\\")
    lines.append("\\end{tabular}")
    return "\n".join(lines)
