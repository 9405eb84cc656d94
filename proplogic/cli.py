#!/usr/bin/env python3
"""
Command-line front end for the truth-table engine.

Usage:
    proplogic "P -> Q"
    proplogic "¬(P <-> Q)" --view steps
    proplogic "P & Q | R" --json
    proplogic "P -> Q" --export exports/

ASCII spellings (~ ! & | /\\ \\/ -> <->) are mapped to the Unicode
connectives before the formula is processed.

Exit codes: 0 success, 1 configuration or export failure, 2 invalid formula.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import VIEWS, ConfigError, ProplogicConfig, load_config_from_env, resolve_log_level
from .errors import ValidationError
from .export import ExportError, export_result, format_console_report
from .pipeline import ProcessResult, process
from .symbols import normalize_symbols

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def render_view(result: ProcessResult, view: str) -> str:
    if view == "simple":
        return result.simple_table
    if view == "detailed":
        return result.detailed_table
    if view == "steps":
        return result.step_analysis + "\n"
    if view == "latex":
        return f"{result.latex_formula}\n\n{result.latex_detailed_table}\n"
    sections = [
        f"Formula: {result.formula} ({result.classification})",
        f"--- Simple table ---\n{result.simple_table}",
        f"--- Detailed table ---\n{result.detailed_table}",
        f"--- Step analysis ---\n{result.step_analysis}\n",
        f"--- LaTeX ---\n{result.latex_formula}\n\n{result.latex_detailed_table}\n",
    ]
    return "\n".join(sections)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proplogic",
        description="Truth tables, step traces and LaTeX for propositional formulas over P, Q, R, S.",
    )
    parser.add_argument("formula", nargs="+", help="Formula; several words are joined with spaces.")
    parser.add_argument("--view", choices=VIEWS, default=None, help="Which rendering to print.")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON.")
    parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        metavar="DIR",
        help="Write a timestamped export file (default directory from config).",
    )
    parser.add_argument("--echo", action="store_true", help="Print the console export report.")
    parser.add_argument("--config", type=str, default=None, help="YAML config path.")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level.")
    return parser


def run(args: argparse.Namespace, config: ProplogicConfig) -> int:
    formula = normalize_symbols(" ".join(args.formula))
    logger.debug("formula after alias mapping: %r", formula)
    try:
        result = process(formula)
    except ValidationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_view(result, args.view or config.default_view), end="")

    if args.echo or config.echo_console:
        print(format_console_report(result))

    if args.export is not None or config.auto_export:
        directory = Path(args.export) if args.export else config.export_dir
        try:
            path = export_result(result, directory, prefix=config.export_prefix)
        except ExportError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_FAILURE
        print(f"Processed and exported: {path}", file=sys.stderr)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        config = load_config_from_env(args.config)
        level = resolve_log_level(args.log_level or config.log_level)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
