"""
Export of processed formulas.

Export is an explicit step taken by the caller after ``process`` succeeds;
the evaluation path never writes files or prints.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .pipeline import ProcessResult

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class ExportError(OSError):
    """Writing an export artifact failed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"failed to export to {path}: {reason}")
        self.path = path


def canonicalize_json(data: Any) -> str:
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def result_digest(result: ProcessResult) -> str:
    """SHA-256 of the canonical JSON form of ``result``."""
    return hashlib.sha256(canonicalize_json(result.to_dict()).encode("utf-8")).hexdigest()


def export_filename(now: Optional[datetime] = None, prefix: str = "export_", counter: int = 0) -> str:
    now = now or datetime.now()
    suffix = f"_{counter}" if counter else ""
    return f"{prefix}{now.strftime(TIMESTAMP_FORMAT)}{suffix}.txt"


def format_export(result: ProcessResult) -> str:
    return (
        f"LaTeX proposition:\n{result.latex_formula}\n\n"
        f"Step analysis:\n{result.step_analysis}\n\n"
        f"Detailed LaTeX table:\n{result.latex_detailed_table}\n"
    )


def format_console_report(result: ProcessResult) -> str:
    return "\n".join([
        f"Formula: {result.formula}",
        f"--- Step analysis ---\n{result.step_analysis}",
        f"--- Detailed table ---\n{result.detailed_table}",
        f"--- LaTeX proposition ---\n{result.latex_formula}",
        f"--- LaTeX detailed table ---\n{result.latex_detailed_table}",
    ])


def _write(path: Path, text: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ExportError(path, str(exc)) from exc
    logger.info("exported %s", path)
    return path


def export_result(
    result: ProcessResult,
    directory: Path | str,
    *,
    now: Optional[datetime] = None,
    prefix: str = "export_",
) -> Path:
    """
    Write the LaTeX proposition, step analysis and LaTeX table to a
    timestamped text file in ``directory``.

    Files are created exclusively. When the timestamped name is taken a
    counter is appended (``export_20261019_123005_1.txt``), so earlier
    exports are never overwritten.

    Returns:
        Path of the written file

    Raises:
        ExportError: the directory or file could not be written
    """
    directory = Path(directory)
    now = now or datetime.now()
    text = format_export(result)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(directory, str(exc)) from exc

    counter = 0
    while True:
        path = directory / export_filename(now, prefix, counter)
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError:
            counter += 1
            continue
        except OSError as exc:
            raise ExportError(path, str(exc)) from exc
        logger.info("exported %s", path)
        return path


def export_json(result: ProcessResult, path: Path | str) -> Path:
    """Write ``result.to_dict()`` plus its digest as indented JSON."""
    payload: Dict[str, Any] = result.to_dict()
    payload["sha256"] = result_digest(result)
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return _write(Path(path), text + "\n")
