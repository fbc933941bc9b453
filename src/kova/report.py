# src/kova/report.py
from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from kova.core.results import Failure, ValidationResult
from kova.errors import KovaError

logger = logging.getLogger(__name__)


def build_report(result: ValidationResult[Any]) -> dict[str, Any]:
    """
    @brief
    Build a JSON-friendly report of a validation result.

    @details
    Fields:
        - timestamp : UTC ISO-8601, seconds precision
        - valid     : True for Success
        - messages  : Message.to_dict() per message, in result order

    @params
        result : ValidationResult
            Outcome of `try_validate`.

    @returns
        dict ready for `json.dumps`.
    """
    messages = [m.to_dict() for m in result.messages] if isinstance(result, Failure) else []
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "valid": not messages,
        "messages": messages,
    }


def save_report(
    report: dict[str, Any], out_dir: Path, filename: str = "validation_report.json"
) -> Path:
    """
    @brief
    Atomically write a report as UTF-8 JSON.

    @details
    Writes into a temporary file in the target directory and moves it into
    place, so readers never observe a partially written report.

    @returns
        Path of the written file.

    @raises
        KovaError
            Raised on any I/O failure.
    """
    # (1) Ensure target directory exists
    out_dir = Path(out_dir)
    target = out_dir / filename
    try:
        out_dir.mkdir(parents=True, exist_ok=True)

        # (2) Write to temp file in the same directory, then replace
        fd, tmp_name = tempfile.mkstemp(prefix=f".{filename}.", dir=out_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(report, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise KovaError(
            message=f"Failed to write validation report: {e}",
            source="report.save_report",
            suggested_action="Check that the output directory is writable.",
        ) from e

    logger.info("Validation report written to %s", target)
    return target


__all__ = ["build_report", "save_report"]
