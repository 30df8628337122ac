"""Load scanner output (JSON) into findings."""

import json
import logging
from pathlib import Path
from typing import Any

from .models import Finding

logger = logging.getLogger(__name__)

RESULT_LIST_KEYS = ("issues", "results", "findings")


class FindingsLoadError(ValueError):
    """Raised when a findings file cannot be read or has the wrong shape."""


def parse_findings(payload: Any) -> list[Finding]:
    """Convert decoded scanner JSON into findings.

    Accepts a list of records or an object holding one under ``issues``,
    ``results`` or ``findings``. Records that are not objects, or whose
    fields have the wrong type, are skipped with a warning.
    """
    records = payload
    if isinstance(payload, dict):
        records = next((payload[key] for key in RESULT_LIST_KEYS if key in payload), None)
    if not isinstance(records, list):
        raise FindingsLoadError("Expected a list of findings")

    findings = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping finding #%d: not an object", index)
            continue
        try:
            findings.append(Finding.from_dict(record))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping finding #%d: %s", index, exc)
    return findings


def load_findings(path: Path) -> list[Finding]:
    """Read and parse a findings JSON file."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise FindingsLoadError(f"Findings file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FindingsLoadError(f"Could not read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FindingsLoadError(f"Invalid JSON in {path}: {exc}") from exc

    findings = parse_findings(payload)
    logger.debug("Loaded %d findings from %s", len(findings), path)
    return findings
