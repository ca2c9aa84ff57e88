"""Manual code-review findings supplied by the caller as a JSON array."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import orjson
from pydantic import ValidationError

from .schema import ManualFinding, SEVERITIES
from .utils import read_text_if_exists

logger = logging.getLogger(__name__)


def parse_manual_findings(data: Any) -> List[ManualFinding]:
    if not isinstance(data, list):
        logger.warning("Manual findings must be a JSON array, got %s", type(data).__name__)
        return []
    findings: List[ManualFinding] = []
    for index, entry in enumerate(data):
        try:
            finding = ManualFinding.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping manual finding #%d: %s", index, e)
            continue
        if finding.severity not in SEVERITIES:
            logger.debug("Manual finding #%d has unrecognized severity %r", index, finding.severity)
        findings.append(finding)
    return findings


def load_manual_findings(
    path: Optional[Union[str, Path]] = None,
    inline: Optional[str] = None,
) -> List[ManualFinding]:
    """Load findings from ``path`` if it exists, else from the ``inline`` JSON string.

    The file form avoids shell-quoting problems with long inline JSON, so it
    takes precedence when both are given.
    """
    raw = None
    source = str(path)
    if path:
        raw = read_text_if_exists(path, "manual findings file")
    if raw is None:
        raw = inline
        source = "--manual"
    if not raw:
        return []
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.warning("Could not parse manual findings JSON from %s: %s", source, e)
        return []
    return parse_manual_findings(data)
