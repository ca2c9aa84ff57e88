"""Extract the accessibility score and failing audits from a Lighthouse JSON report."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, List, Optional, Union

import orjson
from pydantic import ValidationError

from .schema import LighthouseAudit, LighthouseRawAudit, LighthouseReportDoc, LighthouseResult
from .utils import read_text_if_exists

logger = logging.getLogger(__name__)


def parse_lighthouse(data: Any) -> LighthouseResult:
    """Convert a decoded Lighthouse document into a LighthouseResult.

    Raises ``pydantic.ValidationError`` when the document or its categories
    don't have the expected shape. A malformed audit entry is skipped.
    """
    doc = LighthouseReportDoc.model_validate(data)
    category = doc.categories.get("accessibility")
    fraction = category.score if category and category.score is not None else 0
    failing: List[LighthouseAudit] = []
    for audit_id, raw in doc.audits.items():
        try:
            audit = LighthouseRawAudit.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping Lighthouse audit %r: %s", audit_id, e)
            continue
        items = audit.details.items if audit.details else []
        if audit.score is not None and audit.score < 1 and len(items) > 0:
            failing.append(
                LighthouseAudit(
                    id=audit_id,
                    title=audit.title,
                    description=audit.description,
                    score=audit.score,
                    item_count=len(items),
                )
            )
    # Round half up (72.5 -> 73); round() would give 72
    score = math.floor(fraction * 100 + 0.5)
    return LighthouseResult(score=score, failing_audits=failing)


def load_lighthouse(path: Optional[Union[str, Path]]) -> LighthouseResult:
    text = read_text_if_exists(path, "Lighthouse report")
    if text is None:
        return LighthouseResult()
    try:
        return parse_lighthouse(orjson.loads(text))
    except (orjson.JSONDecodeError, ValidationError) as e:
        logger.warning("Could not parse Lighthouse JSON %s: %s", path, e)
        return LighthouseResult()
