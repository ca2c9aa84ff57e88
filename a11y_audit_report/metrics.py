"""Summary figures shown in the report's score cards."""
from __future__ import annotations
from typing import Iterable, List, Optional, Dict

from .schema import Report, ScanViolation


def lighthouse_band(score: Optional[int]) -> str:
    """Classify a 0-100 Lighthouse accessibility score.

    Returns:
      'good' for >= 90, 'ok' for 70-89, 'bad' below 70,
      and '' (no color class) when the score is unavailable.
    """
    if score is None:
        return ""
    if score >= 90:
        return "good"
    if score >= 70:
        return "ok"
    return "bad"


def total_violations(violations: Iterable[ScanViolation]) -> int:
    """Sum of occurrences across all rules (not the number of rules)."""
    return sum(v.count for v in violations)


def zero_band(n: int) -> str:
    return "good" if n == 0 else "bad"


def score_cards(report: Report) -> List[Dict[str, str]]:
    """Label, display value and color class for each card, in display order."""
    score = report.lighthouse.score
    axe_total = total_violations(report.violations)
    manual_total = len(report.manual_findings)
    return [
        {
            "label": "Lighthouse Score",
            "value": f"{score}/100" if score is not None else "N/A",
            "band": lighthouse_band(score),
        },
        {"label": "axe-core Violations", "value": str(axe_total), "band": zero_band(axe_total)},
        {"label": "Manual Findings", "value": str(manual_total), "band": zero_band(manual_total)},
    ]


__all__ = ["lighthouse_band", "total_violations", "zero_band", "score_cards"]
