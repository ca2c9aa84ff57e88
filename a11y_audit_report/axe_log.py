"""Parse the text output of the axe-core CLI into ScanViolation records.

The CLI prints one block per failing rule::

    Violation of "image-alt" with 3 occurrences!
      Ensures <img> elements have alternate text ... Correct invalid elements at:
       - img
       - .hero > img
      For details, see: https://dequeuniversity.com/rules/axe/4.8/image-alt

followed by a ``N Accessibility issues detected.`` summary. Only
``parse_scan_log`` knows about this layout, so the matching strategy can change
without touching the renderer.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from .schema import ScanViolation
from .utils import read_text_if_exists, strip_ansi

logger = logging.getLogger(__name__)

HEADER_RE = re.compile(
    r'^\s*Violation of "(?P<rule>[^"]+)" with (?P<count>\d+) occurrences?!?', re.MULTILINE
)
SUMMARY_RE = re.compile(r"^\s*\d+ Accessibility", re.MULTILINE)
ELEMENT_RE = re.compile(r"^\s+-\s+(.+)")
HELP_URL_RE = re.compile(r"(https://dequeuniversity\.com/\S+)")


def _parse_block(rule: str, count: int, body: str) -> ScanViolation:
    lines = body.strip().splitlines()
    description = lines[0].strip() if lines else ""
    elements = []
    for line in body.splitlines():
        m = ELEMENT_RE.match(line)
        if m:
            elements.append(m.group(1).strip())
    url = HELP_URL_RE.search(body)
    return ScanViolation(
        rule=rule,
        count=count,
        description=description,
        elements=elements,
        help_url=url.group(1) if url else None,
    )


def parse_scan_log(text: str) -> List[ScanViolation]:
    """Return one ScanViolation per violation block, in order of appearance."""
    headers = list(HEADER_RE.finditer(text))
    violations: List[ScanViolation] = []
    for i, m in enumerate(headers):
        end = headers[i + 1].start() if i + 1 < len(headers) else len(text)
        body = text[m.end():end]
        summary = SUMMARY_RE.search(body)
        if summary:
            body = body[:summary.start()]
        count = int(m.group("count"))
        if count < 1:
            logger.debug("Skipping %r: reported with %d occurrences", m.group("rule"), count)
            continue
        violations.append(_parse_block(m.group("rule"), count, body))
    return violations


def load_axe_log(path: Optional[Union[str, Path]]) -> List[ScanViolation]:
    text = read_text_if_exists(path, "axe-core log")
    if text is None:
        return []
    violations = parse_scan_log(strip_ansi(text))
    logger.debug("Parsed %d axe-core violation block(s) from %s", len(violations), path)
    return violations
