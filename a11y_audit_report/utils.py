"""Miscellaneous utility helpers shared by the input loaders."""
import logging
import re
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Color, bold, underline, cursor movement...
ANSI_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences from captured CLI output."""
    return ANSI_RE.sub("", text)


def read_text_if_exists(path: Optional[Union[str, Path]], label: str) -> Optional[str]:
    """Return the file's text, or None when no path was given or it can't be read.

    A missing or unreadable file is logged as a warning under ``label``;
    it is never an error for the caller.
    """
    if not path:
        return None
    p = Path(path)
    if not p.is_file():
        logger.warning("%s not found: %s", label, p)
        return None
    try:
        return p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Could not read %s %s: %s", label, p, e)
        return None
