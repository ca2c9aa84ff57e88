"""Plain-text accessibility-tree dump from a screen-reader simulation.

The dump is shown verbatim in the report; nothing in it is interpreted.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .utils import read_text_if_exists, strip_ansi


def load_screen_reader_dump(path: Optional[Union[str, Path]]) -> Optional[str]:
    text = read_text_if_exists(path, "screen-reader dump")
    if text is None:
        return None
    text = strip_ansi(text).strip("\n")
    return text if text.strip() else None
