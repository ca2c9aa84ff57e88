"""Optional YAML file supplying defaults for the report command.

Example ``report.yaml``::

    axe: a11y/axe-output.txt
    lighthouse_json: a11y/lighthouse.report.json
    manual_file: a11y/manual.json
    output: a11y/report.html
    phase: pre

Relative paths are resolved against the directory holding the file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import orjson
import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

PATH_KEYS = ("axe", "lighthouse_json", "manual_file", "screen_reader", "output")


class ReportSettings(BaseModel):
    axe: Optional[str] = None
    lighthouse_json: Optional[str] = None
    manual: Optional[str] = None
    manual_file: Optional[str] = None
    screen_reader: Optional[str] = None
    output: Optional[str] = None
    phase: Optional[str] = None

    @field_validator("manual", mode="before")
    @classmethod
    def _manual_as_json(cls, v: Any):
        # YAML lets users write the findings as a list; keep the JSON-string contract
        if isinstance(v, list):
            return orjson.dumps(v).decode("utf-8")
        return v


def load_config(path: Optional[Union[str, Path]]) -> ReportSettings:
    if not path:
        return ReportSettings()
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config %s: %s", p, e)
        return ReportSettings()
    if not isinstance(data, dict):
        logger.warning("Config %s must be a mapping, ignoring it", p)
        return ReportSettings()
    try:
        settings = ReportSettings.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid config %s: %s", p, e)
        return ReportSettings()
    base = p.resolve().parent
    for key in PATH_KEYS:
        value = getattr(settings, key)
        if value and not Path(value).is_absolute():
            setattr(settings, key, str(base / value))
    return settings
