from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Any
from datetime import datetime


SEVERITIES = ("critical", "serious", "moderate", "minor")


def _as_text(v: Any) -> str:
    # Hand-written JSON carries nulls and numbers where text is expected
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


class ScanViolation(BaseModel):
    rule: str
    count: int = Field(ge=1)
    description: str = ""
    elements: List[str] = []
    help_url: Optional[str] = None


class LighthouseAudit(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    score: float
    item_count: int


class LighthouseResult(BaseModel):
    score: Optional[int] = None  # 0-100, None when no usable report
    failing_audits: List[LighthouseAudit] = []


class ManualFinding(BaseModel):
    severity: str = ""  # critical|serious|moderate|minor, anything else passed through
    issue: str = ""
    location: str = ""
    wcag: Optional[str] = None
    fix: str = ""

    @field_validator("severity", "issue", "location", "fix", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("wcag", mode="before")
    @classmethod
    def _wcag_text(cls, v: Any) -> Optional[str]:
        return None if v is None else _as_text(v)


# Boundary models for the raw Lighthouse JSON document. Only the fields the
# report reads are declared; everything else is ignored.


class LighthouseCategory(BaseModel):
    score: Optional[float] = None


class LighthouseAuditDetails(BaseModel):
    items: List[Any] = []


class LighthouseRawAudit(BaseModel):
    title: str = ""
    description: str = ""
    score: Optional[float] = None
    details: Optional[LighthouseAuditDetails] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)


class LighthouseReportDoc(BaseModel):
    categories: Dict[str, LighthouseCategory] = {}
    # Validated one entry at a time (LighthouseRawAudit) so a single odd
    # audit can't cost the category score
    audits: Dict[str, Any] = {}


class Report(BaseModel):
    """Everything one HTML report is rendered from. Never persisted."""
    phase: str = "pre"
    generated_at: datetime
    lighthouse: LighthouseResult = LighthouseResult()
    violations: List[ScanViolation] = []
    manual_findings: List[ManualFinding] = []
    screen_reader: Optional[str] = None

    @property
    def title(self) -> str:
        if self.phase == "post":
            return "Post-Fix Accessibility Report"
        return "Accessibility Audit Report"
