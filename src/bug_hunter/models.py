"""Pydantic models for bug-hunter."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity levels for bugs."""

    critical = "critical"
    warning = "warning"
    info = "info"


class Bug(BaseModel):
    """A single finding produced by a rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Identifier built from language, line and emission order")
    line: int = Field(ge=1, description="1-based line number of the match")
    column: Optional[int] = Field(default=None, description="0-based offset of the matched token")
    severity: Severity = Field(description="Severity level")
    category: str = Field(description="Grouping label, e.g. 'Security' or a language name")
    message: str = Field(description="Short title describing the issue")
    description: str = Field(description="Why the pattern is problematic")
    suggestion: str = Field(description="Recommended remediation")
    code_snippet: Optional[str] = Field(
        default=None,
        alias="codeSnippet",
        description="Stripped source line that triggered the match",
    )


class Summary(BaseModel):
    """Bug counts by severity."""

    model_config = ConfigDict(frozen=True)

    critical: int = Field(default=0, description="Number of critical bugs")
    warning: int = Field(default=0, description="Number of warnings")
    info: int = Field(default=0, description="Number of info findings")

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.info


class AnalysisResult(BaseModel):
    """Sorted bugs and their summary for one analysis."""

    model_config = ConfigDict(frozen=True)

    bugs: list[Bug] = Field(default_factory=list, description="Bugs ordered by line")
    summary: Summary = Field(default_factory=Summary, description="Counts by severity")


class AnalyzeRequest(BaseModel):
    """Request body for analyzing a code snippet."""

    code: Optional[str] = Field(default=None, description="Source text to scan")
    language: Optional[str] = Field(default=None, description="Language identifier, e.g. 'python'")


class AnalyzeResponse(BaseModel):
    """Response from /analyze."""

    id: Optional[str] = Field(default=None, description="Stored analysis id, if saved")
    bugs: list[Bug] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary)
    warning: Optional[str] = Field(default=None, description="Set when the result was not saved")


class Analysis(BaseModel):
    """A stored analysis."""

    id: Optional[str] = Field(default=None, description="Identifier assigned by the store")
    code: Optional[str] = Field(default=None, description="Analyzed source; stripped in listings")
    language: str = Field(description="Language identifier")
    bugs: list[Bug] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary)
    created_at: Optional[datetime] = Field(default=None, description="Set by the store on save")
