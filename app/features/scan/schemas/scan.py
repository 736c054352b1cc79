"""
Scan Schemas

Upstream Lighthouse audit models, the locally normalized issue, and the
request/response models of the scan endpoint.
"""
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Severity = Literal["critical", "warning", "success"]
Category = Literal["images", "contrast", "aria", "other"]
Impact = Literal["High", "Medium", "Low"]

MAX_AFFECTED_ELEMENTS = 5


# ============================================================================
# Upstream (Lighthouse) Schemas
# ============================================================================

class LighthouseNode(BaseModel):
    """Element descriptor attached to an audit detail item."""
    model_config = ConfigDict(extra="ignore")

    selector: Optional[str] = None
    snippet: Optional[str] = None


class LighthouseDetailItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    node: Optional[LighthouseNode] = None


class LighthouseDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: Optional[List[LighthouseDetailItem]] = None


class LighthouseAudit(BaseModel):
    """
    One audit from `lighthouseResult.audits`.

    Owned by the upstream service; only the fields the normalizer reads
    are modelled, everything else is ignored.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    title: str = ""
    description: str = ""
    score: Optional[float] = None
    score_display_mode: Optional[str] = Field(default=None, alias="scoreDisplayMode")
    help_text: Optional[str] = Field(default=None, alias="helpText")
    details: Optional[LighthouseDetails] = None


class LighthouseReport(BaseModel):
    """Accessibility category score plus the audit map, in upstream order."""
    score: Optional[float] = None
    audits: Dict[str, LighthouseAudit]


# ============================================================================
# Local Schemas
# ============================================================================

class Issue(BaseModel):
    """
    One failing or warning audit, enriched with category, severity and a fix.

    Frozen: severity/category/impact are derived by the audit normalizer
    and cannot be reassigned afterwards.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str
    severity: Severity
    category: Category
    impact: Impact
    elements: List[str] = Field(default_factory=list, max_length=MAX_AFFECTED_ELEMENTS)
    fix: str = Field(min_length=1)
    help_url: Optional[str] = Field(default=None, alias="helpUrl")


class ScanResultBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    timestamp: int  # milliseconds since epoch
    score: int = Field(ge=0, le=100)
    issues: List[Issue]


class LiveScanResult(ScanResultBase):
    """Result measured by the upstream provider. Never carries a warning."""


class FallbackScanResult(ScanResultBase):
    """Synthetic demo result returned when the upstream provider failed."""
    warning: str = Field(min_length=1)
    is_mock_data: Literal[True] = Field(default=True, alias="isMockData")


ScanResult = Union[LiveScanResult, FallbackScanResult]


# ============================================================================
# Request / Error Schemas
# ============================================================================

class ScanRequest(BaseModel):
    """Request to scan a single page."""
    url: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com"
            }
        }


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
