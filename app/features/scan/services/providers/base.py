from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import ValidationError

from app.features.scan.schemas.scan import LighthouseReport


class UpstreamError(Exception):
    """The audit provider could not produce a usable Lighthouse report."""


class AuditProvider(ABC):
    """Source of Lighthouse accessibility reports for a single URL."""

    name: str = "provider"

    @abstractmethod
    async def run(self, url: str) -> LighthouseReport:
        """Audit `url` once. Raises UpstreamError on any failure."""


def parse_lighthouse_result(lhr: Any) -> LighthouseReport:
    """
    Pull the accessibility score and audit map out of a Lighthouse result
    object (PageSpeed's `lighthouseResult` or the CLI's JSON report).
    """
    if not isinstance(lhr, dict):
        raise UpstreamError("Lighthouse result is not an object")

    categories = lhr.get("categories") or {}
    accessibility = categories.get("accessibility") if isinstance(categories, dict) else None
    if not isinstance(accessibility, dict):
        raise UpstreamError("No accessibility data in Lighthouse results")

    audits: Dict[str, Any] = lhr.get("audits")
    if not isinstance(audits, dict):
        raise UpstreamError("No audits in Lighthouse results")

    try:
        return LighthouseReport(score=accessibility.get("score"), audits=audits)
    except ValidationError as e:
        raise UpstreamError(f"Unexpected Lighthouse audit format: {e.error_count()} invalid field(s)") from e
