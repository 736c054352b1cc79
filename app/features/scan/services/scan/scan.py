from app.features.scan.schemas.scan import LiveScanResult, ScanResult
from app.features.scan.services.providers.base import AuditProvider, UpstreamError
from app.features.scan.services.utils.audit_normalizer import (
    compute_overall_score,
    normalize_audits,
)
from app.features.scan.services.utils.mock_data import current_timestamp_ms, generate_mock_data
from app.platform.logger import get_logger

logger = get_logger(__name__)


class ScanService:
    """
    Runs one accessibility scan: a single upstream attempt, then either the
    normalized live result or the demo dataset. Upstream failures never
    reach the caller.
    """

    def __init__(self, provider: AuditProvider):
        self.provider = provider

    async def scan(self, url: str) -> ScanResult:
        try:
            report = await self.provider.run(url)
        except UpstreamError as e:
            logger.error(f"{self.provider.name} audit failed for {url}, falling back to mock data: {e}")
            return generate_mock_data(url)

        issues = normalize_audits(report.audits)
        result = LiveScanResult(
            url=url,
            timestamp=current_timestamp_ms(),
            score=compute_overall_score(report.score),
            issues=issues,
        )

        logger.info(f"Scan completed for {url}: score={result.score}, issues={len(issues)}")
        return result
