import asyncio
from typing import Optional

import httpx

from app.features.scan.schemas.scan import LighthouseReport
from app.features.scan.services.providers.base import (
    AuditProvider,
    UpstreamError,
    parse_lighthouse_result,
)
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)


class PageSpeedProvider(AuditProvider):
    """Google PageSpeed Insights, which runs Lighthouse on Google's side."""

    name = "pagespeed"

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = settings.PAGESPEED_API_URL,
        timeout: float = settings.PAGESPEED_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    def build_params(self, url: str) -> dict:
        params = {"url": url, "category": "accessibility"}
        if self.api_key:
            params["key"] = self.api_key
        return params

    async def _fetch(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await client.get(
                self.api_url,
                params=self.build_params(url),
                headers={"Accept": "application/json"},
            )

    async def run(self, url: str) -> LighthouseReport:
        logger.info(f"Requesting PageSpeed accessibility audit for {url}")

        # httpx timeouts are per phase; the total, body included, is capped here

        try:
            response = await asyncio.wait_for(self._fetch(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamError(f"PageSpeed API timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"PageSpeed API request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"PageSpeed API returned {response.status_code}: {response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("PageSpeed API returned invalid JSON") from e

        if not isinstance(data, dict) or not data.get("lighthouseResult"):
            raise UpstreamError("PageSpeed API did not return Lighthouse results")

        return parse_lighthouse_result(data["lighthouseResult"])
