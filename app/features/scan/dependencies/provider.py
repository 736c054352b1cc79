from app.features.scan.services.providers.base import AuditProvider
from app.features.scan.services.providers.lighthouse_cli import LighthouseCliProvider
from app.features.scan.services.providers.pagespeed import PageSpeedProvider
from app.platform.config import settings


def build_provider(name: str) -> AuditProvider:
    if name == "lighthouse":
        return LighthouseCliProvider(
            binary=settings.LIGHTHOUSE_PATH,
            chrome_flags=settings.LIGHTHOUSE_CHROME_FLAGS,
            timeout=settings.LIGHTHOUSE_TIMEOUT,
        )
    return PageSpeedProvider(
        api_key=settings.GOOGLE_PAGESPEED_API_KEY,
        api_url=settings.PAGESPEED_API_URL,
        timeout=settings.PAGESPEED_TIMEOUT,
    )


def get_audit_provider() -> AuditProvider:
    """
    Dependency that builds the configured audit provider.

    SCAN_PROVIDER=pagespeed (default) → hosted PageSpeed Insights API
    SCAN_PROVIDER=lighthouse          → local lighthouse CLI

    Overridden in tests with a fake provider.
    """
    return build_provider(settings.SCAN_PROVIDER)
