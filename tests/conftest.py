"""
Test configuration and fixtures for the Accessibility Scanner API.

Provides HTTP clients, a fake audit provider that stands in for PageSpeed /
Lighthouse, and a factory for upstream PageSpeed payloads.
"""

from typing import Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.features.scan.dependencies.provider import get_audit_provider
from app.features.scan.schemas.scan import LighthouseReport
from app.features.scan.services.providers.base import AuditProvider


class FakeProvider(AuditProvider):
    """Returns a canned report, or raises the configured error."""

    name = "fake"

    def __init__(self, report: Optional[LighthouseReport] = None, error: Optional[Exception] = None):
        self.report = report
        self.error = error
        self.calls: List[str] = []

    async def run(self, url: str) -> LighthouseReport:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.report


def make_audit(
    title: str,
    score,
    display_mode: str = "binary",
    nodes: Optional[List[dict]] = None,
    help_text: Optional[str] = None,
) -> dict:
    audit = {
        "title": title,
        "description": f"{title} description",
        "score": score,
        "scoreDisplayMode": display_mode,
    }
    if nodes is not None:
        audit["details"] = {"type": "table", "items": [{"node": node} for node in nodes]}
    if help_text is not None:
        audit["helpText"] = help_text
    return audit


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    Server errors are returned as responses so 500 handling can be asserted.
    """
    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def override_provider(test_app):
    """Install a provider for the scan endpoint; restored after the test."""
    def _install(provider: AuditProvider) -> AuditProvider:
        test_app.dependency_overrides[get_audit_provider] = lambda: provider
        return provider

    yield _install

    test_app.dependency_overrides.pop(get_audit_provider, None)


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def lighthouse_result() -> dict:
    """
    Lighthouse result with 4 reportable audits and 3 that must be skipped
    (passed, manual with null score, not applicable).
    """
    return {
        "categories": {"accessibility": {"id": "accessibility", "score": 0.78}},
        "audits": {
            "image-alt": make_audit(
                "Image elements do not have [alt] attributes",
                0,
                nodes=[{"selector": f"img.photo-{i}", "snippet": f'<img class="photo-{i}">'} for i in range(7)],
                help_text="Learn more about the alt attribute.",
            ),
            "color-contrast": make_audit(
                "Background and foreground colors do not have a sufficient contrast ratio",
                0,
                nodes=[
                    {"selector": "body > p.muted"},
                    {"snippet": "<span class=\"faint\">"},
                    {"nodeLabel": "no selector or snippet"},
                ],
            ),
            "document-title": make_audit("Document has a <title> element", 1),
            "button-name": make_audit("Buttons do not have an accessible name", 0.5),
            "html-has-lang": make_audit("Page has lang", None, display_mode="manual"),
            "video-caption": make_audit("Video captions", 0, display_mode="notApplicable"),
            "heading-order": make_audit("Heading elements are not in a sequentially-descending order", 0.3),
        },
    }


@pytest.fixture
def pagespeed_payload(lighthouse_result) -> dict:
    return {
        "id": "https://example.com/",
        "lighthouseResult": lighthouse_result,
    }
