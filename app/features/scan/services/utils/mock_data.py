"""
Demo dataset returned when the upstream provider cannot produce a result.
"""
import time

from app.features.scan.schemas.scan import FallbackScanResult, Issue

MOCK_SCORE = 67
FALLBACK_WARNING = "Using demo data. Google PageSpeed Insights API is unavailable or rate-limited."

# Field sets only; generate_mock_data builds fresh Issue objects per call
MOCK_ISSUES = (
    dict(
        id="issue-0",
        title="Image elements do not have [alt] attributes",
        description=(
            "Informative elements should aim for short, descriptive alternate text. "
            "Decorative elements can be ignored with an empty alt attribute."
        ),
        severity="critical",
        category="images",
        impact="High",
        elements=('<img src="/logo.png">', '<img src="/banner.jpg">'),
        fix='Add descriptive alt text to all images. Use alt="" for decorative images.',
        help_url="https://web.dev/image-alt/",
    ),
    dict(
        id="issue-1",
        title="Background and foreground colors do not have a sufficient contrast ratio",
        description="Low-contrast text is difficult or impossible for many users to read.",
        severity="critical",
        category="contrast",
        impact="High",
        elements=("body > div.header > p", "button.submit"),
        fix="Increase color contrast between text and background to at least 4.5:1 for normal text.",
        help_url="https://web.dev/color-contrast/",
    ),
    dict(
        id="issue-2",
        title="Buttons do not have an accessible name",
        description=(
            "When a button doesn't have an accessible name, screen readers announce it as "
            '"button", making it unusable for users who rely on screen readers.'
        ),
        severity="critical",
        category="aria",
        impact="High",
        elements=('<button class="close-btn"><span class="icon-close"></span></button>',),
        fix="Ensure all buttons have accessible text via aria-label or text content.",
        help_url="https://web.dev/button-name/",
    ),
    dict(
        id="issue-3",
        title="Links do not have a discernible name",
        description=(
            "Link text (and alternate text for images, when used as links) that is discernible, "
            "unique, and focusable improves the navigation experience for screen reader users."
        ),
        severity="warning",
        category="aria",
        impact="Medium",
        elements=('<a href="/more"><span class="icon"></span></a>',),
        fix="Ensure all links have descriptive text that indicates their purpose.",
        help_url="https://web.dev/link-name/",
    ),
    dict(
        id="issue-4",
        title="Form elements do not have associated labels",
        description=(
            "Labels ensure that form controls are announced properly by assistive "
            "technologies, like screen readers."
        ),
        severity="warning",
        category="aria",
        impact="Medium",
        elements=('<input type="email" placeholder="Enter email">',),
        fix="Associate form inputs with labels using for/id attributes.",
        help_url="https://web.dev/label/",
    ),
)


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def generate_mock_data(url: str) -> FallbackScanResult:
    return FallbackScanResult(
        url=url,
        timestamp=current_timestamp_ms(),
        score=MOCK_SCORE,
        issues=[Issue(**fields) for fields in MOCK_ISSUES],
        warning=FALLBACK_WARNING,
    )
