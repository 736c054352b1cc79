from typing import Callable, List, Optional, Tuple

from app.features.scan.schemas.scan import Category, Impact, Severity

DOCS_BASE_URL = "https://web.dev"
GENERIC_HELP_URL = f"{DOCS_BASE_URL}/accessibility/"
GENERIC_FIX = "Review the accessibility documentation for best practices."


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda audit_id: any(needle in audit_id for needle in needles)


# Evaluated top to bottom, first match wins
CATEGORY_RULES: List[Tuple[Callable[[str], bool], Category]] = [
    (_contains_any("alt", "image"), "images"),
    (_contains_any("contrast", "color"), "contrast"),
    (_contains_any("aria", "role", "label", "button", "link"), "aria"),
]

FIX_SUGGESTIONS: List[Tuple[str, str]] = [
    ("image-alt", 'Add descriptive alt text to all images. Use alt="" for decorative images.'),
    ("color-contrast", "Increase color contrast between text and background to at least 4.5:1 for normal text."),
    ("aria-roles", 'Add appropriate ARIA roles to interactive elements (e.g., role="button").'),
    ("aria-required-attr", "Add missing required ARIA attributes to elements with ARIA roles."),
    ("button-name", "Ensure all buttons have accessible text via aria-label or text content."),
    ("link-name", "Ensure all links have descriptive text that indicates their purpose."),
    ("label", "Associate form inputs with labels using for/id attributes."),
    ("document-title", "Add a descriptive <title> tag to the document."),
    ("html-has-lang", 'Add a lang attribute to the <html> tag (e.g., <html lang="en">).'),
    ("meta-viewport", "Add a viewport meta tag for responsive design."),
    ("heading-order", "Ensure heading elements are in a sequentially-descending order (h1, h2, h3)."),
    ("duplicate-id", "Remove duplicate IDs to ensure all IDs are unique."),
]


def get_severity(score: Optional[float]) -> Severity:
    """Determine severity based on an audit score in [0, 1]."""
    if score is None or score < 0.5:
        return "critical"
    if score < 0.9:
        return "warning"
    # Lighthouse accessibility audits are binary (0 or 1) and only scores < 1
    # are reported, so neither scan path emits this tier in practice.
    return "success"


def get_impact(score: Optional[float]) -> Impact:
    """Impact label shown next to an issue. A missing score ranks as Medium."""
    if score == 0:
        return "High"
    if score is None or score < 0.5:
        return "Medium"
    return "Low"


def map_audit_to_category(audit_id: str) -> Category:
    for matches, category in CATEGORY_RULES:
        if matches(audit_id):
            return category
    return "other"


def get_fix_suggestion(audit_id: str) -> str:
    for key, fix in FIX_SUGGESTIONS:
        if key in audit_id:
            return fix
    return GENERIC_FIX


def build_help_url(audit_id: str, help_text: Optional[str]) -> str:
    if help_text:
        return f"{DOCS_BASE_URL}/{audit_id}/"
    return GENERIC_HELP_URL
