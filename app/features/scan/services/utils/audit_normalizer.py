import math
from typing import Dict, List, Optional

from app.features.scan.schemas.scan import (
    MAX_AFFECTED_ELEMENTS,
    Issue,
    LighthouseAudit,
)
from app.features.scan.services.utils.audit_classifier import (
    build_help_url,
    get_fix_suggestion,
    get_impact,
    get_severity,
    map_audit_to_category,
)

NOT_APPLICABLE = "notApplicable"


def is_reportable(audit: LighthouseAudit) -> bool:
    """Only failed or warned audits become issues."""
    return (
        audit.score is not None
        and audit.score < 1
        and audit.score_display_mode != NOT_APPLICABLE
    )


def extract_elements(audit: LighthouseAudit) -> List[str]:
    """Selectors (or HTML snippets when no selector) of the affected nodes, capped."""
    elements: List[str] = []
    if not audit.details or not audit.details.items:
        return elements

    for item in audit.details.items:
        if len(elements) >= MAX_AFFECTED_ELEMENTS:
            break
        node = item.node
        if node is None:
            continue
        if node.selector:
            elements.append(node.selector)
        elif node.snippet:
            elements.append(node.snippet)

    return elements


def normalize_audit(audit_id: str, audit: LighthouseAudit, counter: int) -> Issue:
    return Issue(
        id=f"issue-{counter}",
        title=audit.title,
        description=audit.description,
        severity=get_severity(audit.score),
        category=map_audit_to_category(audit_id),
        impact=get_impact(audit.score),
        elements=extract_elements(audit),
        fix=get_fix_suggestion(audit_id),
        help_url=build_help_url(audit_id, audit.help_text),
    )


def normalize_audits(audits: Dict[str, LighthouseAudit]) -> List[Issue]:
    """Transform the upstream audit map into issues, numbered in map order."""
    issues: List[Issue] = []
    for audit_id, audit in audits.items():
        if is_reportable(audit):
            issues.append(normalize_audit(audit_id, audit, len(issues)))
    return issues


def compute_overall_score(raw_score: Optional[float]) -> int:
    """Category score in [0, 1] to a 0-100 integer, halves rounded up."""
    if not raw_score:
        return 0
    score = math.floor(raw_score * 100 + 0.5)
    return max(0, min(100, score))
