import pytest

from app.features.scan.services.utils.audit_classifier import (
    GENERIC_FIX,
    GENERIC_HELP_URL,
    build_help_url,
    get_fix_suggestion,
    get_impact,
    get_severity,
    map_audit_to_category,
)


class TestSeverity:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (None, "critical"),
            (0, "critical"),
            (0.49, "critical"),
            (0.5, "warning"),
            (0.89, "warning"),
            (0.9, "success"),
            (1, "success"),
        ],
    )
    def test_boundaries(self, score, expected):
        assert get_severity(score) == expected


class TestImpact:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, "High"),
            (None, "Medium"),
            (0.01, "Medium"),
            (0.49, "Medium"),
            (0.5, "Low"),
            (0.99, "Low"),
        ],
    )
    def test_impact_labels(self, score, expected):
        assert get_impact(score) == expected


class TestCategory:
    @pytest.mark.parametrize(
        "audit_id, expected",
        [
            ("image-alt", "images"),
            ("input-image-alt", "images"),
            ("object-alt", "images"),
            ("color-contrast", "contrast"),
            ("aria-roles", "aria"),
            ("aria-required-attr", "aria"),
            ("button-name", "aria"),
            ("link-name", "aria"),
            ("label", "aria"),
            ("document-title", "other"),
            ("heading-order", "other"),
            ("duplicate-id", "other"),
            ("", "other"),
        ],
    )
    def test_classification(self, audit_id, expected):
        assert map_audit_to_category(audit_id) == expected

    def test_first_matching_rule_wins(self):
        # matches both the images and the aria rule
        assert map_audit_to_category("aria-image-role") == "images"
        # matches both the contrast and the aria rule
        assert map_audit_to_category("link-color") == "contrast"

    def test_substring_match_is_case_sensitive(self):
        assert map_audit_to_category("IMAGE-ALT") == "other"


class TestFixSuggestion:
    @pytest.mark.parametrize(
        "audit_id, fragment",
        [
            ("image-alt", "alt text"),
            ("color-contrast", "4.5:1"),
            ("aria-roles", 'role="button"'),
            ("aria-required-attr", "required ARIA attributes"),
            ("button-name", "buttons have accessible text"),
            ("link-name", "links have descriptive text"),
            ("label", "for/id"),
            ("document-title", "<title>"),
            ("html-has-lang", "lang attribute"),
            ("meta-viewport", "viewport meta tag"),
            ("heading-order", "sequentially-descending"),
            ("duplicate-id", "unique"),
        ],
    )
    def test_table_entries(self, audit_id, fragment):
        assert fragment in get_fix_suggestion(audit_id)

    def test_substring_keys_match_longer_ids(self):
        assert get_fix_suggestion("input-image-alt") == get_fix_suggestion("image-alt")
        assert get_fix_suggestion("form-field-multiple-labels") == get_fix_suggestion("label")

    @pytest.mark.parametrize("audit_id", ["tabindex", "aria-required-children", "bypass", ""])
    def test_unknown_audit_gets_generic_fix(self, audit_id):
        assert get_fix_suggestion(audit_id) == GENERIC_FIX
        assert GENERIC_FIX


class TestHelpUrl:
    def test_audit_with_help_text(self):
        assert build_help_url("image-alt", "Learn more") == "https://web.dev/image-alt/"

    @pytest.mark.parametrize("help_text", [None, ""])
    def test_audit_without_help_text(self, help_text):
        assert build_help_url("image-alt", help_text) == GENERIC_HELP_URL
