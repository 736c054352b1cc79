"""
Scan Services

Organized by responsibility:

1. providers/ - Where Lighthouse reports come from
   - base.py: AuditProvider interface, UpstreamError, Lighthouse result parsing
   - pagespeed.py: Google PageSpeed Insights API (default)
   - lighthouse_cli.py: local lighthouse CLI + headless Chrome

2. utils/ - Pure reshaping of a Lighthouse report
   - audit_classifier.py: severity, impact, category, fix text, help URL
   - audit_normalizer.py: audit map -> issue list, overall score
   - mock_data.py: demo dataset used when the provider fails

3. scan/ - Orchestration
   - scan.py: ScanService, one provider call then live result or fallback
"""
