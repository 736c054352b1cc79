from urllib.parse import urlparse
from typing import Tuple


ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str) -> Tuple[bool, str, str]:
    """
    Returns (is_valid, url, error_message).

    The URL is scanned exactly as given: a missing scheme is an error,
    nothing is prepended.
    """
    if not url or not url.strip():
        return False, "", "URL is required"

    url = url.strip()

    try:
        parsed = urlparse(url)
        # Touch the port so malformed ports ("http://host:abc") fail here
        parsed.port
    except ValueError:
        return False, url, "Invalid URL format"

    if not parsed.scheme:
        return False, url, "Invalid URL format"

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        return False, url, "URL must start with http:// or https://"

    if not parsed.netloc or not parsed.hostname:
        return False, url, "Invalid URL format"

    return True, url, ""
