"""URL canonicalization for deduplication."""

from urllib.parse import urlparse, urlunparse

TRACKING_PARAM_PREFIXES = ("utm_",)
TRACKING_PARAMS = {"fbclid", "gclid", "mc_cid", "mc_eid"}


def _is_tracking(key: str) -> bool:
    return key in TRACKING_PARAMS or key.lower().startswith(TRACKING_PARAM_PREFIXES)


def canonicalize_url(url: str) -> str:
    """
    Canonicalize a URL so the same article maps to one key.

    - Lowercases the scheme and host
    - Drops the fragment and tracking query parameters
    - Removes a trailing slash except on the root path

    Args:
        url: URL as reported by the source

    Returns:
        Canonical URL, or an empty string for blank input
    """
    url = (url or "").strip()
    if not url:
        return ""

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return url

    path = parsed.path
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/")

    # Kept parameters stay byte-for-byte, only tracking segments are removed
    query = "&".join(
        segment for segment in parsed.query.split("&") if segment and not _is_tracking(segment.split("=", 1)[0])
    )

    return urlunparse(
        (
            parsed.scheme.lower(),
            parsed.netloc.lower(),
            path,
            parsed.params,
            query,
            "",
        )
    )
