import re

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_long_url(long_url: str) -> str:
    """Prefix ``http://`` unless the URL already starts with http:// or https://."""
    if _SCHEME_RE.match(long_url):
        return long_url
    return "http://" + long_url
