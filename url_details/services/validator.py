"""Syntactic validation of the caller-supplied ``url`` parameter."""

import re
from typing import Any
from urllib.parse import urlsplit

from url_details.errors import InvalidParamError

ALLOWED_SCHEMES = {"http", "https"}

# Whitespace or ASCII control characters anywhere inside the URL
_UNSAFE_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def _reject(reason: str) -> InvalidParamError:
    return InvalidParamError({"url": reason})


def validate_url(raw: Any) -> str:
    """Return *raw* as a trimmed absolute http(s) URL.

    No DNS lookups or network access happen here.

    Raises:
        InvalidParamError: if *raw* is not a string, is blank, or is not an
            absolute ``http``/``https`` URL with a host.
    """
    if not isinstance(raw, str):
        raise _reject("url is not of type string.")

    url = raw.strip()
    if not url:
        raise _reject("url must not be empty.")

    if _UNSAFE_CHARS.search(url):
        raise _reject("url contains invalid characters.")

    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
        # Raises ValueError for non-numeric or out-of-range ports
        port = parsed.port
    except ValueError:
        raise _reject("url could not be parsed.")

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise _reject("url must use the http or https scheme.")

    if not hostname:
        raise _reject("url must have a valid hostname.")

    if port == 0:
        raise _reject("url must not use port 0.")

    return url
