"""Best-effort metadata extraction from remote HTML."""

import logging
from typing import Callable, Dict, Optional, Union

from bs4 import BeautifulSoup

from url_details.models.metadata import PageMetadata

logger = logging.getLogger(__name__)


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag is None:
        return ""
    # get_text() has already decoded entities such as &mdash;
    return " ".join(title_tag.get_text().split())


# PageMetadata field name -> rule producing its value from the parsed page
_RULES: Dict[str, Callable[[BeautifulSoup], str]] = {
    "title": _extract_title,
}


def extract_metadata(body: Union[bytes, str], encoding: Optional[str] = None) -> PageMetadata:
    """Parse *body* as HTML and return the :class:`PageMetadata` found in it.

    For bytes, *encoding* (the charset from the response headers) is tried
    first; without it BeautifulSoup uses the document's own declaration.
    Missing elements produce empty fields and broken markup never raises.
    """
    try:
        if isinstance(body, bytes):
            soup = BeautifulSoup(body, "lxml", from_encoding=encoding)
        else:
            soup = BeautifulSoup(body, "lxml")
    except Exception as exc:
        logger.warning("Failed to parse remote HTML: %s", exc)
        return PageMetadata()

    values = {}
    for field, rule in _RULES.items():
        try:
            values[field] = rule(soup)
        except Exception as exc:
            logger.warning("Failed to extract %s from remote HTML: %s", field, exc)
    return PageMetadata(**values)
