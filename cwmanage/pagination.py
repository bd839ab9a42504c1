"""
Forward-only pagination cursor handling.

ConnectWise returns the next page location in the ``link`` response header
rather than in the body, e.g.

    link: <https://na.myconnectwise.net/v4_6_release/apis/3.0/system/members?pageId=26&pageSize=25>; rel="next"

The cursor is the ``pageId`` query parameter of the URL between ``<`` and ``>``.
An empty header, or a header whose URL has no ``pageId``, marks the last page.
"""
from typing import Mapping, Optional
from urllib.parse import parse_qs, urlparse

from cwmanage.exceptions import ParseError

FIRST_PAGE_ID = "1"
PAGE_ID_PARAM = "pageid"
LINK_HEADER = "link"
LINK_PAGE_ID = "pageId"


def extract_page_id(link: str) -> Optional[str]:
    """
    Read the next page id from a link header value.

    Args:
        link: Raw, non-empty link header value

    Returns:
        The pageId token, or None if the linked URL carries none

    Raises:
        ParseError: if the header holds no <url> section
    """
    # Only the first link entry is considered
    section = link.split("link =")[0]
    start = section.find("<")
    end = section.find(">", start + 1)
    if start == -1 or end == -1:
        raise ParseError(f"Malformed link header: {link!r}")

    url = section[start + 1:end]
    params = parse_qs(urlparse(url).query)
    values = params.get(LINK_PAGE_ID)
    if not values or not values[0]:
        return None
    return values[0]


def next_page_id(headers: Mapping[str, str]) -> Optional[str]:
    """
    Next page token from response headers, or None when the walk is finished.

    Only an exactly empty header value counts as empty; whitespace is parsed
    like any other value.
    """
    link = headers.get(LINK_HEADER)
    if link is None or link == "":
        return None
    return extract_page_id(link)
