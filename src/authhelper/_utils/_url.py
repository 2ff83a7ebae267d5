from typing import Mapping, Optional
from urllib.parse import quote, urlencode

from httpx import URL, InvalidURL


def parse_url(endpoint: str) -> Optional[URL]:
    """Parse an absolute http(s) URL, returning None when it is not one."""
    try:
        url = URL(endpoint)
    except (InvalidURL, TypeError):
        return None

    if url.scheme not in ("http", "https") or not url.host:
        return None
    return url


def build_url(endpoint: str, query_params: Optional[Mapping[str, str]] = None) -> str:
    """Replace the query string of ``endpoint`` with ``query_params``.

    Keys and values are percent-encoded (``%20`` for spaces). The endpoint is
    returned unchanged when there are no parameters or when it does not parse;
    an unparseable endpoint is reported later as an invalid URL rather than
    here.
    """
    if not query_params:
        return endpoint

    try:
        url = URL(endpoint)
    except (InvalidURL, TypeError):
        return endpoint

    query = urlencode(list(query_params.items()), quote_via=quote)
    return str(url.copy_with(query=query.encode("ascii")))
