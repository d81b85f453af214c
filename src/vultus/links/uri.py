"""Query string building and URI checks for assembled avatar URIs."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode, urlsplit

from vultus.pacts import InvalidUriError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Characters allowed anywhere in a URI (RFC 3986 reserved + unreserved + "%").
_URI_CHARACTERS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def build_query(params: Mapping[str, str]) -> str:
    """Return ``?key=value&...`` for ``params``, or ``""`` when it's empty.

    Values are escaped as URI data, so only unreserved characters stay
    literal (a space becomes ``%20``, not ``+``).
    """
    if not params:
        return ""
    return "?" + urlencode(params, quote_via=quote)


def validate_uri(uri: str) -> str:
    """Check that ``uri`` is an absolute, syntactically valid URI.

    Raises:
        InvalidUriError: If ``uri`` has illegal characters, a stray ``%``,
            no scheme, no host or a bad port.
    """
    if not _URI_CHARACTERS.fullmatch(uri):
        logger.debug("Rejecting URI with illegal characters: %r", uri)
        raise InvalidUriError(f"URI contains illegal characters: {uri!r}")
    if _PERCENT_ESCAPE.search(uri):
        logger.debug("Rejecting URI with malformed percent escape: %r", uri)
        raise InvalidUriError(f"URI contains a malformed percent escape: {uri!r}")

    try:
        parts = urlsplit(uri)
        # Reading the port raises on a non-numeric or out of range value.
        parts.port  # noqa: B018
    except ValueError as exception:
        logger.debug("Rejecting unparseable URI %r: %s", uri, exception)
        raise InvalidUriError(f"Cannot parse URI {uri!r}") from exception

    if not parts.scheme or not parts.hostname:
        logger.debug("Rejecting URI without scheme or host: %r", uri)
        raise InvalidUriError(f"URI is not absolute: {uri!r}")

    return uri
