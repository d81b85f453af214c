import logging

from django import template

from vultus.inits import get_avatar_uri_builder
from vultus.pacts import MalformedIdentityError

logger = logging.getLogger(__name__)

register = template.Library()


def _size_overrides(filter_name: str, size: object) -> dict[str, int] | None:
    """Turn a filter's size argument into option overrides.

    Returns ``None`` when the argument isn't a whole number.
    """
    if size is None or size == "":
        return {}
    try:
        return {"size": int(str(size))}
    except ValueError:
        logger.warning("Invalid size argument %r for the %s filter", size, filter_name)
        return None


@register.filter
def libravatar_email(email: str, size: int | str | None = None) -> str:
    if not email:
        return ""
    overrides = _size_overrides("libravatar_email", size)
    if overrides is None:
        return ""
    return get_avatar_uri_builder(**overrides).from_email(email)


@register.filter
def libravatar_openid(openid: str, size: int | str | None = None) -> str:
    """Return the avatar URI for an OpenID, or ``""`` if it isn't a URL.

    OpenIDs usually come straight from user profiles, so a malformed one is
    logged instead of breaking the whole page.
    """
    if not openid:
        return ""
    overrides = _size_overrides("libravatar_openid", size)
    if overrides is None:
        return ""
    try:
        return get_avatar_uri_builder(**overrides).from_openid(openid)
    except MalformedIdentityError:
        logger.warning("Cannot build avatar URI for malformed OpenID %r", openid)
        return ""
