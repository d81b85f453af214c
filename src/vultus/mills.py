import logging
from urllib.parse import urlsplit, urlunsplit

from vultus.links.digest import hex_digest
from vultus.links.uri import build_query, validate_uri
from vultus.pacts import (
    AvatarOptions,
    DigestAlgorithm,
    IdentityKind,
    MalformedIdentityError,
)

logger = logging.getLogger(__name__)


def default_options() -> AvatarOptions:
    return AvatarOptions()


def canonicalize_email(raw: str) -> str:
    # Simple per-character mapping: no final sigma context, and U+0130 maps
    # to a single "i" so the length never changes.
    return "".join(
        "i" if character == "\u0130" else character.lower() for character in raw
    )


def canonicalize_openid(raw: str) -> str:
    """Lowercase the scheme and host of an OpenID URL.

    Path, query, fragment, port and user info are kept as they are.

    Raises:
        MalformedIdentityError: If ``raw`` is not an absolute URL.
    """
    try:
        parts = urlsplit(raw)
        # Reading the port raises on a non-numeric or out of range value.
        parts.port  # noqa: B018
    except ValueError as exception:
        raise MalformedIdentityError(f"Invalid OpenID URL: {raw!r}") from exception

    if not parts.scheme or not parts.hostname:
        raise MalformedIdentityError(f"OpenID is not an absolute URL: {raw!r}")

    userinfo, at, host_port = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{host_port.lower()}"
    return urlunsplit(
        (parts.scheme.lower(), netloc, parts.path, parts.query, parts.fragment)
    )


def select_algorithm(kind: IdentityKind, options: AvatarOptions) -> DigestAlgorithm:
    if kind is IdentityKind.OPENID:
        return DigestAlgorithm.SHA256
    return options.hash_algorithm()


def assemble(digest: str, options: AvatarOptions) -> str:
    if options.size is not None and options.requested_size is None:
        logger.debug("Ignoring avatar size %d, out of range", options.size)
    query = build_query(options.query_parameters())
    return validate_uri(f"{options.base_uri}{digest}{query}")


class AvatarUriBuilder:
    """Builds libravatar URIs for emails and OpenIDs with fixed options.

    Usage:
        builder = AvatarUriBuilder(AvatarOptions(prefer_https=True, size=64))
        builder.from_email("Jane@Example.com")
        builder.from_openid("https://example.com/jane")
    """

    def __init__(self, options: AvatarOptions | None = None) -> None:
        self.options = default_options() if options is None else options

    def from_email(self, email: str) -> str:
        return self._build(IdentityKind.EMAIL, canonicalize_email(email))

    def from_openid(self, openid: str) -> str:
        return self._build(IdentityKind.OPENID, canonicalize_openid(openid))

    def _build(self, kind: IdentityKind, canonical: str) -> str:
        algorithm = select_algorithm(kind, self.options)
        uri = assemble(hex_digest(canonical, algorithm), self.options)
        logger.debug("Built %s avatar URI using %s", kind, algorithm)
        return uri


def from_email(email: str, options: AvatarOptions | None = None) -> str:
    return AvatarUriBuilder(options).from_email(email)


def from_openid(openid: str, options: AvatarOptions | None = None) -> str:
    return AvatarUriBuilder(options).from_openid(openid)
