from enum import StrEnum

from pydantic import BaseModel, ConfigDict, StrictInt

MIN_SIZE = 1
MAX_SIZE = 512


class LibravatarError(Exception):
    pass


class MalformedIdentityError(LibravatarError, ValueError):
    pass


class InvalidUriError(LibravatarError, ValueError):
    pass


class IdentityKind(StrEnum):
    EMAIL = "email"
    OPENID = "openid"


class DigestAlgorithm(StrEnum):
    MD5 = "md5"
    SHA256 = "sha256"


class DefaultImage(StrEnum):
    """Special ``d`` values understood by libravatar servers.

    Leaving ``default_image`` unset lets the server pick its own default.
    """

    ERROR = "404"
    PERSON = "mm"
    IDENTICON = "identicon"
    MONSTER_ID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"


class AvatarOptions(BaseModel):
    """Options controlling how an avatar URI is built.

    ``use_sha256`` only applies to email lookups, OpenID lookups are always
    hashed with SHA-256. ``size`` outside of 1..512 is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefer_https: bool = False
    use_sha256: bool = False
    default_image: str | None = None
    size: StrictInt | None = None
    unsecure_base_uri: str = "http://cdn.libravatar.org/avatar/"
    secure_base_uri: str = "https://seccdn.libravatar.org/avatar/"

    @property
    def base_uri(self) -> str:
        return self.secure_base_uri if self.prefer_https else self.unsecure_base_uri

    @property
    def requested_size(self) -> int | None:
        if self.size is None or not MIN_SIZE <= self.size <= MAX_SIZE:
            return None
        return self.size

    def query_parameters(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if (size := self.requested_size) is not None:
            params["s"] = str(size)
        if self.default_image is not None:
            params["d"] = str(self.default_image)
        return params

    def hash_algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA256 if self.use_sha256 else DigestAlgorithm.MD5
