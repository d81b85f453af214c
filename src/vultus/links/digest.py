import hashlib

from vultus.pacts import DigestAlgorithm


def hex_digest(canonical: str, algorithm: DigestAlgorithm) -> str:
    if algorithm is DigestAlgorithm.MD5:
        # Libravatar keeps MD5 for Gravatar-compatible lookups.
        hash_object = hashlib.md5(usedforsecurity=False)  # noqa: S324
    else:
        hash_object = hashlib.sha256()
    hash_object.update(canonical.encode("utf-8"))
    return hash_object.hexdigest()
