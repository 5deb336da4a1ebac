from __future__ import annotations

import hashlib

_FINGERPRINT_PERSON = b"crpt-api-token"


def token_fingerprint(token: str, prefix_length: int = 12) -> str:
    """Reduce a bearer token to a short identifier that is safe to log.

    BLAKE2b keyed with a fixed personalization string, so the fingerprint
    cannot be matched against plain hashes of the same token elsewhere.

    Args:
        token: Registry bearer token
        prefix_length: Number of hex characters to return (default: 12)

    Example:
        >>> len(token_fingerprint("eyJhbGciOi...", prefix_length=12))
        12
    """
    digest_size = min(64, max(1, (prefix_length + 1) // 2))
    digest = hashlib.blake2b(token.encode("utf-8"), digest_size=digest_size, person=_FINGERPRINT_PERSON)
    return digest.hexdigest()[:prefix_length]
