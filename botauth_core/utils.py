"""
botauth_core.utils
------------------
Encoding helpers shared by the thumbprint and key import code:
base64url without padding, and SHA-256 digests.
"""

from __future__ import annotations
import base64, hashlib

_FORBIDDEN = set("=+/")


def b64url_encode(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode("ascii")


def b64url_decode(s: str) -> bytes:
    """
    Strict base64url (RFC 4648 §5) decode of an unpadded string.

    Padding, the standard-alphabet characters ``+`` and ``/``, non-ASCII input
    and non-zero trailing bits are all rejected with ``ValueError``.
    """
    if not isinstance(s, str):
        raise ValueError(f"expected str, got {type(s).__name__}")
    if _FORBIDDEN.intersection(s):
        raise ValueError("invalid character in base64url-no-pad input")
    raw = s.encode("ascii")
    if len(raw) % 4 == 1:
        raise ValueError(f"invalid base64url length {len(raw)}")
    padded = raw + b"=" * (-len(raw) % 4)
    decoded = base64.b64decode(padded, altchars=b"-_", validate=True)
    # round-trip catches leftover bits in the final symbol
    if b64url_encode(decoded) != s:
        raise ValueError("non-canonical base64url encoding")
    return decoded


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()
