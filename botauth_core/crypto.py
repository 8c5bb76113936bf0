"""
botauth_core.crypto
-------------------
Turns a KeyRepresentation into raw verifying-key bytes.

Importers are registered per (kty, crv) pair. Only Ed25519 OKP keys are
registered today; every other pair is reported as UnsupportedAlgorithm.
All failures are KeyImportError subclasses so untrusted JWKs can be fed in
without anything else escaping.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
from cryptography.hazmat.primitives.asymmetric import ed25519

from .constants import ED25519_KEY_LENGTH, KTY_OKP
from .errors import ConversionError, ParsingError, UnsupportedAlgorithm
from .jwk import KeyRepresentation
from .utils import b64url_decode

Importer = Callable[[KeyRepresentation], bytes]

_IMPORTERS: Dict[Tuple[str, Optional[str]], Importer] = {}


def register_importer(kty: str, crv: Optional[str] = None):
    """Decorator registering ``fn`` as the importer for (kty, crv)."""
    def wrap(fn: Importer) -> Importer:
        _IMPORTERS[(kty, crv)] = fn
        return fn
    return wrap


def supported_algorithms() -> List[Tuple[str, Optional[str]]]:
    """Registered (kty, crv) pairs, sorted. crv is None for importers that ignore the curve."""
    return sorted(_IMPORTERS, key=lambda pair: (pair[0], pair[1] or ""))


def public_key(jwk: KeyRepresentation) -> bytes:
    """
    Extract raw public key bytes from ``jwk``.

    Raises UnsupportedAlgorithm, ParsingError or ConversionError.
    """
    if not isinstance(jwk, KeyRepresentation):
        raise TypeError(f"cannot import {type(jwk).__name__}")
    crv = getattr(jwk, "crv", None)
    importer = _IMPORTERS.get((jwk.kty, crv))
    if importer is None:
        raise UnsupportedAlgorithm(jwk.kty, crv)
    return importer(jwk)


# --------- Ed25519 ----------
_P = 2 ** 255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def _check_ed25519_point(raw: bytes) -> None:
    """RFC 8032 §5.1.3 point decoding; raises ValueError if ``raw`` is not a curve point."""
    if len(raw) != ED25519_KEY_LENGTH:
        raise ValueError(f"Ed25519 public key must be {ED25519_KEY_LENGTH} bytes, got {len(raw)}")
    y = int.from_bytes(raw, "little") & ((1 << 255) - 1)
    sign = raw[31] >> 7
    if y >= _P:
        raise ValueError("non-canonical y coordinate")

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x2 = u * pow(v, _P - 2, _P) % _P
    if x2 == 0:
        if sign:
            raise ValueError("invalid sign bit for x = 0")
        return
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P != 0:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P != 0:
        raise ValueError("y coordinate is not on the curve")


@register_importer(KTY_OKP, "Ed25519")
def import_ed25519(jwk: KeyRepresentation) -> bytes:
    try:
        raw = b64url_decode(jwk.x)
    except ValueError as exc:
        raise ParsingError(f"invalid base64url in 'x': {exc}") from exc

    try:
        _check_ed25519_point(raw)
        key = ed25519.Ed25519PublicKey.from_public_bytes(raw)
    except ValueError as exc:
        raise ConversionError(f"invalid Ed25519 public key: {exc}") from exc
    return key.public_bytes_raw()
