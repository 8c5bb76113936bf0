"""
botauth core
============
Identifies and stores JSON Web Key public keys for request-signature
verification.

Provides:
- RFC 7638 JWK thumbprints
- Ed25519 key import with strict validation
- KeyRing: identifier -> raw verifying key store with best-effort JWKS import
"""

from .crypto import public_key, register_importer
from .errors import (
    ConversionError,
    JWKFormatError,
    KeyAlreadyExists,
    KeyImportError,
    ParsingError,
    UnsupportedAlgorithm,
)
from .jwk import EC, OCT, OKP, RSA, JSONWebKeySet, KeyRepresentation, b64_thumbprint, canonical_json
from .keyring import KeyRing

__all__ = [
    "EC",
    "OCT",
    "OKP",
    "RSA",
    "JSONWebKeySet",
    "KeyRepresentation",
    "KeyRing",
    "b64_thumbprint",
    "canonical_json",
    "public_key",
    "register_importer",
    "KeyImportError",
    "UnsupportedAlgorithm",
    "ParsingError",
    "ConversionError",
    "KeyAlreadyExists",
    "JWKFormatError",
]
