"""
botauth_core.jwk
----------------
JSON Web Key representations reduced to the members RFC 7638 needs for
thumbprinting, plus the thumbprint itself.

Each key type is a frozen dataclass. Members outside the thumbprint set
(kid, d, use, alg, ...) are dropped when a JWK is parsed; callers that need
that metadata must read it from the raw document.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from collections.abc import Sequence
from typing import Any, ClassVar, Dict, Iterator, List, Tuple
import json

from .constants import KTY_EC, KTY_OKP, KTY_RSA, KTY_OCT
from .errors import JWKFormatError
from .utils import b64url_encode, sha256


@dataclass(frozen=True)
class KeyRepresentation:
    kty: ClassVar[str] = ""

    def thumbprint_members(self) -> Tuple[Tuple[str, str], ...]:
        """Required members including kty, in lexicographic order."""
        raise NotImplementedError(f"{type(self).__name__} does not define thumbprint members")

    def to_dict(self) -> Dict[str, str]:
        return dict(self.thumbprint_members())

    def b64_thumbprint(self) -> str:
        return b64_thumbprint(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyRepresentation":
        """
        Build the matching variant from a parsed JWK object.

        Raises JWKFormatError when ``data`` is not an object, names no or an
        unknown ``kty``, or lacks a required string member.
        """
        if not isinstance(data, dict):
            raise JWKFormatError(f"JWK must be an object, got {type(data).__name__}")
        kty = data.get("kty")
        if not isinstance(kty, str):
            raise JWKFormatError("JWK is missing 'kty'")
        variant = _VARIANTS.get(kty)
        if variant is None:
            raise JWKFormatError(f"unknown kty: {kty!r}")

        values = {}
        for f in fields(variant):
            value = data.get(f.name)
            if not isinstance(value, str):
                raise JWKFormatError(f"{kty} JWK requires string member '{f.name}'")
            values[f.name] = value
        return variant(**values)


@dataclass(frozen=True)
class EC(KeyRepresentation):
    """Elliptic curve key."""
    kty: ClassVar[str] = KTY_EC
    crv: str
    x: str
    y: str

    def thumbprint_members(self):
        return (("crv", self.crv), ("kty", self.kty), ("x", self.x), ("y", self.y))


@dataclass(frozen=True)
class OKP(KeyRepresentation):
    """Octet key pair (Ed25519, X25519, ...)."""
    kty: ClassVar[str] = KTY_OKP
    crv: str
    x: str

    def thumbprint_members(self):
        return (("crv", self.crv), ("kty", self.kty), ("x", self.x))


@dataclass(frozen=True)
class RSA(KeyRepresentation):
    kty: ClassVar[str] = KTY_RSA
    e: str
    n: str

    def thumbprint_members(self):
        return (("e", self.e), ("kty", self.kty), ("n", self.n))


@dataclass(frozen=True)
class OCT(KeyRepresentation):
    """Symmetric key."""
    kty: ClassVar[str] = KTY_OCT
    k: str

    def thumbprint_members(self):
        return (("k", self.k), ("kty", self.kty))


_VARIANTS = {cls.kty: cls for cls in (EC, OKP, RSA, OCT)}


def _json_string(value: str) -> str:
    # only the escapes JSON requires; base64url values pass through untouched
    return json.dumps(value, ensure_ascii=False)


def canonical_json(jwk: KeyRepresentation) -> bytes:
    """
    RFC 7638 canonical form: required members only, sorted, no whitespace.

    Built by hand rather than through a generic serializer so the byte
    layout cannot drift.
    """
    if type(jwk) not in _VARIANTS.values():
        raise TypeError(f"cannot thumbprint {type(jwk).__name__}")
    body = ",".join(f"{_json_string(k)}:{_json_string(v)}" for k, v in jwk.thumbprint_members())
    return ("{" + body + "}").encode("utf-8", "surrogatepass")


def b64_thumbprint(jwk: KeyRepresentation) -> str:
    """base64url-no-pad SHA-256 JWK thumbprint."""
    return b64url_encode(sha256(canonical_json(jwk)))


class JSONWebKeySet(Sequence):
    """Ordered JWK Set. Order is kept so batch import results line up with input."""

    def __init__(self, keys=()):
        self.keys: List[KeyRepresentation] = list(keys)

    def __getitem__(self, index):
        return self.keys[index]

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[KeyRepresentation]:
        return iter(self.keys)

    def __eq__(self, other) -> bool:
        if not isinstance(other, JSONWebKeySet):
            return NotImplemented
        return self.keys == other.keys

    def __repr__(self) -> str:
        return f"JSONWebKeySet(keys={self.keys!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"keys": [k.to_dict() for k in self.keys]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JSONWebKeySet":
        """Parse a ``{"keys": [...]}`` document. Any malformed entry rejects the whole set."""
        if not isinstance(data, dict) or not isinstance(data.get("keys"), list):
            raise JWKFormatError("JWKS must be an object with a 'keys' array")
        return cls(KeyRepresentation.from_dict(entry) for entry in data["keys"])

    @classmethod
    def from_json(cls, text: str | bytes) -> "JSONWebKeySet":
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise JWKFormatError(f"JWKS is not valid JSON: {exc}") from exc
        return cls.from_dict(data)
