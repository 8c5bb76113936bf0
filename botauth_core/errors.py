from __future__ import annotations


class KeyImportError(Exception):
    """Base class for every failure raised while importing a key into a KeyRing."""


class UnsupportedAlgorithm(KeyImportError):
    """The (kty, crv) combination has no registered importer."""

    def __init__(self, kty: str, crv: str | None = None):
        self.kty = kty
        self.crv = crv
        label = f"{kty}/{crv}" if crv else kty
        super().__init__(f"unsupported key algorithm: {label}")


class ParsingError(KeyImportError):
    """A key parameter was not valid base64url. The decode error is chained as __cause__."""


class ConversionError(KeyImportError):
    """Decoded bytes do not form a valid key. The validation error is chained as __cause__."""


class KeyAlreadyExists(KeyImportError):

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"key already exists: {identifier}")


class JWKFormatError(ValueError):
    """A JWK or JWKS document is structurally malformed."""
