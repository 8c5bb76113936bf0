"""
botauth_core.keyring
--------------------
In-memory store mapping identifiers to raw verifying keys.

Keys imported from a JWK are stored under their RFC 7638 thumbprint and can
be moved to a caller-chosen alias with rename_key(). An identifier, once
bound, is never overwritten by an insert or a rename.

A KeyRing is not thread-safe; callers sharing one across threads must hold
their own lock around mutations.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from .crypto import public_key
from .errors import KeyAlreadyExists, KeyImportError
from .jwk import KeyRepresentation
from .logger import get_logger

log = get_logger("botauth.keyring")


class KeyRing:
    def __init__(self):
        self._ring: Dict[str, bytes] = {}

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, bytes]]) -> "KeyRing":
        """Build a ring from (identifier, key) pairs. The first pair for an identifier wins."""
        ring = cls()
        for identifier, key in items:
            ring.import_raw(identifier, key)
        return ring

    def __len__(self) -> int:
        return len(self._ring)

    def __contains__(self, identifier) -> bool:
        return identifier in self._ring

    def identifiers(self) -> List[str]:
        return list(self._ring)

    def import_raw(self, identifier: str, key: bytes) -> bool:
        """Insert ``key`` under ``identifier`` unless it is already bound. Returns True if inserted."""
        if identifier in self._ring:
            log.warning(f"[KEYRING] insert rejected, identifier already bound: {identifier}")
            return False
        self._ring[identifier] = bytes(key)
        return True

    def rename_key(self, old_identifier: str, new_identifier: str) -> bool:
        """
        Move the key at ``old_identifier`` to ``new_identifier``.

        Returns False without touching the ring when the old identifier is
        unknown or the new one is already bound (this includes renaming a
        key onto itself).
        """
        if old_identifier not in self._ring:
            return False
        if new_identifier in self._ring:
            log.warning(f"[KEYRING] rename rejected, target already bound: {old_identifier} -> {new_identifier}")
            return False
        self._ring[new_identifier] = self._ring.pop(old_identifier)
        log.info(f"[KEYRING] renamed {old_identifier} -> {new_identifier}")
        return True

    def get(self, identifier: str) -> Optional[bytes]:
        return self._ring.get(identifier)

    def try_import_jwk(self, jwk: KeyRepresentation) -> str:
        """
        Import a single JWK under its thumbprint and return that identifier.

        Extraction errors (UnsupportedAlgorithm, ParsingError, ConversionError)
        propagate first; a thumbprint that is already bound raises
        KeyAlreadyExists.
        """
        thumbprint = jwk.b64_thumbprint()
        key = public_key(jwk)
        if not self.import_raw(thumbprint, key):
            raise KeyAlreadyExists(thumbprint)
        log.info(f"[KEYRING] imported {jwk.kty} key {thumbprint}")
        return thumbprint

    def import_jwks(self, jwks: Iterable[KeyRepresentation]) -> List[Optional[KeyImportError]]:
        """
        Best-effort import of every key in ``jwks``.

        Returns one entry per input key, in order: None on success, or the
        KeyImportError that stopped that key.
        """
        results: List[Optional[KeyImportError]] = []
        for index, jwk in enumerate(jwks):
            try:
                self.try_import_jwk(jwk)
            except KeyImportError as exc:
                log.warning(f"[KEYRING] jwks[{index}] not imported: {exc}")
                results.append(exc)
            else:
                results.append(None)
        return results
