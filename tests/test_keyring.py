import json
import pytest

from botauth_core.errors import ConversionError, KeyAlreadyExists, ParsingError, UnsupportedAlgorithm
from botauth_core.jwk import JSONWebKeySet, OKP, RSA
from botauth_core.keyring import KeyRing

TEST_X = "JrQLj5P_89iXES9-vFgrIy29clF9CC_oPPsw3c5D0bs"
TEST_THUMBPRINT = "poqkLGiymh_W0uP6PZFw-dvez3QJT5SolqXBCW38r0U"

# CMD Line Usage: pytest -v -s --log-cli-level=INFO tests/test_keyring.py


def test_import_raw_inserts_once():
    ring = KeyRing()
    assert ring.import_raw("k1", b"\x01" * 32)
    assert ring.get("k1") == b"\x01" * 32

    assert not ring.import_raw("k1", b"\x02" * 32)
    assert ring.get("k1") == b"\x01" * 32
    assert len(ring) == 1


def test_get_unknown_identifier():
    assert KeyRing().get("nope") is None


def test_rings_do_not_share_state():
    a, b = KeyRing(), KeyRing()
    a.import_raw("k1", b"a")
    assert "k1" in a
    assert "k1" not in b


def test_rename_moves_entry():
    ring = KeyRing()
    ring.import_raw("old", b"key")
    assert ring.rename_key("old", "new")
    assert ring.get("old") is None
    assert ring.get("new") == b"key"


def test_rename_missing_source_is_noop():
    ring = KeyRing()
    ring.import_raw("other", b"key")
    assert not ring.rename_key("missing", "new")
    assert ring.identifiers() == ["other"]
    assert ring.get("new") is None


def test_rename_onto_bound_identifier_is_rejected():
    ring = KeyRing()
    ring.import_raw("a", b"key-a")
    ring.import_raw("b", b"key-b")

    assert not ring.rename_key("a", "b")
    # neither entry is touched
    assert ring.get("a") == b"key-a"
    assert ring.get("b") == b"key-b"
    assert len(ring) == 2


def test_rename_onto_itself_is_rejected():
    ring = KeyRing()
    ring.import_raw("a", b"key-a")
    assert not ring.rename_key("a", "a")
    assert ring.get("a") == b"key-a"


def test_from_items_first_wins():
    ring = KeyRing.from_items([("a", b"1"), ("b", b"2"), ("a", b"3")])
    assert len(ring) == 2
    assert ring.get("a") == b"1"


def test_try_import_jwk_stores_under_thumbprint(test_jwk):
    ring = KeyRing()
    assert ring.try_import_jwk(test_jwk) == TEST_THUMBPRINT
    assert ring.get(TEST_THUMBPRINT) is not None
    assert ring.identifiers() == [TEST_THUMBPRINT]


def test_try_import_same_jwk_twice(test_jwk):
    ring = KeyRing()
    ring.try_import_jwk(test_jwk)
    with pytest.raises(KeyAlreadyExists) as err:
        ring.try_import_jwk(OKP(crv="Ed25519", x=TEST_X))
    assert err.value.identifier == TEST_THUMBPRINT
    assert len(ring) == 1


def test_extraction_error_wins_over_collision():
    ring = KeyRing()
    bad = RSA(e="AQAB", n="nn")
    ring.import_raw(bad.b64_thumbprint(), b"occupied")
    with pytest.raises(UnsupportedAlgorithm):
        ring.try_import_jwk(bad)
    assert ring.get(bad.b64_thumbprint()) == b"occupied"


def test_import_jwks_is_index_aligned(make_ed25519_jwk):
    first, first_pub = make_ed25519_jwk()
    last, last_pub = make_ed25519_jwk()
    jwks = JSONWebKeySet([
        first,
        RSA(e="AQAB", n="nn"),
        OKP(crv="Ed25519", x="not base64!"),
        OKP(crv="Ed25519", x="AAAA"),
        first,
        last,
    ])

    ring = KeyRing()
    results = ring.import_jwks(jwks)

    assert len(results) == len(jwks)
    assert results[0] is None
    assert isinstance(results[1], UnsupportedAlgorithm)
    assert isinstance(results[2], ParsingError)
    assert isinstance(results[3], ConversionError)
    assert isinstance(results[4], KeyAlreadyExists)
    assert results[5] is None

    assert ring.get(first.b64_thumbprint()) == first_pub
    assert ring.get(last.b64_thumbprint()) == last_pub
    assert len(ring) == 2


def test_import_jwks_empty():
    assert KeyRing().import_jwks(JSONWebKeySet()) == []


def test_import_jwks_logs_failures(caplog):
    ring = KeyRing()
    ring.import_jwks([RSA(e="AQAB", n="nn")])
    assert "jwks[0] not imported" in caplog.text


def test_jwks_document_then_alias():
    doc = json.dumps({"keys": [{
        "kty": "OKP",
        "crv": "Ed25519",
        "kid": "test-key-ed25519",
        "d": "n4Ni-HpISpVObnQMW0wOhCKROaIKqKtW_2ZYb2p9KcU",
        "x": TEST_X,
    }]})
    ring = KeyRing()
    assert ring.import_jwks(JSONWebKeySet.from_json(doc)) == [None]
    assert ring.get(TEST_THUMBPRINT) is not None

    assert ring.rename_key(TEST_THUMBPRINT, "test-key-ed25519")
    assert ring.get("test-key-ed25519") is not None
    assert ring.get(TEST_THUMBPRINT) is None
