import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519

from botauth_core.jwk import OKP
from botauth_core.utils import b64url_encode

# Ed25519 key from the web-bot-auth draft test vectors
TEST_X = "JrQLj5P_89iXES9-vFgrIy29clF9CC_oPPsw3c5D0bs"


@pytest.fixture
def test_jwk():
    return OKP(crv="Ed25519", x=TEST_X)


@pytest.fixture
def make_ed25519_jwk():
    def make():
        pub = ed25519.Ed25519PrivateKey.generate().public_key().public_bytes_raw()
        return OKP(crv="Ed25519", x=b64url_encode(pub)), pub
    return make
