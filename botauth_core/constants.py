# botauth_core/constants.py

LOGGER_ROOT = "botauth"

# environment overrides for logger defaults
ENV_LOG_LEVEL = "BOTAUTH_LOG_LEVEL"
ENV_LOG_FILE = "BOTAUTH_LOG_FILE"
DEFAULT_LOG_LEVEL = "INFO"

ED25519_KEY_LENGTH = 32

# kty values as they appear on the wire
KTY_EC = "EC"
KTY_OKP = "OKP"
KTY_RSA = "RSA"
KTY_OCT = "oct"
