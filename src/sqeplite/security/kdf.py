from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF


QT_DOMAIN = b"SQEP:LITE:QT:v1"
SEED_LEN = 32


def derive_keystream_seed(key: bytes, nonce: bytes, info: bytes = QT_DOMAIN) -> bytes:
    """
    Derive the 32-byte keystream seed for one message.
    HKDF-SHA256 with salt=nonce and ikm=key, bound to the fixed domain string.
    Identical (key, nonce) always gives the identical seed.
    """
    hkdf = HKDF(algorithm=hashes.SHA256(), length=SEED_LEN, salt=nonce, info=info)
    return hkdf.derive(key)
