import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from typing import Tuple

from filecrypt.utils.dataModels import NONCE_SIZE
from filecrypt.utils.errors import AuthenticationError, MalformedCiphertextError

def aead_encrypt(key: bytes, plaintext: bytes, aad: bytes | None = None) -> Tuple[bytes, bytes]:
    nonce = os.urandom(NONCE_SIZE)
    aesgcm = AESGCM(key)
    ct = aesgcm.encrypt(nonce, plaintext, aad)
    return nonce, ct


def aead_decrypt(key: bytes, nonce: bytes, ct: bytes, aad: bytes | None = None) -> bytes:
    aesgcm = AESGCM(key)
    try:
        return aesgcm.decrypt(nonce, ct, aad)
    except InvalidTag as e:
        raise AuthenticationError("authentication failed: wrong key or corrupted data") from e


def encrypt_blob(key: bytes, plaintext: bytes) -> bytes:
    """Seal plaintext and return nonce || ciphertext || tag."""
    nonce, ct = aead_encrypt(key, plaintext)
    return nonce + ct


def decrypt_blob(key: bytes, blob: bytes) -> bytes:
    """Open a nonce-prefixed blob produced by encrypt_blob."""
    if len(blob) < NONCE_SIZE:
        raise MalformedCiphertextError(
            f"invalid encrypted data: {len(blob)} bytes, need at least {NONCE_SIZE}"
        )
    nonce, ct = blob[:NONCE_SIZE], blob[NONCE_SIZE:]
    return aead_decrypt(key, nonce, ct)
