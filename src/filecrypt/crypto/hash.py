from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes


def sha256_bytes(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(data)
    return digest.finalize()


def derive_cipher_key(raw_key: bytes) -> bytes:
    """Cipher key = SHA-256(raw key material) -> 32 bytes

    A plain normalization step, not a password KDF: stored keys are already
    uniformly random.
    """
    return sha256_bytes(raw_key)
