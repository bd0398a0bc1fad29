import hashlib
import os

import pytest

from filecrypt.crypto.aead import aead_decrypt, aead_encrypt, decrypt_blob, encrypt_blob
from filecrypt.crypto.hash import derive_cipher_key
from filecrypt.utils.dataModels import NONCE_SIZE, TAG_SIZE
from filecrypt.utils.errors import AuthenticationError, MalformedCiphertextError


def test_derive_cipher_key_is_sha256():
    raw = bytes(range(32))
    key = derive_cipher_key(raw)
    assert len(key) == 32
    assert key == derive_cipher_key(raw)
    assert key == hashlib.sha256(raw).digest()


def test_derive_cipher_key_accepts_any_length():
    assert len(derive_cipher_key(b"")) == 32
    assert len(derive_cipher_key(b"x" * 100)) == 32


@pytest.mark.parametrize("plaintext", [b"", b"hello", os.urandom(4096)])
def test_blob_roundtrip(plaintext):
    key = derive_cipher_key(os.urandom(32))
    blob = encrypt_blob(key, plaintext)
    assert len(blob) == NONCE_SIZE + len(plaintext) + TAG_SIZE
    assert decrypt_blob(key, blob) == plaintext


def test_hello_blob_is_33_bytes():
    key = derive_cipher_key(os.urandom(32))
    assert len(encrypt_blob(key, b"hello")) == 33


def test_every_bit_flip_fails_authentication():
    key = derive_cipher_key(os.urandom(32))
    blob = encrypt_blob(key, b"hello")
    for i in range(len(blob)):
        for bit in range(8):
            tampered = bytearray(blob)
            tampered[i] ^= 1 << bit
            with pytest.raises(AuthenticationError):
                decrypt_blob(key, bytes(tampered))


def test_wrong_key_fails_authentication():
    blob = encrypt_blob(derive_cipher_key(os.urandom(32)), b"secret")
    with pytest.raises(AuthenticationError):
        decrypt_blob(derive_cipher_key(os.urandom(32)), blob)


def test_truncated_payload_fails_authentication():
    key = derive_cipher_key(os.urandom(32))
    blob = encrypt_blob(key, b"secret data")
    with pytest.raises(AuthenticationError):
        decrypt_blob(key, blob[:-1])
    # nonce only, no tag
    with pytest.raises(AuthenticationError):
        decrypt_blob(key, blob[:12])


def test_short_blob_is_malformed():
    key = derive_cipher_key(os.urandom(32))
    for n in range(12):
        with pytest.raises(MalformedCiphertextError):
            decrypt_blob(key, os.urandom(n))


def test_nonces_do_not_repeat():
    key = derive_cipher_key(os.urandom(32))
    blobs = [encrypt_blob(key, b"same plaintext") for _ in range(1000)]
    assert len({b[:12] for b in blobs}) == len(blobs)
    assert len({b[12:] for b in blobs}) == len(blobs)


def test_aead_primitives_with_aad():
    key = os.urandom(32)
    nonce, ct = aead_encrypt(key, b"payload", b"header")
    assert len(nonce) == 12
    assert aead_decrypt(key, nonce, ct, b"header") == b"payload"
    with pytest.raises(AuthenticationError):
        aead_decrypt(key, nonce, ct, b"other")
