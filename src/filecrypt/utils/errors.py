"""Exception types raised by the key store and the file cipher.

Nothing here formats output for the user; the command layer does that.
"""


class FileCryptError(Exception):
    """Base class for every failure the core reports."""


class DuplicateKeyError(FileCryptError):
    def __init__(self, key_id: str):
        super().__init__(f"key with ID '{key_id}' already exists")
        self.key_id = key_id


class KeyNotFoundError(FileCryptError):
    def __init__(self, key_id: str):
        super().__init__(f"key with ID '{key_id}' not found")
        self.key_id = key_id


class KeyFormatError(FileCryptError):
    """Stored key text does not decode to valid key material."""


class KeyStoreDecodeError(FileCryptError):
    """The key store file exists but could not be parsed."""


class MalformedCiphertextError(FileCryptError):
    """Ciphertext is shorter than one nonce."""


class AuthenticationError(FileCryptError):
    """AEAD tag verification failed: wrong key, or corrupted/truncated data."""


class InvalidFileNameError(FileCryptError):
    """Decrypt source does not carry the encrypted-file suffix."""
