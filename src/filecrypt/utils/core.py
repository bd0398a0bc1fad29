import argparse
import logging

from pathlib import Path

from filecrypt.crypto.aead import encrypt_blob, decrypt_blob
from filecrypt.crypto.hash import derive_cipher_key
from filecrypt.storage.keystore import KeyStore
from filecrypt.ui import textstyler
from filecrypt.ui.constants import USAGE_LINES
from filecrypt.utils.helper import encrypted_path, decrypted_path

log = logging.getLogger(__name__)


def encrypt_file(src: Path, raw_key: bytes) -> Path:
    """Encrypt src under raw_key and write <src>.enc; return the output path."""
    src = Path(src)
    dst = encrypted_path(src)
    plaintext = src.read_bytes()
    blob = encrypt_blob(derive_cipher_key(raw_key), plaintext)
    dst.write_bytes(blob)
    return dst


def decrypt_file(src: Path, raw_key: bytes) -> Path:
    """Decrypt <name>.enc and write <name>; nothing is written on failure."""
    src = Path(src)
    dst = decrypted_path(src)
    blob = src.read_bytes()
    plaintext = decrypt_blob(derive_cipher_key(raw_key), blob)
    dst.write_bytes(plaintext)
    return dst


def cmd_generate_key(args: argparse.Namespace, store: KeyStore) -> int:
    record = store.generate(args.id, args.message or "")
    log.info("generated key id=%s in %s", record.id, store.path)
    print(f"{textstyler.success('New key created.')} ID: {record.id}")
    return 0


def cmd_encrypt(args: argparse.Namespace, store: KeyStore) -> int:
    key = store.get(args.id)
    dst = encrypt_file(Path(args.file), key)
    log.info("encrypted %s -> %s with key id=%s", args.file, dst, args.id)
    print(textstyler.success("File encrypted successfully:"), dst)
    return 0


def cmd_decrypt(args: argparse.Namespace, store: KeyStore) -> int:
    key = store.get(args.id)
    dst = decrypt_file(Path(args.file), key)
    log.info("decrypted %s -> %s with key id=%s", args.file, dst, args.id)
    print(textstyler.success("File decrypted successfully:"), dst)
    return 0


def cmd_list_key(args: argparse.Namespace, store: KeyStore) -> int:
    entries = store.list()
    if not entries:
        print("No stored keys")
        return 0

    print(textstyler.title("Keys:"))
    print(textstyler.subtitle(f"Total: {len(entries)}"))
    for kid, desc in entries:
        print(f"- {textstyler.label('ID:')} {textstyler.plain(kid)}")
        if desc:
            print(f"  {textstyler.label('Description:')} {desc}")
    return 0


def print_help() -> None:
    print(textstyler.title("File encrypter/decrypter"))
    print(textstyler.subtitle("Usage:"))
    width = max(len(usage) for usage, _ in USAGE_LINES) + 2
    for usage, text in USAGE_LINES:
        print(f"  {usage:<{width}} {text}")


def cmd_help(args: argparse.Namespace, store: KeyStore) -> int:
    print_help()
    return 0
