#!/usr/bin/env python3
"""
filecrypt – local key store + single-file authenticated encryption

Key store:
    <keys dir>/keys.json   (dir 0700, file 0600)
    {"keys": {"<id>": {"key": "<base64 of 32 random bytes>", "description": "..."}}}

    keys dir = --keys-dir, else $FILECRYPT_HOME, else ~/.file_encrypter

Encrypted file layout (no header, no version field):
    nonce     : 12 bytes
    ciphertext: len(plaintext) bytes
    tag       : 16 bytes

Commands:
  generate-key [-m description] <id>   Create a new random key
  encrypt <file> <id>                  Encrypt file -> <file>.enc
  decrypt <file.enc> <id>              Decrypt file -> <file>
  list-key                             Show stored key ids and descriptions
  help                                 Show usage

Security choices:
  - AEAD: AES-256-GCM via cryptography.hazmat, fresh random nonce per file
  - Cipher key = SHA-256(stored key bytes)
"""
from __future__ import annotations

import logging
import sys

from colorama import just_fix_windows_console

from filecrypt.storage.keystore import KeyStore
from filecrypt.ui import textstyler
from filecrypt.ui.cli import COMMANDS, build_global_parser, build_parser
from filecrypt.utils.core import print_help
from filecrypt.utils.errors import FileCryptError, KeyStoreDecodeError
from filecrypt.utils.helper import ensure_keys_dir, keystore_paths, resolve_keys_dir
from filecrypt.utils.logger import get_logger

ERROR_PREFIXES = {
    "generate-key": "Key generation error:",
    "encrypt": "Encryption error:",
    "decrypt": "Decryption error:",
    "list-key": "Error:",
}


def open_store(keys_dir: str | None, log: logging.Logger) -> KeyStore:
    paths = keystore_paths(ensure_keys_dir(resolve_keys_dir(keys_dir)))
    store = KeyStore(paths["keys"])
    try:
        store.load()
    except KeyStoreDecodeError as e:
        log.warning("continuing with empty key store: %s", e)
        print(textstyler.error("Key store decode error:"), e)
    return store


def main(argv: list[str] | None = None) -> int:
    just_fix_windows_console()
    argv = sys.argv[1:] if argv is None else list(argv)

    opts, rest = build_global_parser(add_help=False).parse_known_args(argv)
    if not rest:
        print_help()
        return 0
    if rest[0] not in COMMANDS and rest[0] not in ("-h", "--help"):
        print(textstyler.error("Command not recognized:"), rest[0])
        print_help()
        return 1

    args = build_parser().parse_args(argv)
    log = get_logger("filecrypt", "DEBUG" if args.verbose else None)
    log.debug("command=%s keys_dir=%s", args.cmd, args.keys_dir)

    if args.cmd == "help":
        return args.func(args, None)

    try:
        store = open_store(args.keys_dir, log)
        return args.func(args, store)
    except (FileCryptError, OSError) as e:
        log.debug("%s failed", args.cmd, exc_info=True)
        print(textstyler.error(ERROR_PREFIXES[args.cmd]), e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
