import argparse

from filecrypt.utils.core import (
    cmd_decrypt,
    cmd_encrypt,
    cmd_generate_key,
    cmd_help,
    cmd_list_key,
)

COMMANDS = ("generate-key", "encrypt", "decrypt", "list-key", "help")


def build_global_parser(add_help: bool = True) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="filecrypt",
        description="Encrypt and decrypt files with locally stored keys",
        add_help=add_help,
    )
    p.add_argument("--keys-dir", help="Key store directory (default: $FILECRYPT_HOME or ~/.file_encrypter)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return p


def build_parser() -> argparse.ArgumentParser:
    p = build_global_parser()
    sub = p.add_subparsers(dest="cmd", required=True)

    p_gen = sub.add_parser("generate-key", help="Create a new key")
    p_gen.add_argument("-m", dest="message", default="", help="Key description")
    p_gen.add_argument("id", help="Key identifier")
    p_gen.set_defaults(func=cmd_generate_key)

    p_enc = sub.add_parser("encrypt", help="Encrypt a file (writes <file>.enc)")
    p_enc.add_argument("file", help="Plaintext file")
    p_enc.add_argument("id", help="Key identifier")
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a .enc file")
    p_dec.add_argument("file", help="Encrypted file, must end with .enc")
    p_dec.add_argument("id", help="Key identifier")
    p_dec.set_defaults(func=cmd_decrypt)

    p_ls = sub.add_parser("list-key", help="Show all keys")
    p_ls.set_defaults(func=cmd_list_key)

    p_help = sub.add_parser("help", help="Show usage")
    p_help.set_defaults(func=cmd_help)

    return p
