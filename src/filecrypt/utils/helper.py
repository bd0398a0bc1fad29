import os

from pathlib import Path
from typing import Dict

from filecrypt.utils.dataModels import (
    DEFAULT_KEYS_DIRNAME,
    ENC_SUFFIX,
    KEYS_DIR_MODE,
    KEYS_FILENAME,
    KEYS_HOME_ENV,
)
from filecrypt.utils.errors import InvalidFileNameError


def resolve_keys_dir(override: str | None = None) -> Path:
    """--keys-dir wins, then $FILECRYPT_HOME, then ~/.file_encrypter."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(KEYS_HOME_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / DEFAULT_KEYS_DIRNAME


def keystore_paths(keys_dir: Path) -> Dict[str, Path]:
    return {
        "keys": keys_dir / KEYS_FILENAME,
    }


def ensure_keys_dir(keys_dir: Path) -> Path:
    keys_dir.mkdir(mode=KEYS_DIR_MODE, parents=True, exist_ok=True)
    return keys_dir


def encrypted_path(src: Path) -> Path:
    return src.with_name(src.name + ENC_SUFFIX)


def decrypted_path(src: Path) -> Path:
    if not src.name.endswith(ENC_SUFFIX) or src.name == ENC_SUFFIX:
        raise InvalidFileNameError(f"{src} does not end with '{ENC_SUFFIX}'")
    return src.with_name(src.name[: -len(ENC_SUFFIX)])
