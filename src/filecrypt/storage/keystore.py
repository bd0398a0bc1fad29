import base64
import binascii
import json
import os

from pathlib import Path
from typing import Dict, List, Tuple

from filecrypt.utils.dataModels import KEY_SIZE, KEYS_FILE_MODE, KeyRecord
from filecrypt.utils.errors import (
    DuplicateKeyError,
    KeyFormatError,
    KeyNotFoundError,
    KeyStoreDecodeError,
)


class KeyStore:
    """Id -> key record mapping backed by a single JSON file.

    File shape:
        {"keys": {"<id>": {"key": "<base64>", "description": "..."}}}

    No locking is done around save(); two concurrent writers race and the
    last one wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.records: Dict[str, KeyRecord] = {}

    def __contains__(self, key_id: str) -> bool:
        return key_id in self.records

    def __len__(self) -> int:
        return len(self.records)

    def load(self) -> None:
        self.records = {}
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return

        try:
            obj = json.loads(data.decode("utf-8"))
            keys = obj.get("keys")
            if keys is None:
                keys = {}
            if not isinstance(keys, dict):
                raise TypeError("'keys' is not an object")
            records = {kid: KeyRecord.from_dict(kid, rec) for kid, rec in keys.items()}
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise KeyStoreDecodeError(f"cannot decode key store {self.path}: {e}") from e
        self.records = records

    def save(self) -> None:
        obj = {"keys": {kid: rec.to_dict() for kid, rec in self.records.items()}}
        data = json.dumps(obj, ensure_ascii=False, indent=2).encode("utf-8")
        tmp = self.path.with_suffix(".tmp")
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, KEYS_FILE_MODE)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp, KEYS_FILE_MODE)
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def generate(self, key_id: str, description: str = "") -> KeyRecord:
        if key_id in self.records:
            raise DuplicateKeyError(key_id)
        key = os.urandom(KEY_SIZE)
        record = KeyRecord(
            id=key_id,
            key_b64=base64.b64encode(key).decode("ascii"),
            description=description,
        )
        self.records[key_id] = record
        try:
            self.save()
        except OSError:
            del self.records[key_id]
            raise
        return record

    def get(self, key_id: str) -> bytes:
        record = self.records.get(key_id)
        if record is None:
            raise KeyNotFoundError(key_id)
        try:
            key = base64.b64decode(record.key_b64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise KeyFormatError(f"invalid key format for ID '{key_id}': {e}") from e
        if len(key) != KEY_SIZE:
            raise KeyFormatError(
                f"invalid key format for ID '{key_id}': {len(key)} bytes, expected {KEY_SIZE}"
            )
        return key

    def list(self) -> List[Tuple[str, str]]:
        return [(rec.id, rec.description) for rec in self.records.values()]
