from dataclasses import dataclass
from typing import Dict, Any

KEY_SIZE = 32  # raw key material, bytes
NONCE_SIZE = 12  # AES-GCM standard nonce
TAG_SIZE = 16

ENC_SUFFIX = ".enc"
KEYS_FILENAME = "keys.json"
DEFAULT_KEYS_DIRNAME = ".file_encrypter"
KEYS_HOME_ENV = "FILECRYPT_HOME"
LOG_LEVEL_ENV = "FILECRYPT_LOG_LEVEL"

KEYS_DIR_MODE = 0o700
KEYS_FILE_MODE = 0o600


@dataclass
class KeyRecord:
    id: str
    key_b64: str
    description: str = ""

    def to_dict(self) -> Dict[str, str]:
        d = {"key": self.key_b64}
        if self.description:
            d["description"] = self.description
        return d

    @staticmethod
    def from_dict(key_id: str, obj: Dict[str, Any]) -> "KeyRecord":
        key_b64 = obj["key"]
        description = obj.get("description")
        if description is None:
            description = ""
        if not isinstance(key_b64, str) or not isinstance(description, str):
            raise TypeError(f"record {key_id!r} has non-string fields")
        return KeyRecord(id=key_id, key_b64=key_b64, description=description)
