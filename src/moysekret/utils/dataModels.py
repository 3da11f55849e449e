import struct

from dataclasses import dataclass

KEY_SIZE = 32
NONCE_SIZE = 24

ENVELOPE_EXTENSION = ".cz"
# nonce length (u64), nonce(24), ciphertext length (u64); little-endian, no padding
ENVELOPE_HDR_FMT = "<Q24sQ"
ENVELOPE_HDR_SIZE = struct.calcsize(ENVELOPE_HDR_FMT)

PUBLIC_KEY_SUFFIX = "pk"
SECRET_KEY_SUFFIX = "sk"
SECRET_KEY_MODE = 0o600

PROFILE_HOME_ENV = "MOY_SEKRET_HOME"
PROFILE_FILE_FMT = ".moy-sekret.{name}.json"

DEFAULT_DEST_DIR = "."


@dataclass(frozen=True)
class Profile:
    name: str
    storage: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "storage": self.storage}


@dataclass(frozen=True)
class KeyPair:
    public_key: bytes
    secret_key: bytes

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()}, secret_key=<hidden>)"


@dataclass(frozen=True)
class Envelope:
    nonce: bytes
    ciphertext: bytes
