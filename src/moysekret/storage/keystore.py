import base64
import binascii
import logging
import os
import threading

from pathlib import Path

from moysekret.utils.dataModels import (
    KEY_SIZE,
    PUBLIC_KEY_SUFFIX,
    SECRET_KEY_MODE,
    SECRET_KEY_SUFFIX,
    KeyPair,
    Profile,
)
from moysekret.utils.errors import DecodeError, NotFound, PersistenceError

logger = logging.getLogger(__name__)


def key_file_path(profile: Profile, suffix: str) -> Path:
    return Path(profile.storage) / f"{profile.name}.{suffix}"


def save_key(key: bytes, path: Path, mode: int | None = None) -> None:
    """With ``mode`` the file never exists with wider permissions, even when overwritten."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666 if mode is None else mode)
        with os.fdopen(fd, "w") as f:
            if mode is not None:
                os.fchmod(f.fileno(), mode)
            f.write(base64.b64encode(key).decode("ascii"))
    except OSError as exc:
        raise PersistenceError("Could not write key file") from exc


def read_key(path: Path) -> bytes:
    try:
        raw_base64 = path.read_text()
    except FileNotFoundError as exc:
        raise NotFound("Could not read key file") from exc
    except OSError as exc:
        raise PersistenceError("Could not read key file") from exc
    try:
        return base64.b64decode(raw_base64.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("Could not decode key file") from exc


class FileKeyStore:
    """Key halves as base64 text in ``<storage>/<name>.pk`` and ``<storage>/<name>.sk``."""

    def exists(self, profile: Profile) -> bool:
        return all(key_file_path(profile, s).is_file() for s in (PUBLIC_KEY_SUFFIX, SECRET_KEY_SUFFIX))

    def incomplete(self, profile: Profile) -> bool:
        present = [key_file_path(profile, s).is_file() for s in (PUBLIC_KEY_SUFFIX, SECRET_KEY_SUFFIX)]
        return any(present) and not all(present)

    def create(self, profile: Profile, keypair: KeyPair) -> None:
        # Public key first; a failed secret key write leaves an incomplete pair on disk.
        try:
            save_key(keypair.public_key, key_file_path(profile, PUBLIC_KEY_SUFFIX))
        except PersistenceError as exc:
            raise exc.rewrap("Could not save public key file") from exc
        try:
            save_key(keypair.secret_key, key_file_path(profile, SECRET_KEY_SUFFIX), SECRET_KEY_MODE)
        except PersistenceError as exc:
            raise exc.rewrap("Could not save secret key file") from exc
        logger.info("Saved key pair for profile %s in %s", profile.name, profile.storage)

    def read(self, profile: Profile) -> KeyPair:
        public_key = self._read_half(profile, PUBLIC_KEY_SUFFIX, "public")
        secret_key = self._read_half(profile, SECRET_KEY_SUFFIX, "secret")
        return KeyPair(public_key=public_key, secret_key=secret_key)

    def _read_half(self, profile: Profile, suffix: str, label: str) -> bytes:
        try:
            raw = read_key(key_file_path(profile, suffix))
        except (NotFound, PersistenceError, DecodeError) as exc:
            raise exc.rewrap(f"Could not read {label} key") from exc
        if len(raw) != KEY_SIZE:
            raise DecodeError(f"Could not decode {label} key: expected {KEY_SIZE} bytes, got {len(raw)}")
        return raw


class CachedKeyStore:
    """Wraps another key store and keeps pairs in memory for a long-lived session."""

    def __init__(self, inner=None):
        self.inner = inner if inner is not None else FileKeyStore()
        self._cache: dict[tuple[str, str], KeyPair] = {}
        self._lock = threading.Lock()

    def exists(self, profile: Profile) -> bool:
        return self.inner.exists(profile)

    def create(self, profile: Profile, keypair: KeyPair) -> None:
        with self._lock:
            self._cache.pop((profile.storage, profile.name), None)
        self.inner.create(profile, keypair)

    def read(self, profile: Profile) -> KeyPair:
        cache_key = (profile.storage, profile.name)
        with self._lock:
            cached = self._cache.get(cache_key)
        if cached is not None:
            return cached
        keypair = self.inner.read(profile)
        with self._lock:
            self._cache[cache_key] = keypair
        return keypair

    def invalidate(self, profile: Profile | None = None) -> None:
        with self._lock:
            if profile is None:
                self._cache.clear()
            else:
                self._cache.pop((profile.storage, profile.name), None)
