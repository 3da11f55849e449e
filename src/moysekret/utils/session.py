import threading

from pathlib import Path

from moysekret.storage.base import ProfileStore
from moysekret.storage.keystore import CachedKeyStore
from moysekret.storage.profile import FileProfileStore
from moysekret.utils import core
from moysekret.utils.dataModels import DEFAULT_DEST_DIR, Profile


class Session:
    """Long-lived entry point for embedding the core in a multi-threaded process.

    Every operation holds its profile's lock for its whole duration, so key
    pair creation and writes into a profile's storage directory never overlap.
    Key pairs are cached between calls and dropped when the profile is
    re-initialized.
    """

    def __init__(self, profiles: ProfileStore | None = None, keys=None):
        self.profiles = profiles or FileProfileStore()
        self.keys = keys if isinstance(keys, CachedKeyStore) else CachedKeyStore(keys)
        self._locks: dict[str, threading.Lock] = {}
        self._global_lock = threading.Lock()

    def _get_profile_lock(self, profile_name: str) -> threading.Lock:
        with self._global_lock:
            if profile_name not in self._locks:
                self._locks[profile_name] = threading.Lock()
            return self._locks[profile_name]

    def init(self, profile_name: str, storage_dir: str, should_override: bool = False) -> Profile:
        with self._get_profile_lock(profile_name):
            return core.init(profile_name, storage_dir, should_override, profiles=self.profiles, keys=self.keys)

    def encrypt(self, profile_name: str, file_path: str, should_override: bool = False) -> Path:
        with self._get_profile_lock(profile_name):
            return core.encrypt(profile_name, file_path, should_override, profiles=self.profiles, keys=self.keys)

    def decrypt(
        self,
        profile_name: str,
        file_path: str,
        dest_dir: str = DEFAULT_DEST_DIR,
        should_override: bool = False,
    ) -> Path:
        with self._get_profile_lock(profile_name):
            return core.decrypt(
                profile_name, file_path, dest_dir, should_override, profiles=self.profiles, keys=self.keys
            )
