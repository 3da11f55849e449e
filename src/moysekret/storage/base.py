"""Capabilities the orchestrator needs from a storage backend.

The file-based stores in this package are the default; anything with these
methods can be passed to ``moysekret.utils.core`` instead.
"""
from typing import Protocol

from moysekret.utils.dataModels import KeyPair, Profile


class ProfileStore(Protocol):
    def exists(self, name: str) -> bool: ...

    def create(self, name: str, storage_dir: str) -> Profile: ...

    def read(self, name: str) -> Profile: ...


class KeyStore(Protocol):
    def exists(self, profile: Profile) -> bool: ...

    def create(self, profile: Profile, keypair: KeyPair) -> None: ...

    def read(self, profile: Profile) -> KeyPair: ...
