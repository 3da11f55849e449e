import logging

from pathlib import Path

from moysekret.crypto.box import open_envelope, seal
from moysekret.crypto.keygen import generate_keypair
from moysekret.storage.base import KeyStore, ProfileStore
from moysekret.storage.envelope import load_envelope, save_envelope
from moysekret.storage.keystore import FileKeyStore
from moysekret.storage.profile import FileProfileStore
from moysekret.utils.dataModels import DEFAULT_DEST_DIR, Profile
from moysekret.utils.errors import AlreadyExists, NotFound, PersistenceError, SekretError
from moysekret.utils.helper import (
    create_dir_if_not_exists,
    create_storage_dir,
    decrypted_file_path,
    encrypted_file_path,
    ensure_not_encrypted,
    expand_storage_dir,
    file_exists,
    validate_profile_name,
)

logger = logging.getLogger(__name__)


def profile_exists(profile_name: str, profiles: ProfileStore | None = None) -> bool:
    profiles = profiles or FileProfileStore()
    return profiles.exists(profile_name)


def keypair_exists(profile: Profile, keys: KeyStore | None = None) -> bool:
    keys = keys or FileKeyStore()
    return keys.exists(profile)


def init(
    profile_name: str,
    storage_dir: str,
    should_override: bool = False,
    profiles: ProfileStore | None = None,
    keys: KeyStore | None = None,
) -> Profile:
    profiles = profiles or FileProfileStore()
    keys = keys or FileKeyStore()

    validate_profile_name(profile_name)

    if not should_override and profiles.exists(profile_name):
        raise AlreadyExists("Initialization failed because profile already exists")

    try:
        create_storage_dir(storage_dir)
    except SekretError as exc:
        raise exc.rewrap("Initialization failed while creating storage for files") from exc

    abs_storage_dir = expand_storage_dir(storage_dir)

    try:
        profile = profiles.create(profile_name, abs_storage_dir)
    except SekretError as exc:
        raise exc.rewrap("Initialization failed while creating profile") from exc

    try:
        keys.create(profile, generate_keypair())
    except SekretError as exc:
        raise exc.rewrap("Initialization failed while creating key pair") from exc

    logger.info("Initialized profile %s at %s", profile_name, abs_storage_dir)
    return profile


def encrypt(
    profile_name: str,
    file_path: str,
    should_override: bool = False,
    profiles: ProfileStore | None = None,
    keys: KeyStore | None = None,
) -> Path:
    profiles = profiles or FileProfileStore()
    keys = keys or FileKeyStore()

    ensure_not_encrypted(file_path)

    if not file_exists(file_path):
        raise NotFound("Encryption failed because source file does not exists")

    try:
        profile = profiles.read(profile_name)
    except SekretError as exc:
        raise exc.rewrap("Encryption failed while reading user profile") from exc

    target = encrypted_file_path(profile, file_path)
    if not should_override and file_exists(target):
        raise AlreadyExists("Encryption failed because target file already exists")

    try:
        keypair = keys.read(profile)
        try:
            plain_content = Path(file_path).read_bytes()
        except OSError as exc:
            raise PersistenceError("Could not read file to encrypt") from exc
        save_envelope(target, seal(plain_content, keypair))
    except SekretError as exc:
        raise exc.rewrap("Encryption failed while doing actual encryption") from exc

    logger.info("Encrypted %s -> %s", file_path, target)
    return target


def decrypt(
    profile_name: str,
    file_path: str,
    dest_dir: str = DEFAULT_DEST_DIR,
    should_override: bool = False,
    profiles: ProfileStore | None = None,
    keys: KeyStore | None = None,
) -> Path:
    profiles = profiles or FileProfileStore()
    keys = keys or FileKeyStore()

    target = decrypted_file_path(file_path, dest_dir)

    if not file_exists(file_path):
        raise NotFound("Decryption failed because source file does not exists")

    if not should_override and file_exists(target):
        raise AlreadyExists("Decryption failed because target file already exists")

    try:
        profile = profiles.read(profile_name)
    except SekretError as exc:
        raise exc.rewrap("Decryption failed while reading user profile") from exc

    try:
        keypair = keys.read(profile)
        plain_data = open_envelope(load_envelope(Path(file_path)), keypair)
        try:
            create_dir_if_not_exists(target.parent)
            target.write_bytes(plain_data)
        except OSError as exc:
            raise PersistenceError("Could not save decrypted file") from exc
    except SekretError as exc:
        raise exc.rewrap("Decryption failed while doing actual decryption") from exc

    logger.info("Decrypted %s -> %s", file_path, target)
    return target
