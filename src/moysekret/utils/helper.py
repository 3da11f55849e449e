import logging

from pathlib import Path

from moysekret.utils.dataModels import ENVELOPE_EXTENSION, Profile
from moysekret.utils.errors import (
    AlreadyEncrypted,
    InvalidProfileName,
    NotAnEnvelope,
    PathExpansionFailed,
    StorageCreationFailed,
)

logger = logging.getLogger(__name__)


def validate_profile_name(name: str) -> str:
    if not name or name in (".", "..") or "/" in name or "\\" in name or "\0" in name:
        raise InvalidProfileName(f"Invalid profile name: {name!r}")
    return name


def is_envelope_name(file_path: str | Path) -> bool:
    name = Path(file_path).name
    return name.endswith(ENVELOPE_EXTENSION) and len(name) > len(ENVELOPE_EXTENSION)


def ensure_not_encrypted(file_path: str | Path) -> None:
    if Path(file_path).name.endswith(ENVELOPE_EXTENSION):
        raise AlreadyEncrypted(
            "Encryption failed because source file was already encrypted by this program (.cz)"
        )


def encrypted_file_path(profile: Profile, file_path: str | Path) -> Path:
    """``foo/bar.txt`` -> ``<storage>/bar.txt.cz``; the source directory is dropped."""
    ensure_not_encrypted(file_path)
    return Path(profile.storage) / f"{Path(file_path).name}{ENVELOPE_EXTENSION}"


def decrypted_file_path(file_path: str | Path, dest_dir: str | Path) -> Path:
    """``D/bar.tar.gz.cz`` -> ``<dest_dir>/bar.tar.gz``."""
    if not is_envelope_name(file_path):
        raise NotAnEnvelope(
            "Decryption failed because source file was not made by this program (.cz)"
        )
    name = Path(file_path).name
    return Path(dest_dir) / name[: -len(ENVELOPE_EXTENSION)]


def file_exists(file_path: str | Path) -> bool:
    return Path(file_path).is_file()


def create_dir_if_not_exists(directory: str | Path) -> None:
    """Raises OSError; callers decide which error kind it becomes."""
    path = Path(directory)
    if path.is_dir():
        return
    logger.debug("Creating directory %s", path)
    path.mkdir(parents=True, exist_ok=True)


def create_storage_dir(storage_dir: str | Path) -> None:
    try:
        create_dir_if_not_exists(storage_dir)
    except OSError as exc:
        raise StorageCreationFailed("Could not create storage directory") from exc


def expand_storage_dir(storage_dir: str | Path) -> str:
    try:
        return str(Path(storage_dir).resolve(strict=True))
    except (OSError, RuntimeError) as exc:
        raise PathExpansionFailed("Could not expand storage directory") from exc
