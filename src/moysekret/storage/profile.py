import json
import logging
import os

from pathlib import Path

from moysekret.utils.dataModels import PROFILE_FILE_FMT, PROFILE_HOME_ENV, Profile
from moysekret.utils.errors import Corrupt, NotFound, PersistenceError
from moysekret.utils.helper import validate_profile_name

logger = logging.getLogger(__name__)


def profile_home() -> Path:
    configured = os.environ.get(PROFILE_HOME_ENV)
    if configured:
        return Path(configured)
    return Path.home()


class FileProfileStore:
    """One JSON record per profile, ``<home>/.moy-sekret.<name>.json``.

    ``home`` defaults to ``$MOY_SEKRET_HOME`` or the user's home directory,
    looked up on every call so the environment can change between operations.
    """

    def __init__(self, home: str | Path | None = None):
        self.home = Path(home) if home is not None else None

    def path_for(self, name: str) -> Path:
        validate_profile_name(name)
        home = self.home if self.home is not None else profile_home()
        return home / PROFILE_FILE_FMT.format(name=name)

    def exists(self, name: str) -> bool:
        try:
            self.read(name)
        except (NotFound, Corrupt, PersistenceError):
            return False
        return True

    def create(self, name: str, storage_dir: str) -> Profile:
        profile = Profile(name=name, storage=storage_dir)
        path = self.path_for(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(profile.to_dict(), indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError("Could not save profile") from exc
        logger.info("Saved profile %s -> %s", name, storage_dir)
        return profile

    def read(self, name: str) -> Profile:
        path = self.path_for(name)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFound("Could not read profile") from exc
        except OSError as exc:
            raise PersistenceError("Could not read profile") from exc
        try:
            obj = json.loads(content)
        except ValueError as exc:
            raise Corrupt("Could not parse profile file") from exc
        if not isinstance(obj, dict) or not isinstance(obj.get("name"), str) or not isinstance(obj.get("storage"), str):
            raise Corrupt("Could not parse profile file: expected string fields 'name' and 'storage'")
        return Profile(name=obj["name"], storage=obj["storage"])
