import pytest

from moysekret.utils import core
from moysekret.utils.dataModels import PROFILE_HOME_ENV

PROFILE = "int_tester"


@pytest.fixture(autouse=True)
def sekret_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv(PROFILE_HOME_ENV, str(home))
    return home


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "vault"


@pytest.fixture
def profile(storage_dir):
    return core.init(PROFILE, str(storage_dir))


@pytest.fixture
def plain_file(tmp_path):
    src = tmp_path / "docs" / "notes.txt"
    src.parent.mkdir()
    src.write_bytes(b"dear diary, nothing happened today\n")
    return src
