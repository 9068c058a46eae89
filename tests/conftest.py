import os

import pytest

from rangekit import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from real config files and RANGEKIT_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("RANGEKIT_"):
            monkeypatch.delenv(key)

    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def strict_access():
    """Make front()/back() on empty ranges raise."""
    config_module.get_config().strict_access = True


@pytest.fixture
def letters():
    return ["a", "b", "c", "d"]
