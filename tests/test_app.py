"""Tests for the TUI session setup."""

import getpass

from slimelab.app import local_user


def test_local_user_named_after_login(monkeypatch):
    monkeypatch.setattr(getpass, "getuser", lambda: "crok")
    user = local_user()
    assert user.id == "local-crok"
    assert user.email == "crok@slimes.lab"
    assert user.username == "crok"


def test_local_user_without_login_name(monkeypatch):
    def no_login():
        raise OSError("No username set in the environment")

    monkeypatch.setattr(getpass, "getuser", no_login)
    user = local_user()
    assert user.username == "scientist"
    assert user.email == "scientist@slimes.lab"
