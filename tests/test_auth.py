"""Tests for the offline authentication adapter."""

from slimelab.engine import save
from slimelab.engine.auth import (
    GENERIC_SIGN_IN_ERROR,
    OfflineAuth,
    is_email,
    password_validation_message,
    validate_password,
)
from slimelab.engine.save import save_local_slimes

GOOD_PASSWORD = "Slime#Lab42"


def _auth_with_account():
    auth = OfflineAuth()
    result = auth.sign_up("drcrok", "crok@slimes.lab", GOOD_PASSWORD, GOOD_PASSWORD)
    assert result.ok
    return auth


def test_is_email():
    assert is_email("a@b.io")
    assert not is_email("drcrok")
    assert not is_email("a b@c.io")
    assert not is_email("")


def test_password_rules():
    assert validate_password(GOOD_PASSWORD)
    assert not validate_password("short1!")
    assert password_validation_message(GOOD_PASSWORD) == ""
    msg = password_validation_message("abcdefgh")
    assert "an uppercase letter" in msg
    assert "a number" in msg
    assert "a symbol" in msg
    assert "lowercase" not in msg


def test_sign_up_password_mismatch():
    result = OfflineAuth().sign_up("x", "x@slimes.lab", GOOD_PASSWORD, GOOD_PASSWORD + "!")
    assert not result.ok
    assert result.error == "Passwords do not match."


def test_sign_up_weak_password():
    result = OfflineAuth().sign_up("x", "x@slimes.lab", "weak", "weak")
    assert not result.ok
    assert "security requirements" in result.error
    assert "at least 8 characters" in result.tooltip


def test_sign_up_rejects_duplicates():
    auth = _auth_with_account()
    dup_email = auth.sign_up("other", "CROK@slimes.lab", GOOD_PASSWORD, GOOD_PASSWORD)
    dup_name = auth.sign_up("DrCrok", "new@slimes.lab", GOOD_PASSWORD, GOOD_PASSWORD)
    assert "email" in dup_email.error
    assert "username" in dup_name.error


def test_sign_in_with_email_or_username():
    auth = _auth_with_account()
    by_email = auth.sign_in("crok@slimes.lab", GOOD_PASSWORD)
    by_name = auth.sign_in("drcrok", GOOD_PASSWORD)
    assert by_email.ok and by_name.ok
    assert by_email.user.id == by_name.user.id
    assert auth.current_user == by_name.user


def test_sign_in_failures_share_one_message():
    auth = _auth_with_account()
    wrong_password = auth.sign_in("crok@slimes.lab", "Wrong#Pass1")
    unknown_email = auth.sign_in("ghost@slimes.lab", GOOD_PASSWORD)
    unknown_name = auth.sign_in("ghost", GOOD_PASSWORD)
    for result in (wrong_password, unknown_email, unknown_name):
        assert not result.ok
        assert result.error == GENERIC_SIGN_IN_ERROR
    assert auth.current_user is None


def test_sign_out_clears_snapshot(state):
    auth = _auth_with_account()
    auth.sign_in("drcrok", GOOD_PASSWORD)
    save_local_slimes(state)
    slot = save.SAVE_DIR / "slimes_in_flask.json"
    assert slot.exists()

    auth.sign_out()
    assert auth.current_user is None
    assert not slot.exists()
