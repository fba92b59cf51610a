"""Authentication — offline account store with sign-up, sign-in and sign-out.

Sign-in failures all surface the same message so a caller cannot tell a
wrong password from an unknown account; the real cause goes to the log.
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from slimelab.engine.game_state import User
from slimelab.engine.save import clear_local_slimes

logger = logging.getLogger(__name__)

GENERIC_SIGN_IN_ERROR = "Invalid email or password."
MIN_PASSWORD_LENGTH = 8

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# (predicate, requirement shown in the tooltip)
_PASSWORD_RULES = (
    (lambda p: len(p) >= MIN_PASSWORD_LENGTH, f"at least {MIN_PASSWORD_LENGTH} characters"),
    (lambda p: re.search(r"[a-z]", p) is not None, "a lowercase letter"),
    (lambda p: re.search(r"[A-Z]", p) is not None, "an uppercase letter"),
    (lambda p: re.search(r"\d", p) is not None, "a number"),
    (lambda p: re.search(r"[^A-Za-z0-9]", p) is not None, "a symbol"),
)


def is_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value or ""))


def validate_password(password: str) -> bool:
    return all(check(password) for check, _ in _PASSWORD_RULES)


def password_validation_message(password: str) -> str:
    """Tooltip listing the requirements ``password`` misses ("" when valid)."""
    missing = [label for check, label in _PASSWORD_RULES if not check(password)]
    if not missing:
        return ""
    return "Password must contain " + ", ".join(missing) + "."


@dataclass
class AuthResult:
    """Either a signed-in user or a message to show the player."""

    user: User | None = None
    error: str = ""
    tooltip: str = ""
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.user is not None and not self.error


@dataclass
class _Account:
    user: User
    password_hash: str


class OfflineAuth:
    """In-memory stand-in for the hosted auth backend."""

    def __init__(self) -> None:
        self._accounts: dict[str, _Account] = {}   # email -> account
        self.current_user: User | None = None

    def _email_for_username(self, username: str) -> str | None:
        """Profile lookup used to sign in with a username."""
        wanted = username.casefold()
        for email, account in self._accounts.items():
            if account.user.username.casefold() == wanted:
                return email
        return None

    def sign_up(self, username: str, email: str, password: str,
                confirm_password: str) -> AuthResult:
        if password != confirm_password:
            return AuthResult(error="Passwords do not match.")
        if not validate_password(password):
            return AuthResult(
                error="Password does not meet the security requirements.",
                tooltip=password_validation_message(password),
            )
        if not is_email(email):
            return AuthResult(error="Please enter a valid email address.")

        email = email.strip().lower()
        username = username.strip() or email.split("@")[0]
        if email in self._accounts:
            return AuthResult(error="An account with that email already exists.")
        if self._email_for_username(username) is not None:
            return AuthResult(error="That username is already taken.")

        user = User(id=str(uuid.uuid4()), email=email, username=username)
        self._accounts[email] = _Account(user=user, password_hash=generate_password_hash(password))
        logger.info("Account created for %s", username)
        return AuthResult(user=user, message="Sign-up complete! You can now sign in.")

    def sign_in(self, login: str, password: str) -> AuthResult:
        login = (login or "").strip()
        email = login.lower() if is_email(login) else self._email_for_username(login)
        account = self._accounts.get(email) if email else None

        if account is None:
            logger.warning("Sign-in failed: no account for %r", login)
            return AuthResult(error=GENERIC_SIGN_IN_ERROR)
        if not check_password_hash(account.password_hash, password):
            logger.warning("Sign-in failed: wrong password for %s", account.user.username)
            return AuthResult(error=GENERIC_SIGN_IN_ERROR)

        self.current_user = account.user
        logger.info("%s signed in", account.user.username)
        return AuthResult(user=account.user)

    def sign_out(self) -> None:
        if self.current_user is not None:
            logger.info("%s signed out", self.current_user.username)
        self.current_user = None
        clear_local_slimes()
