"""
Authentication Strategy

A credential verifier maps ``(username, password)`` to exactly one of
success, failure or error. The application installs one verifier in
``app.extensions['credential_verifier']`` and the login handler asks for it
through ``get_verifier``, so tests and alternative backends can swap it.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from blognova.models import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid username or password'
VERIFIER_KEY = 'credential_verifier'


class AuthStatus(enum.Enum):
    SUCCESS = 'success'
    FAILURE = 'failure'
    ERROR = 'error'


@dataclass(frozen=True)
class AuthResult:
    status: AuthStatus
    user: Optional[User] = None
    reason: Optional[str] = None
    cause: Optional[BaseException] = None

    @classmethod
    def success(cls, user):
        return cls(AuthStatus.SUCCESS, user=user)

    @classmethod
    def failure(cls, reason=INVALID_CREDENTIALS):
        return cls(AuthStatus.FAILURE, reason=reason)

    @classmethod
    def error(cls, cause):
        return cls(AuthStatus.ERROR, cause=cause)

    @property
    def ok(self):
        return self.status is AuthStatus.SUCCESS


def find_user_by_username(username):
    return User.query.filter_by(username=username).first()


class LocalStrategy:
    """Username/password verification against the user table.

    Unknown usernames and wrong passwords produce the same failure reason so
    the response cannot be used to probe which usernames exist.
    """

    name = 'local'

    def __init__(self, lookup=None):
        self.lookup = lookup or find_user_by_username

    def __call__(self, username: str, password: str) -> AuthResult:
        try:
            user = self.lookup(username)
            if user is None:
                return AuthResult.failure()
            if not user.check_password(password):
                return AuthResult.failure()
        except (SQLAlchemyError, ValueError) as e:
            logger.error('Credential verification failed for %r: %s', username, e)
            return AuthResult.error(e)
        return AuthResult.success(user)


def get_verifier():
    """Return the credential verifier installed on the current app."""
    return current_app.extensions[VERIFIER_KEY]
