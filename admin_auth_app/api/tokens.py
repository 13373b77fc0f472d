"""Stateless admin bearer tokens.

A token is the signed JSON payload ``{"id", "email"}`` plus a timestamp. Nothing
is stored server-side, so a token stays valid until it expires
(``settings.ADMIN_TOKEN_MAX_AGE``); logging out only means the client forgets it.
"""

from django.conf import settings
from django.core import signing

TOKEN_SALT = "admin_auth_app.token"


def _signer() -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=TOKEN_SALT)


def issue_token(user) -> str:
    """Sign a fresh token for an admin user."""
    return _signer().sign_object({"id": user.pk, "email": user.email})


def read_token(token: str) -> dict:
    """Return the token payload.

    Raises ``signing.BadSignature`` for tampered or malformed tokens and its
    subclass ``signing.SignatureExpired`` once the max age has passed.
    """
    return _signer().unsign_object(token, max_age=settings.ADMIN_TOKEN_MAX_AGE)
