"""Bearer token authentication for the admin API."""

from django.contrib.auth import get_user_model
from django.core import signing
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from .tokens import read_token

User = get_user_model()

INVALID_TOKEN_MESSAGE = "رمز غير صالح"


class AdminBearerAuthentication(BaseAuthentication):
    """Authenticate ``Authorization: Bearer <token>`` against active staff users.

    Requests without a bearer header stay anonymous; the permission layer then
    answers 401 because ``authenticate_header`` is set.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        try:
            token = auth[1].decode()
        except UnicodeError:
            raise AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        return self.authenticate_credentials(token)

    def authenticate_credentials(self, token: str):
        try:
            payload = read_token(token)
        except signing.BadSignature:
            raise AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        try:
            user = User.objects.get(pk=payload.get("id"), is_active=True, is_staff=True)
        except User.DoesNotExist:
            raise AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        return (user, token)

    def authenticate_header(self, request):
        return self.keyword
