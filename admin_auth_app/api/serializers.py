"""Admin auth serializers.

Login is by e-mail and password; only active staff users can obtain a token.
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

User = get_user_model()

MISSING_CREDENTIALS_MESSAGE = "البريد وكلمة المرور مطلوبان"
INVALID_CREDENTIALS_MESSAGE = "بيانات غير صحيحة"

_required = {
    "required": MISSING_CREDENTIALS_MESSAGE,
    "blank": MISSING_CREDENTIALS_MESSAGE,
    "null": MISSING_CREDENTIALS_MESSAGE,
}


class AdminLoginSerializer(serializers.Serializer):
    """Check e-mail/password of a staff user and attach the user to validated data."""

    email = serializers.CharField(error_messages=_required)
    password = serializers.CharField(write_only=True, trim_whitespace=False, error_messages=_required)

    def validate(self, attrs):
        user = (
            User.objects.filter(email__iexact=attrs["email"], is_staff=True, is_active=True)
            .order_by("id")
            .first()
        )
        if user is None or not user.check_password(attrs["password"]):
            logger.warning("Failed admin login for %s", attrs["email"])
            raise AuthenticationFailed(INVALID_CREDENTIALS_MESSAGE)
        attrs["user"] = user
        return attrs
