"""Admin auth views.

POST /api/admin/login/ exchanges staff credentials for a signed bearer token.
There is no logout endpoint: tokens are stateless and the client drops them.
"""

import logging

from django.contrib.auth.models import update_last_login
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import AdminBearerAuthentication
from .permissions import AllowedAnyLogin
from .serializers import AdminLoginSerializer
from .throttles import AdminLoginRateThrottle
from .tokens import issue_token

logger = logging.getLogger(__name__)


class AdminLoginView(APIView):
    """POST /api/admin/login/ -> validate credentials and return a bearer token."""

    authentication_classes = []
    permission_classes = [AllowedAnyLogin]
    throttle_classes = [AdminLoginRateThrottle]

    def get_authenticate_header(self, request):
        # failed logins answer 401, not 403
        return AdminBearerAuthentication.keyword

    def post(self, request, *args, **kwargs):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data["user"]
        update_last_login(None, user)
        logger.info("Admin %s logged in", user.email)
        data = {
            "token": issue_token(user),
            "email": user.email,
            "user_id": user.id,
        }
        return Response(data, status=status.HTTP_200_OK)
