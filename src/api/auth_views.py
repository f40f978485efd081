"""Authentication API views issuing bearer JWTs."""

import logging

from django.core.exceptions import ImproperlyConfigured
from rest_framework import permissions, status
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from accounts.services import register_user
from api.v1.serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
)

logger = logging.getLogger("hr360")


class SafeScopedRateThrottle(ScopedRateThrottle):
    """Scoped throttle that falls back to a strict default if scope config is missing."""

    def get_rate(self):
        try:
            return super().get_rate()
        except ImproperlyConfigured:
            logger.warning("Throttle scope '%s' not configured, applying strict default 5/min.", self.scope)
            return "5/min"


def _token_pair(user) -> dict:
    refresh = LoginSerializer.get_token(user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}


class LoginAPIView(TokenObtainPairView):
    """POST /api/v1/auth/login/ - email/password to ``{access, refresh, user}``."""

    serializer_class = LoginSerializer
    throttle_classes = [SafeScopedRateThrottle]
    throttle_scope = "auth_burst"
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        try:
            response = super().post(request, *args, **kwargs)
        except AuthenticationFailed:
            logger.warning("Failed login for %s", request.data.get("email", ""))
            raise
        logger.info("Login: %s", response.data["user"]["id"])
        return response


class RefreshAPIView(TokenRefreshView):
    """POST /api/v1/auth/token/refresh/"""

    throttle_classes = [SafeScopedRateThrottle]
    throttle_scope = "auth_sustained"
    permission_classes = [permissions.AllowAny]


class RegisterAPIView(APIView):
    """POST /api/v1/auth/register/ - self-service staff sign-up."""

    permission_classes = [permissions.AllowAny]
    throttle_classes = [SafeScopedRateThrottle]
    throttle_scope = "auth_burst"

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = register_user(**serializer.validated_data)
        payload = {
            "message": "Account created successfully",
            "user": UserSerializer(user).data,
            **_token_pair(user),
        }
        return Response(payload, status=status.HTTP_201_CREATED)


class LogoutAPIView(APIView):
    """Blacklist the caller's refresh token."""

    def post(self, request):
        raw = request.data.get("refresh")
        if not raw:
            raise ValidationError({"refresh": "This field is required."})
        try:
            RefreshToken(raw).blacklist()
        except TokenError as exc:
            raise ValidationError({"refresh": str(exc)})
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeAPIView(APIView):
    """GET /api/v1/auth/me/ - the authenticated account."""

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class ChangePasswordAPIView(APIView):
    """POST /api/v1/auth/password/change/"""

    def post(self, request):
        serializer = ChangePasswordSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        request.user.set_password(serializer.validated_data["new_password"])
        request.user.save(update_fields=["password"])
        logger.info("Password changed: %s", request.user.pk)
        return Response({"message": "Password changed successfully."})
