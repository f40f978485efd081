"""Custom authentication backends for the API."""
import logging

from rest_framework.request import Request
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken

logger = logging.getLogger("hr360")


class BearerJWTAuthentication(JWTAuthentication):
    """Stateless JWT auth reading only ``Authorization: Bearer <token>``.

    Signature and expiry are verified before the user lookup. A rejected
    token raises immediately (401); nothing falls back to another source.
    """

    def authenticate(self, request: Request):
        header = self.get_header(request)
        if header is None:
            return None
        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
            user = self.get_user(validated_token)
        except (InvalidToken, AuthenticationFailed) as exc:
            logger.warning(
                "Rejected bearer token on %s %s: %s",
                request.method,
                request.path,
                exc.detail.get("detail", exc.detail) if isinstance(exc.detail, dict) else exc.detail,
            )
            raise
        return user, validated_token
