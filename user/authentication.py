import logging

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed

from .tokens import TOKEN_VERSION_CLAIM

logger = logging.getLogger(__name__)


class VersionedJWTAuthentication(JWTAuthentication):
    """
    Bearer JWT authentication that also rejects tokens issued before the
    user's last logout / token refresh.
    """

    def get_user(self, validated_token):
        user = super().get_user(validated_token)

        if validated_token.get(TOKEN_VERSION_CLAIM) != user.token_version:
            logger.warning("Revoked token presented for user %s", user.pk)
            raise AuthenticationFailed("Token has been revoked", code="token_revoked")

        return user
