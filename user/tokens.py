# user/tokens.py
from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken

TOKEN_TYPE = "Bearer"
TOKEN_VERSION_CLAIM = "ver"


def issue_access_token(user):
    """
    Create a bearer access token for ``user`` stamped with its current
    token version. Returns the payload shared by login and refresh.
    """
    token = AccessToken.for_user(user)
    token[TOKEN_VERSION_CLAIM] = user.token_version
    return {
        "token": str(token),
        "token_type": TOKEN_TYPE,
        "expires_in": int(settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
    }
