from rest_framework import HTTP_HEADER_ENCODING
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.tokens import AccessToken


LEGACY_TOKEN_HEADER = 'HTTP_X_AUTH_TOKEN'


class HeaderJWTAuthentication(JWTStatelessUserAuthentication):
    """
    Stateless bearer-token authentication.

    The request identity is a TokenUser built from the token claims, so no
    database read happens here; a token stays valid until it expires even if
    its account has since been removed. Reads `Authorization: Bearer <token>`
    first and falls back to the legacy `x-auth-token` header, which is also
    used when the Authorization header carries some other scheme.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        raw_token = self.get_raw_token(header) if header is not None else None

        if raw_token is None:
            legacy_token = request.META.get(LEGACY_TOKEN_HEADER)
            if not legacy_token:
                return None
            raw_token = legacy_token.encode(HTTP_HEADER_ENCODING)

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token


def issue_token(user):
    """Signs an access token whose `user_id` claim identifies `user`."""
    return str(AccessToken.for_user(user))
