# core/supabase_auth.py
# Custom DRF authentication class to verify Supabase JWTs

import logging
import jwt
from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from users.services import get_or_create_user_for_phone

logger = logging.getLogger("padel")


class SupabaseJWTAuthentication(BaseAuthentication):
    """
    Custom authentication class that validates Supabase JWTs.

    This authenticator:
    1. Extracts the JWT from the Authorization header
    2. Verifies the token signature using the Supabase JWT secret
    3. Looks up or creates a Django user from the phone claim
    """

    def authenticate(self, request):
        auth_header = request.headers.get("Authorization", "")

        if not auth_header.startswith("Bearer "):
            return None  # Let other auth backends handle it

        token = auth_header.split(" ")[1]

        supabase_jwt_secret = settings.SUPABASE_JWT_SECRET
        if not supabase_jwt_secret:
            return None

        try:
            # Supabase uses HS256 by default
            payload = jwt.decode(
                token,
                supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid Supabase token: {e}")
            return None  # Let other auth backends try (SimpleJWT tokens land here)

        supabase_user_id = payload.get("sub")
        phone = payload.get("phone")

        if not supabase_user_id:
            raise AuthenticationFailed("Invalid token: missing user ID")
        if not phone:
            raise AuthenticationFailed("Token missing phone claim")

        user = get_or_create_user_for_phone(phone, supabase_id=supabase_user_id)
        return (user, payload)

    def authenticate_header(self, request):
        return "Bearer"
