import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from core.supabase_client import send_otp, verify_otp
from users.serializers import UserSerializer
from users.services import get_or_create_user_for_phone

from .serializers import OtpSendSerializer, OtpVerifySerializer

logger = logging.getLogger("padel.auth")


class OtpSendView(APIView):
    # allow unauthenticated
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_scope = "otp-send"

    def post(self, request):
        serializer = OtpSendSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        phone = serializer.validated_data["phone"]

        result = send_otp(phone)
        if not result.ok:
            return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"message": "Verification code sent", "phone": phone})


class OtpVerifyView(APIView):
    """
    POST /api/auth/otp/verify/  {"phone": "+351...", "token": "123456"}

    Verifies the code with Supabase, makes sure a local user exists for the
    phone and returns a SimpleJWT pair for it.
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_scope = "otp-verify"

    def post(self, request):
        serializer = OtpVerifySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        phone = serializer.validated_data["phone"]

        result = verify_otp(phone, serializer.validated_data["token"])
        if not result.ok:
            return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

        user = get_or_create_user_for_phone(result.phone or phone, supabase_id=result.supabase_id)
        if not user.is_active:
            return Response({"error": "Account is disabled"}, status=status.HTTP_403_FORBIDDEN)

        refresh = RefreshToken.for_user(user)
        logger.info("Phone login for user %s", user.id)

        return Response(
            {
                "access": str(refresh.access_token),
                "refresh": str(refresh),
                "user": UserSerializer(user).data,
                "is_new_user": not user.name,
            },
            status=status.HTTP_200_OK,
        )


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
