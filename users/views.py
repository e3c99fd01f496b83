# users/views.py - profile API

import logging

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.supabase_client import upload_avatar
from matches.analytics import get_user_stats
from .serializers import (
    AvatarUploadSerializer,
    PublicUserSerializer,
    UpdateProfileSerializer,
    UserSerializer,
)

logger = logging.getLogger("padel.users")

User = get_user_model()


class MeView(APIView):
    """
    GET   /api/users/me/
    PATCH /api/users/me/   {"name": "...", "avatar_url": "..."}
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def patch(self, request):
        serializer = UpdateProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(UserSerializer(request.user).data)


class AvatarUploadView(APIView):
    """
    POST /api/users/me/avatar/  (multipart, field "avatar")

    Stores the image in the Supabase avatars bucket and saves the public URL
    on the profile.
    """
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        serializer = AvatarUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        avatar = serializer.validated_data["avatar"]
        extension = AvatarUploadSerializer.CONTENT_TYPES[avatar.content_type]

        public_url = upload_avatar(
            request.user.id,
            avatar.read(),
            avatar.content_type,
            extension,
        )
        if not public_url:
            return Response(
                {"error": "Failed to upload avatar"},
                status=status.HTTP_502_BAD_GATEWAY,
            )

        request.user.avatar_url = public_url
        request.user.save(update_fields=["avatar_url", "updated_at"])
        logger.info("Avatar updated for user %s", request.user.id)

        return Response(UserSerializer(request.user).data)


class UserStatsView(APIView):
    """GET /api/users/me/stats/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_user_stats(request.user))


class PublicProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        user = User.objects.filter(pk=user_id, is_active=True).first()
        if not user:
            return Response({"error": "User not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(PublicUserSerializer(user).data)
