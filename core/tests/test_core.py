import time
from unittest import mock

import jwt
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient, APIRequestFactory

from core.permissions import HasCronSecret
from core.supabase_auth import SupabaseJWTAuthentication
from users.models import User

JWT_SECRET = "test-supabase-jwt-secret-at-least-32-bytes"
SUPABASE_ID = "6a1f7c7e-3c53-4b0e-9e1a-2a4f5d6c7b8e"


def supabase_token(**claims):
    payload = {
        "sub": SUPABASE_ID,
        "phone": "351912345678",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(payload, JWT_SECRET, algorithm="HS256")


class HealthCheckTestCase(TestCase):

    def test_health(self):
        resp = APIClient().get(reverse("health-check"))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertTrue(resp.json()["db"])
        self.assertIn("latency_ms", resp.json())


class CronSecretTestCase(TestCase):

    def setUp(self):
        self.factory = APIRequestFactory()

    def check(self, header=None):
        kwargs = {"HTTP_AUTHORIZATION": header} if header else {}
        request = self.factory.get("/api/cron/recurring/", **kwargs)
        return HasCronSecret().has_permission(request, view=None)

    @override_settings(CRON_SECRET="s3cret")
    def test_secret(self):
        self.assertTrue(self.check("Bearer s3cret"))
        self.assertFalse(self.check("Bearer nope"))
        self.assertFalse(self.check("s3cret"))
        self.assertFalse(self.check())

    @override_settings(CRON_SECRET="")
    def test_unconfigured_secret_denies(self):
        self.assertFalse(self.check("Bearer "))


@override_settings(SUPABASE_JWT_SECRET=JWT_SECRET)
class SupabaseAuthTestCase(TestCase):

    def test_supabase_token_maps_to_local_user(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {supabase_token()}")

        resp = client.get(reverse("user-me"))

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        self.assertEqual(resp.json()["phone"], "+351912345678")
        user = User.objects.get(phone="+351912345678")
        self.assertEqual(str(user.supabase_id), SUPABASE_ID)

    def test_foreign_token_is_left_to_other_backends(self):
        request = APIRequestFactory().get(
            "/", HTTP_AUTHORIZATION=f"Bearer {jwt.encode({'sub': 'x'}, 'another-project-jwt-secret-0123456789', algorithm='HS256')}"
        )
        self.assertIsNone(SupabaseJWTAuthentication().authenticate(request))

    def test_expired_token(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {supabase_token(exp=int(time.time()) - 10)}")
        resp = client.get(reverse("user-me"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_missing_phone_claim(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {supabase_token(phone=None)}")
        resp = client.get(reverse("user-me"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(User.objects.exists())


class ExceptionHandlerTestCase(TestCase):

    def test_errors_are_wrapped(self):
        resp = APIClient().get(reverse("user-me"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
        body = resp.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["status_code"], 401)
        self.assertIn("detail", body["errors"])
        self.assertEqual(resp["WWW-Authenticate"], "Bearer")

    @mock.patch("users.views.get_user_stats", side_effect=RuntimeError("boom"))
    def test_unhandled_error_is_500(self, stats):
        client = APIClient(raise_request_exception=False)
        client.force_authenticate(user=User.objects.create_user(username="u", password="p"))
        with self.assertLogs("padel.api", level="ERROR"):
            resp = client.get(reverse("user-stats"))
        self.assertEqual(resp.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(resp.json()["errors"], {"detail": "Internal server error."})
