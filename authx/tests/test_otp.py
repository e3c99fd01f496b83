from unittest import mock

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.supabase_client import OtpResult
from users.models import User

SUPABASE_ID = "5f0c3f0e-8f47-4d2b-9d0e-3f5d8b1c2a77"


class OtpSendTestCase(TestCase):

    def setUp(self):
        cache.clear()
        self.client = APIClient()

    @mock.patch("authx.views.send_otp")
    def test_send_normalises_phone(self, send):
        send.return_value = OtpResult(ok=True, phone="+351912345678")

        resp = self.client.post(reverse("otp-send"), {"phone": "+351 912 345 678"}, format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        send.assert_called_once_with("+351912345678")

    @mock.patch("authx.views.send_otp")
    def test_send_rejects_invalid_phone(self, send):
        resp = self.client.post(reverse("otp-send"), {"phone": "12"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        send.assert_not_called()

    @mock.patch("authx.views.send_otp")
    def test_send_reports_provider_error(self, send):
        send.return_value = OtpResult(ok=False, error="SMS provider down")
        resp = self.client.post(reverse("otp-send"), {"phone": "+351912345678"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["error"], "SMS provider down")


class OtpVerifyTestCase(TestCase):

    def setUp(self):
        cache.clear()
        self.client = APIClient()

    @mock.patch("authx.views.verify_otp")
    def test_verify_creates_user_and_returns_tokens(self, verify):
        verify.return_value = OtpResult(ok=True, supabase_id=SUPABASE_ID, phone="351912345678")

        resp = self.client.post(
            reverse("otp-verify"),
            {"phone": "+351912345678", "token": "123456"},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        data = resp.json()
        self.assertIn("access", data)
        self.assertIn("refresh", data)
        self.assertTrue(data["is_new_user"])

        user = User.objects.get(phone="+351912345678")
        self.assertEqual(str(user.supabase_id), SUPABASE_ID)
        self.assertEqual(data["user"]["id"], user.id)

        # the issued access token authenticates against /me/
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {data['access']}")
        me = self.client.get(reverse("auth-me"))
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.json()["phone"], "+351912345678")

    @mock.patch("authx.views.verify_otp")
    def test_verify_existing_user(self, verify):
        existing = User.objects.create_user(username="pat", password="x", phone="+351912345678", name="Pat")
        verify.return_value = OtpResult(ok=True, supabase_id=SUPABASE_ID, phone="+351912345678")

        resp = self.client.post(
            reverse("otp-verify"),
            {"phone": "+351912345678", "token": "654321"},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertFalse(resp.json()["is_new_user"])
        self.assertEqual(resp.json()["user"]["id"], existing.id)
        self.assertEqual(User.objects.count(), 1)

    @mock.patch("authx.views.verify_otp")
    def test_verify_wrong_code(self, verify):
        verify.return_value = OtpResult(ok=False, error="Token has expired or is invalid")
        resp = self.client.post(
            reverse("otp-verify"),
            {"phone": "+351912345678", "token": "000000"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.exists())

    @mock.patch("authx.views.verify_otp")
    def test_verify_code_format(self, verify):
        resp = self.client.post(
            reverse("otp-verify"),
            {"phone": "+351912345678", "token": "12ab"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        verify.assert_not_called()
