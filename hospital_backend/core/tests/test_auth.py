from __future__ import annotations

from django.test import TestCase

from rest_framework.test import APIClient

from hospital_backend.core.models import Role, User


class AuthAPITest(TestCase):
    """Tests for /api/auth/ endpoints (JWT login, refresh, me)."""

    databases = {"default"}

    def setUp(self):
        self.role_nurse, _ = Role.objects.using("default").get_or_create(
            name="nurse",
            defaults={"label": "Nurse"},
        )
        self.user = User.objects.db_manager("default").create_user(
            username="nurse_auth_test",
            email="nurse_auth@example.com",
            password="DummyPass123!",
            role=self.role_nurse,
        )
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _login(self, password="DummyPass123!"):
        return self.client.post(
            "/api/auth/login/",
            {"username": "nurse_auth_test", "password": password},
            format="json",
        )

    def test_login_returns_tokens_and_role(self):
        response = self._login()

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIn("access", data)
        self.assertIn("refresh", data)
        self.assertEqual(data["user"]["username"], "nurse_auth_test")
        self.assertEqual(data["user"]["role"]["name"], "nurse")

    def test_login_with_wrong_password(self):
        response = self._login(password="wrong")
        self.assertEqual(response.status_code, 400)

    def test_refresh_returns_new_access_token(self):
        refresh = self._login().json()["refresh"]

        response = self.client.post("/api/auth/refresh/", {"refresh": refresh}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertIn("access", response.json())

    def test_refresh_with_invalid_token(self):
        response = self.client.post("/api/auth/refresh/", {"refresh": "garbage"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_me_with_bearer_token(self):
        access = self._login().json()["access"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["email"], "nurse_auth@example.com")

    def test_me_requires_authentication(self):
        response = self.client.get("/api/auth/me/")
        self.assertEqual(response.status_code, 401)
