from __future__ import annotations

from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase


class HealthTest(TestCase):
    databases = {"default", "records"}

    def test_health_checks_both_databases(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "databases": {"default": "ok", "records": "ok"}})

    def test_unreachable_database_returns_503(self):
        with patch("django.db.backends.utils.CursorWrapper.execute", side_effect=DatabaseError("down")):
            response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "error")
