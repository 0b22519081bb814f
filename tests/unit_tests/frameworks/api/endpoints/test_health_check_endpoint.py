"""Unit tests for health check endpoint."""

import unittest
from datetime import datetime, timedelta

from fastapi import FastAPI
from fastapi.testclient import TestClient

from weekly_schedule_bot import __version__
from weekly_schedule_bot.frameworks.api.endpoints.health_check import HealthCheckEndpoint


class TestHealthCheckEndpoint(unittest.TestCase):
    """Test suite for HealthCheckEndpoint."""

    def setUp(self):
        self.endpoint = HealthCheckEndpoint()
        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_create_rest_api_route(self):
        router = self.endpoint.create_rest_api_route()

        self.assertEqual(router.prefix, "/health")
        self.assertEqual(router.tags, ["Health"])

    def test_health_check(self):
        self.endpoint.start_time = datetime.now() - timedelta(
            days=1, hours=2, minutes=30, seconds=15
        )

        response = self.client.get("/health/")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["version"], __version__)
        self.assertTrue(data["uptime"].startswith("1d 2h 30m"))
        self.assertIn("timestamp", data)

    def test_ping(self):
        response = self.client.get("/health/ping")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ping": "pong"})


if __name__ == "__main__":
    unittest.main()
