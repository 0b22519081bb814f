"""Unit tests for WeekStatusEndpoint."""

import unittest
from datetime import date
from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from weekly_schedule_bot.entities.calendar import JalaliDate, ReferenceAnchor
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.frameworks.api.endpoints.week_status import WeekStatusEndpoint
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError

ANCHOR = ReferenceAnchor(JalaliDate(1403, 11, 20), Parity.ODD)


class TestWeekStatusEndpoint(unittest.TestCase):
    """Test suite for WeekStatusEndpoint."""

    def _client(self, engine) -> TestClient:
        app = FastAPI()
        app.include_router(WeekStatusEndpoint(engine).create_rest_api_route())
        return TestClient(app)

    def test_create_rest_api_route(self):
        router = WeekStatusEndpoint(MagicMock()).create_rest_api_route()

        self.assertEqual(router.prefix, "/week")
        self.assertEqual(router.tags, ["Week"])

    def test_week_status(self):
        engine = WeekParityEngine(ANCHOR)
        engine.today = MagicMock(return_value=date(2025, 2, 15))

        response = self._client(engine).get("/week/status")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "today_jalali": "1403/11/27",
                "today_gregorian": "2025-02-15",
                "current_week": "even",
                "current_week_label": Parity.EVEN.label,
                "next_week": "odd",
            },
        )

    def test_week_status_with_broken_anchor(self):
        engine = MagicMock()
        engine.today.return_value = date(2025, 2, 15)
        engine.compute_parity.side_effect = ReferenceAnchorError(ANCHOR)

        response = self._client(engine).get("/week/status")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["error"], "invalid_reference_anchor")


if __name__ == "__main__":
    unittest.main()
