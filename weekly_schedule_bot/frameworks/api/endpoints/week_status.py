"""Odd/even week status endpoint."""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.api_schemas import WeekStatusResponse
from weekly_schedule_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine
from weekly_schedule_bot.utils.exceptions import CustomHTTPException, ReferenceAnchorError
from weekly_schedule_bot.utils.jalali_calendar import gregorian_to_jalali


class WeekStatusEndpoint(ServiceAPIEndpointBluePrint):
    """Exposes the current and next week parity."""

    def __init__(self, week_parity_engine: WeekParityEngine):
        self.week_parity_engine = week_parity_engine

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(
            prefix="/week",
            tags=["Week"]
        )

        @api_route.get(
            "/status",
            summary="Current week parity",
            description="Parity of the current and the next week in the configured timezone",
            response_model=WeekStatusResponse,
        )
        async def week_status():
            today = self.week_parity_engine.today()
            try:
                current = self.week_parity_engine.compute_parity(today)
                following = self.week_parity_engine.compute_parity(today + timedelta(days=7))
            except ReferenceAnchorError as e:
                LOGGER.error(f"Week status unavailable: {e}")
                raise CustomHTTPException.from_exception(e)
            return WeekStatusResponse(
                today_jalali=str(gregorian_to_jalali(today)),
                today_gregorian=today.isoformat(),
                current_week=current.value,
                current_week_label=current.label,
                next_week=following.value,
            )

        return api_route
