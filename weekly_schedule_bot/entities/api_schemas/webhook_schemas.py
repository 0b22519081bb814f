"""API schema models for webhook and status endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class WebhookResponse(BaseModel):
    """Standard response for webhook endpoints.

    Args:
        status: Response status (success, error, ignored)
        message: Descriptive message about the outcome
    """
    status: str = Field(description="Status of the webhook processing")
    message: Optional[str] = Field(None, description="Additional information about the result")


class WeekStatusResponse(BaseModel):
    """Parity of the current and next week.

    Args:
        today_jalali: Today's Jalali date in the configured timezone
        today_gregorian: Today's Gregorian date (ISO format)
        current_week: ``odd`` or ``even``
        next_week: ``odd`` or ``even``
    """
    today_jalali: str = Field(description="Today's Jalali date, YYYY/MM/DD")
    today_gregorian: str = Field(description="Today's Gregorian date, ISO format")
    current_week: str = Field(description="Parity of the current week")
    current_week_label: str = Field(description="Persian label of the current week parity")
    next_week: str = Field(description="Parity of the next week")
