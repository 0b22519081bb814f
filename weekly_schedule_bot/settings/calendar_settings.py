from __future__ import annotations

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from weekly_schedule_bot.entities.calendar import JalaliDate
from weekly_schedule_bot.entities.calendar import ReferenceAnchor
from weekly_schedule_bot.entities.constants import TEHRAN_TIMEZONE
from weekly_schedule_bot.entities.parity import Parity


class CalendarSettings(BaseSettings):
    """
    Reference week used to derive every odd/even week.
    These fields will be loaded from environment variables in .env:
      - CALENDAR_REFERENCE_YEAR
      - CALENDAR_REFERENCE_MONTH
      - CALENDAR_REFERENCE_DAY
      - CALENDAR_REFERENCE_PARITY (odd/even)
      - CALENDAR_TIMEZONE
    """

    reference_year: int = Field(default=1403, description="Jalali year of the reference date")
    reference_month: int = Field(default=11, description="Jalali month of the reference date")
    reference_day: int = Field(default=20, description="Jalali day of the reference date")
    reference_parity: Parity = Field(
        default=Parity.ODD,
        description="Parity of the week containing the reference date",
    )
    timezone: str = Field(
        default=TEHRAN_TIMEZONE,
        description="IANA timezone used to decide what 'today' is",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="calendar_",
        extra="ignore",
    )

    @field_validator("reference_parity", mode="before")
    @classmethod
    def _parse_parity(cls, value):
        if isinstance(value, str):
            return Parity.from_text(value)
        return value

    @property
    def reference_anchor(self) -> ReferenceAnchor:
        return ReferenceAnchor(
            jalali_date=JalaliDate(
                self.reference_year,
                self.reference_month,
                self.reference_day,
            ),
            parity=self.reference_parity,
        )
