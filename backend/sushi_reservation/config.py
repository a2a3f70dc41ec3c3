from functools import lru_cache
import os
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models import BusinessHours


load_dotenv()


class Settings(BaseModel):
    timezone: str = Field(default="Asia/Tokyo")
    business_start: int = Field(default=11, ge=0, le=23)
    business_end: int = Field(default=22, ge=1, le=24)
    last_order: int = Field(default=21, ge=0, le=23)
    max_advance_months: int = Field(default=3, ge=0)
    strict_catalog_keys: bool = Field(default=False)

    def business_hours(self) -> BusinessHours:
        return BusinessHours(start=self.business_start, end=self.business_end, last_order=self.last_order)

    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def _default(name: str):
    return Settings.model_fields[name].default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        timezone=os.getenv("TIMEZONE", _default("timezone")),
        business_start=int(os.getenv("BUSINESS_HOURS_START", _default("business_start"))),
        business_end=int(os.getenv("BUSINESS_HOURS_END", _default("business_end"))),
        last_order=int(os.getenv("LAST_ORDER_HOUR", _default("last_order"))),
        max_advance_months=int(os.getenv("MAX_ADVANCE_MONTHS", _default("max_advance_months"))),
        strict_catalog_keys=bool(int(os.getenv("STRICT_CATALOG_KEYS", "0"))),
    )
