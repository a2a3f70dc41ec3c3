from datetime import datetime

from fastapi import Depends

from .config import Settings, get_settings


def get_app_settings() -> Settings:
    return get_settings()


def get_now(settings: Settings = Depends(get_app_settings)) -> datetime:
    """Read the wall clock once per request; tests override this dependency."""
    return datetime.now(settings.tzinfo())
