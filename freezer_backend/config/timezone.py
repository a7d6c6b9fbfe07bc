"""Current calendar date in the configured zone, used for expiration math."""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from .settings import settings


def today_local() -> date:
    """Today's date in `settings.timezone`, or in the host's local zone when unset."""
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).date()
    return datetime.now().astimezone().date()


def get_today() -> date:
    """Dependency: the request's notion of today. Overridden in tests."""
    return today_local()
