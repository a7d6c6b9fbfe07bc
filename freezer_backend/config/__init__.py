from .settings import settings
from .database import get_db, init_db, AsyncSessionLocal, Base
from .timezone import get_today, today_local

__all__ = ["settings", "get_db", "init_db", "AsyncSessionLocal", "Base", "get_today", "today_local"]
