"""Async database connection (SQLAlchemy 2.0 + aiomysql by default)."""
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from .settings import settings

Base = declarative_base()


def engine_options(database_url: str, debug: bool = False) -> dict:
    """Keyword arguments for create_async_engine.

    A connection pool is only sized for server databases; SQLite (DATABASE_URI
    override, local runs) keeps SQLAlchemy's default pool.
    """
    options = {"echo": debug}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url, settings.debug))

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db():
    """Dependency: one session per request, committed when the route returns."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db():
    """Create missing tables at startup; existing tables are left alone."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
