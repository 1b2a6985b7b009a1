from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import declarative_base

from config.settings import settings, IS_PRODUCTION

DATABASE_URL = settings.database_url or "sqlite+aiosqlite:///./billing.db"

# Trial records must live in a real database once deployed
if IS_PRODUCTION and "sqlite" in DATABASE_URL.lower():
    raise RuntimeError("SQLite is forbidden in production. Set DATABASE_URL to a PostgreSQL database.")

# Hosting dashboards hand out plain postgres URLs; the engine needs the async driver
engine = create_async_engine(DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://"))

Base = declarative_base()


async def init_db():
    """Create the trials table. Called on application startup."""
    async with engine.begin() as conn:
        # Import models here to ensure they're registered with Base
        from database_models import TrialRecord  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
