"""
Pytest configuration and fixtures for testing
"""
import os

# The shared Stripe client is built at import; give it a test key before any app module loads
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy_key_for_tests")
os.environ.setdefault("STRIPE_PRICE_MONTHLY", "price_test_monthly")
os.environ.setdefault("STRIPE_PRICE_YEARLY", "price_test_yearly")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base

# Create in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db():
    """
    Fixture that provides an isolated, in-memory SQLite database connection for each test.

    This fixture:
    - Creates all tables before the test runs
    - Yields a clean AsyncSession for the test
    - Drops all tables after the test completes
    """
    # One engine per test: aiosqlite connections are bound to the event loop that opened them
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    test_session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with test_engine.begin() as conn:
        # Import models to ensure they're registered with Base
        from database_models import TrialRecord  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)

    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def client():
    """FastAPI TestClient fixture (startup events are not run)"""
    from main import app

    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
