"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.market_data import get_market_data_service
from database import Base, get_db
from main import app
from services.market_data_service import MarketDataService
# Pytest fixtures - imported to make them available to tests
from tests.fixtures import (  # noqa: F401
    auth_headers,
    credit_account,
    debit_account,
    investment_account,
    other_user,
    other_user_headers,
    user,
)
from tests.fixtures.mocks import MockMarketDataProvider


@pytest.fixture(name="db")
def db_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="market_data_provider")
def market_data_provider_fixture():
    """An in-memory price provider with no quotes configured."""
    return MockMarketDataProvider()


@pytest.fixture(name="client")
def client_fixture(db, market_data_provider):
    """Create a test client with the test database and mock price provider."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_get_market_data_service():
        return MarketDataService(provider=market_data_provider)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = override_get_market_data_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
