"""Shared fixtures: an in-memory store, a journal bound to it and an API client."""

import datetime as dt
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from tradejournal.api.deps import get_journal
from tradejournal.main import app
from tradejournal.models import StoreEntry  # noqa: F401
from tradejournal.schemas.account import Account
from tradejournal.schemas.trade import Trade
from tradejournal.services.journal import JournalState


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def journal(engine):
    state = JournalState(engine)
    state.load()
    return state


@pytest.fixture
def client(journal):
    # No context manager: the lifespan would bind the default database instead
    app.dependency_overrides[get_journal] = lambda: journal
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def account():
    return Account(id="acc-1", name="Personal Prop 100k", broker="FTMO", initial_balance=10000, currency="USD")


def _make_trade(
    result: float,
    result_r: float = 0.0,
    date: str = "2024-01-01",
    setups=(),
    account_id: str = "acc-1",
    **overrides,
) -> Trade:
    fields = dict(
        id=str(uuid.uuid4()),
        account_id=account_id,
        date=dt.date.fromisoformat(date),
        symbol="EURUSD",
        side="BUY",
        session="London",
        bias="Neutral",
        entry=1.1,
        sl=1.09,
        tp=1.12,
        result=result,
        result_r=result_r,
        setups=list(setups),
    )
    fields.update(overrides)
    return Trade(**fields)


@pytest.fixture
def make_trade():
    """Factory for stored trades with sensible defaults."""
    return _make_trade
