"""Shared test fixtures.

The database is an in-memory SQLite engine swapped into ``app.db`` and the
completion client is a scripted fake, so no test touches the network.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db
from app.ai.client import get_completion_client
from app.ai.exceptions import ProviderError
from app.main import app as api
from app.models.product_db import Product

SEARCH_MARKER = "Analyze this product search query"
PRICE_MARKER = "suggest an optimal selling price"
ENHANCE_MARKER = "Improve this product listing"


class FakeCompletionClient:
    """Completion client double.

    ``replies`` maps a marker substring of the prompt to the raw text to
    return; ``error`` is raised for every call when set.
    """

    def __init__(self, replies=None, error=None):
        self.replies = dict(replies or {})
        self.error = error
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        for marker, reply in self.replies.items():
            if marker in prompt:
                return reply
        raise ProviderError("no scripted reply for prompt")


@pytest.fixture
def engine(monkeypatch):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr(app.db, "engine", engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def fake_ai():
    return FakeCompletionClient()


@pytest.fixture
def client(engine, fake_ai):
    api.dependency_overrides[get_completion_client] = lambda: fake_ai
    with TestClient(api) as client:
        yield client
    api.dependency_overrides.clear()


@pytest.fixture
def add_product(session):
    counter = {"n": 0}

    def _add(title, price, category=None, condition=None, description="", sold=False):
        counter["n"] += 1
        product = Product(
            id=f"p{counter['n']}",
            title=title,
            price=price,
            category=category,
            condition=condition,
            description=description,
            sold=sold,
        )
        session.add(product)
        session.commit()
        return product

    return _add
