"""Shared test fixtures: an in-memory SQLite database wired into the FastAPI app."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from kodbank.core.database import get_db
from kodbank.main import app
from kodbank.models import Base


def make_engine() -> Engine:
    """Fresh in-memory database with all tables created; one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


class ApiTestMixin:
    """Mix into unittest.TestCase: self.client talks to the app over a private database."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.pop(get_db, None)
        self.engine.dispose()

    def register(
        self,
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = "secret123",
        **extra: object,
    ):
        return self.client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password, **extra},
        )

    def login(self, username: str = "alice", password: str = "secret123"):
        return self.client.post(
            "/api/login",
            json={"username": username, "password": password},
        )
