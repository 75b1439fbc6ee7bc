import json
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to sys.path so we can import cuecards without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from cuecards.db import crud  # noqa: E402
from cuecards.db.models import Base  # noqa: E402
from cuecards.schemas import AnswerVersion, SampleAnswer, Topic  # noqa: E402

CATALOG_PATH = ROOT_PATH / "data" / "sample_catalog.json"


@pytest.fixture
def sample_answers():
    """Three questions with partial score coverage."""
    return [
        SampleAnswer(question="Do you like cats?", versions=[
            AnswerVersion(score="6", answer="(Point) Yes.(Reason) They are calm."),
            AnswerVersion(score="7", answer="I do.<br><br>They are <b>calm</b>."),
        ]),
        SampleAnswer(question="Did you have a pet?", versions=[
            AnswerVersion(score="6", answer=["A goldfish.", "It lived long."]),
        ]),
        SampleAnswer(question="Would you get a dog?", versions=[
            AnswerVersion(score="7", answer="Maybe one day."),
            AnswerVersion(score="8", answer="Absolutely, once I have a garden."),
        ]),
    ]


@pytest.fixture
def catalog_topic() -> Topic:
    """The bundled sample catalog, validated."""
    with open(CATALOG_PATH, encoding="utf-8") as f:
        return Topic.model_validate(json.load(f))


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded(db_session, catalog_topic):
    """Database holding the sample catalog."""
    crud.upsert_topic(db_session, catalog_topic)
    db_session.commit()
    return db_session


@pytest.fixture
def client(session_factory, seeded):
    """TestClient wired to the seeded in-memory database."""
    from fastapi.testclient import TestClient
    from cuecards.dependencies import get_db, get_view_registry
    from cuecards.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    get_view_registry.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_view_registry.cache_clear()
