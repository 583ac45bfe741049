"""
Shared fixtures for the recommendation tests.

The database is an in-memory SQLite engine; no network access is needed.
"""

import os
import sys

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["OPENAI_API_KEY"] = ""

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from recommendation import models  # noqa: F401  registers tables
from recommendation.logic.contracts import College, UserProfile


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sqlite_engine):
    Session = sessionmaker(bind=sqlite_engine, autoflush=False, autocommit=False, future=True)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def cs_profile():
    """B.Tech CSE student from Uttar Pradesh."""
    return UserProfile(
        id="student-1",
        current_course="B.Tech CSE",
        current_study_level="UG 2nd year",
        technical=85,
        numerical=70,
        logical=60,
        verbal=40,
        creative=30,
        preferred_state="Uttar Pradesh",
    )


def make_college(**overrides) -> College:
    data = {
        "college_name": "Test College",
        "state": "Uttar Pradesh",
        "specialised_in": "engineering & technology",
    }
    data.update(overrides)
    return College(**data)
