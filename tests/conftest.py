import os

# Keep tests off the developer's database and away from the real API.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GEMINI_API_KEY"] = ""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from unsaid.db.session import Base, init_db


class ScriptedRandom:
    """random.Random stand-in: fixed random() values, choice() by index."""

    def __init__(self, values=(0.0,), index=0):
        self.values = list(values)
        self.index = index
        self.choices = []

    def random(self):
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        return value

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.index if self.index >= 0 else len(seq) + self.index]


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
