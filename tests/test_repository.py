"""Tests for the SQLAlchemy profile repository."""

import os
import tempfile

import pytest
from conftest import make_profile, make_project
from sqlalchemy import text

from me_api.errors import StoreUnavailable
from me_api.models import ProfileRecord, create_db_engine, create_session_factory, init_db
from me_api.storage.repository import SqlProfileRepository


@pytest.fixture
def engine():
    """Create a temporary SQLite database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        engine = create_db_engine(f"sqlite:///{os.path.join(tmpdir, 'db', 'test.db')}")
        init_db(engine)
        yield engine
        engine.dispose()


@pytest.fixture
def session(engine):
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def repo(session):
    return SqlProfileRepository(session)


class TestSqlProfileRepository:
    def test_empty_store(self, repo):
        assert repo.find_all() == []
        assert repo.find_first() is None

    def test_replace_assigns_new_id(self, repo):
        stored = repo.replace(make_profile(id="client-id"))
        assert stored.id and stored.id != "client-id"
        assert stored.name == "Ada Lovelace"
        assert stored.projects[0].pskills == ["python", "math"]
        assert repo.find_first() == stored

    def test_replace_keeps_single_profile(self, repo):
        repo.replace(make_profile(name="First"))
        second = repo.replace(make_profile(name="Second"))
        profiles = repo.find_all()
        assert profiles == [second]

    def test_find_all_in_insertion_order(self, repo, session):
        for name in ("A", "B", "C"):
            session.add(ProfileRecord(name=name, skills=[], projects=[], work=[], links={}))
        session.commit()
        assert [p.name for p in repo.find_all()] == ["A", "B", "C"]

    def test_update_overwrites_given_fields(self, repo):
        stored = repo.replace(make_profile())
        updated = repo.update(stored.id, {
            "email": "ada@new.org",
            "projects": [make_project(title="Loom").to_dict()],
        })
        assert updated.id == stored.id
        assert updated.name == "Ada Lovelace"
        assert updated.email == "ada@new.org"
        assert [p.title for p in updated.projects] == ["Loom"]

    def test_update_missing_profile(self, repo):
        assert repo.update("nope", {"name": "X"}) is None

    def test_delete(self, repo):
        stored = repo.replace(make_profile())
        assert repo.delete(stored.id) is True
        assert repo.find_first() is None
        assert repo.delete(stored.id) is False

    def test_malformed_row_read_leniently(self, repo, session):
        session.add(ProfileRecord(name="Broken", skills=None, projects=[{"title": "X"}], work=None, links=None))
        session.commit()
        profile = repo.find_first()
        assert profile.skills == []
        assert profile.projects[0].pskills == []
        assert profile.work == []

    def test_missing_table_raises_store_unavailable(self, repo, session):
        session.execute(text("DROP TABLE profiles"))
        session.commit()
        with pytest.raises(StoreUnavailable):
            repo.find_all()
        with pytest.raises(StoreUnavailable):
            repo.find_first()
        with pytest.raises(StoreUnavailable):
            repo.replace(make_profile())
