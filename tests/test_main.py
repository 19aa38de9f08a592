"""Tests for the command-line entry point."""

import json
import logging
import os
import tempfile

import pytest
import yaml
from conftest import make_profile

from me_api.main import main, parse_args
from me_api.models import create_db_engine, create_session_factory, init_db
from me_api.storage.repository import SqlProfileRepository


@pytest.fixture
def workdir(monkeypatch):
    """Config file plus a database holding one profile."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        db_url = f"sqlite:///{os.path.join(tmpdir, 'me.db')}"
        engine = create_db_engine(db_url)
        init_db(engine)
        session = create_session_factory(engine)()
        SqlProfileRepository(session).replace(make_profile())
        session.close()
        engine.dispose()

        config_path = os.path.join(tmpdir, "config.yaml")
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump({
                "database": {"url": db_url},
                "log_dir": os.path.join(tmpdir, "logs"),
                # Console logging goes to stdout; keep it quiet so output is pure JSON
                "log_level": "ERROR",
            }, f)

        yield config_path

        logger = logging.getLogger("me_api")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.config == "config.yaml"
        assert args.search is None
        assert args.top_skills is None

    def test_top_skills_without_count(self):
        assert parse_args(["--top-skills"]).top_skills == 0
        assert parse_args(["--top-skills", "3"]).top_skills == 3

    def test_queries_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--search", "ada", "--skill", "python"])


class TestMain:
    def test_missing_config_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", "nonexistent.yaml", "--search", "ada"])
        assert exc.value.code == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_search(self, workdir, capsys):
        main(["--config", workdir, "--search", "lovelace"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["profiles"][0]["name"] == "Ada Lovelace"

    def test_skill(self, workdir, capsys):
        main(["--config", workdir, "--skill", "python"])
        payload = json.loads(capsys.readouterr().out)
        assert [p["title"] for p in payload] == ["Engine"]

    def test_top_skills(self, workdir, capsys):
        main(["--config", workdir, "--top-skills", "1"])
        assert json.loads(capsys.readouterr().out) == [{"skill": "python", "count": 1}]

    def test_show(self, workdir, capsys):
        main(["--config", workdir, "--show"])
        assert "Name: Ada Lovelace" in capsys.readouterr().out
