import pytest

import run
from blog.model import DEFAULT_ARTICLES
from blog.utils.config import Config, ConfigurationError


def test_validate_accepts_defaults():
    Config.validate()


def test_validate_rejects_non_integer_port(monkeypatch):
    monkeypatch.setattr(Config, "PORT", "eighty")
    with pytest.raises(ConfigurationError, match="BLOG_PORT"):
        Config.validate()


def test_main_exits_on_bad_config(monkeypatch):
    monkeypatch.setattr(Config, "MONGODB_TIMEOUT_MS", "soon")
    with pytest.raises(SystemExit) as exc:
        run.main([])
    assert exc.value.code == 1


def test_seed_uses_configured_database(app, clients, articles):
    assert run.seed(app) == DEFAULT_ARTICLES
    assert articles.count_documents({}) == len(DEFAULT_ARTICLES)
    assert clients[0].close_calls == 1


def test_main_seed_does_not_start_server(monkeypatch, app):
    monkeypatch.setattr(run, "create_app", lambda: app)
    monkeypatch.setattr(app, "run", lambda *a, **kw: pytest.fail("server started"))

    run.main(["--seed"])
