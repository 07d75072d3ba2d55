import sys
import uuid
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for `import blog` and `import run`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mongita import MongitaClientMemory

import blog.model.database as database
from blog import create_app


class RecordingClient:
    """Stands in for one pymongo client, backed by a shared in-memory store."""

    def __init__(self, store, *args, **kwargs):
        self._store = store
        self.args = args
        self.kwargs = kwargs
        self.close_calls = 0

    def __getitem__(self, name):
        return self._store[name]

    def close(self):
        self.close_calls += 1


@pytest.fixture()
def store():
    return MongitaClientMemory()


@pytest.fixture()
def db_name():
    # Memory clients share one engine, so each test gets its own database
    return f"blog_test_{uuid.uuid4().hex}"


@pytest.fixture()
def clients(monkeypatch, store):
    """Every client opened during the test, in order."""
    opened = []

    def _factory(*args, **kwargs):
        client = RecordingClient(store, *args, **kwargs)
        opened.append(client)
        return client

    monkeypatch.setattr(database, "MongoClient", _factory)
    return opened


@pytest.fixture()
def articles(store, db_name):
    return store[db_name]["articles"]


@pytest.fixture()
def build_dir(tmp_path):
    build = tmp_path / "build"
    (build / "static").mkdir(parents=True)
    (build / "index.html").write_text("<html><body>blog</body></html>")
    (build / "static" / "app.js").write_text("console.log('blog');")
    return build


@pytest.fixture()
def app(clients, db_name, build_dir):
    app = create_app({
        "TESTING": True,
        "MONGODB_URI": "mongodb://db.test:27017",
        "MONGODB_DB": db_name,
        "MONGODB_COLLECTION": "articles",
        "MONGODB_TIMEOUT_MS": 1000,
        "BUILD_DIR": str(build_dir),
    })
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
