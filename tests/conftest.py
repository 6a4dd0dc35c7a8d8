import logging

import pytest
from fastapi.testclient import TestClient

from kotoba.app import create_app
from kotoba.config import settings
from kotoba.models import VocabularyEntry
from kotoba.router import get_session_store, get_vocab_manager
from kotoba.sessions import SessionStore
from kotoba.vocabulary import VocabularyManager


@pytest.fixture
def dataset():
    return [
        VocabularyEntry(id=1, term="愛", reading="あい", translation="사랑"),
        VocabularyEntry(id=2, term="桜", reading="さくら", translation="벚꽃"),
        VocabularyEntry(id=3, term="月", reading="つき", translation="달"),
        VocabularyEntry(id=4, term="夢", reading="ゆめ", translation="꿈"),
        VocabularyEntry(id=5, term="風", reading="かぜ", translation="바람"),
    ]


@pytest.fixture
def vocab_dir(tmp_path):
    directory = tmp_path / "vocabulary"
    directory.mkdir()
    return directory


@pytest.fixture
def store():
    return SessionStore(timeout_minutes=120, default_deck="core")


@pytest.fixture
def app(tmp_path, monkeypatch, vocab_dir, store):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr(settings, "LOG_DB_ENABLED", False)
    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_vocab_manager] = lambda: VocabularyManager(str(vocab_dir))
    yield app

    logger = logging.getLogger("kotoba")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
