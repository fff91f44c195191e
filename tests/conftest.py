import os
import tempfile

# Keep test logs out of the working tree; must be set before glowdle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='glowdle-logs-'))

from types import SimpleNamespace

import pytest

from glowdle import create_app
from glowdle.config import TestingConfig
from glowdle.models.game import DictionaryEntry
from glowdle.services.daily_service import initialize_daily_selector
from glowdle.services.dictionary_service import DictionaryUnavailableError, initialize_dictionary_service
from glowdle.services.game_service import initialize_game_service
from glowdle.services.word_cache import WordCache

SOURCE_WORDS = "cigar rebut sissy humph awake blush focal evade naval serve"

GUESS_WORDS = [
    "CRANE", "CRASH", "CRAZY", "CRONE", "APPLE", "APPLY", "SLATE", "BLAST", "NOTES",
    "HELLO", "WORLD", "ADIEU",
]


class FakeWordSource:
    """Stands in for WordListClient."""

    def __init__(self, text=SOURCE_WORDS, error=None):
        self.text = text
        self.error = error
        self.calls = 0

    def fetch_words(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.text


class FakeDictionaryClient:
    """Stands in for DictionaryClient; knows a fixed set of words."""

    def __init__(self, words=(), unavailable=False):
        self.words = {word.upper() for word in words}
        self.unavailable = unavailable
        self.calls = []

    def lookup(self, word):
        self.calls.append(word.upper())
        if self.unavailable:
            raise DictionaryUnavailableError("dictionary offline")
        if word.upper() in self.words:
            return DictionaryEntry(found=True, word=word.lower(), definition=f"Definition of {word.lower()}")
        return DictionaryEntry(found=False)


@pytest.fixture
def word_cache():
    return WordCache()


@pytest.fixture
def word_source():
    return FakeWordSource()


@pytest.fixture
def dictionary_client():
    return FakeDictionaryClient(words=GUESS_WORDS + SOURCE_WORDS.split())


@pytest.fixture
def services(word_source, dictionary_client, word_cache):
    dictionary_service = initialize_dictionary_service(dictionary_client, word_cache)
    daily_selector = initialize_daily_selector(word_source, dictionary_service, word_cache)
    game_service = initialize_game_service(dictionary_service, daily_selector)
    return SimpleNamespace(
        game=game_service,
        daily=daily_selector,
        dictionary=dictionary_service,
        dictionary_client=dictionary_client,
        word_source=word_source,
        cache=word_cache,
    )


@pytest.fixture
def app(services):
    app = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
