import pytest
import requests

from conftest import FakeDictionaryClient
from glowdle.models.game import WordCheck
from glowdle.services import dictionary_service
from glowdle.services.dictionary_service import (
    DictionaryClient, DictionaryService, DictionaryUnavailableError, WordListClient, WordSourceError
)
from glowdle.services.word_cache import WordCache

API_ENTRY = [{
    "word": "crane",
    "meanings": [{
        "partOfSpeech": "noun",
        "definitions": [{"definition": "A large, tall machine used for lifting heavy objects."}]
    }]
}]


class FakeResponse:

    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self.payload = payload
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON object could be decoded")
        return self.payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def get(url, timeout=None):
            calls.append((url, timeout))
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(dictionary_service.requests, "get", get)
        return calls

    return install


class TestDictionaryClient:

    def test_found_word(self, fake_get):
        calls = fake_get(FakeResponse(200, API_ENTRY))
        entry = DictionaryClient("https://dict.test/api/", timeout=3).lookup("CRANE")
        assert entry.found
        assert entry.word == "crane"
        assert entry.definition == "A large, tall machine used for lifting heavy objects."
        assert calls == [("https://dict.test/api/crane", 3)]

    def test_unknown_word(self, fake_get):
        fake_get(FakeResponse(404, {"title": "No Definitions Found"}))
        entry = DictionaryClient("https://dict.test/api").lookup("XYZZY")
        assert not entry.found
        assert entry.definition is None

    def test_found_without_definition(self, fake_get):
        fake_get(FakeResponse(200, [{"word": "crane", "meanings": []}]))
        entry = DictionaryClient("https://dict.test/api").lookup("crane")
        assert entry.found
        assert entry.definition is None

    def test_server_error_is_unavailable(self, fake_get):
        fake_get(FakeResponse(503))
        with pytest.raises(DictionaryUnavailableError):
            DictionaryClient("https://dict.test/api").lookup("crane")

    def test_network_error_is_unavailable(self, fake_get):
        fake_get(error=requests.ConnectionError("connection refused"))
        with pytest.raises(DictionaryUnavailableError):
            DictionaryClient("https://dict.test/api").lookup("crane")


class TestWordListClient:

    def test_returns_body_text(self, fake_get):
        calls = fake_get(FakeResponse(200, text="cigar\nrebut\n"))
        assert WordListClient("https://words.test/list.txt", timeout=5).fetch_words() == "cigar\nrebut\n"
        assert calls == [("https://words.test/list.txt", 5)]

    def test_http_error(self, fake_get):
        fake_get(FakeResponse(500))
        with pytest.raises(WordSourceError):
            WordListClient("https://words.test/list.txt").fetch_words()

    def test_timeout(self, fake_get):
        fake_get(error=requests.Timeout("timed out"))
        with pytest.raises(WordSourceError):
            WordListClient("https://words.test/list.txt").fetch_words()


class TestDictionaryService:

    def test_valid_word_is_cached(self):
        client = FakeDictionaryClient(["CRANE"])
        service = DictionaryService(client, WordCache())
        assert service.check_word("crane") == WordCheck.VALID
        assert service.check_word("CRANE") == WordCheck.VALID
        assert client.calls == ["CRANE"]

    def test_unknown_word_is_cached(self):
        client = FakeDictionaryClient(["CRANE"])
        cache = WordCache()
        service = DictionaryService(client, cache)
        assert service.check_word("XYZZY") == WordCheck.NOT_A_WORD
        assert service.check_word("xyzzy") == WordCheck.NOT_A_WORD
        assert client.calls == ["XYZZY"]
        assert cache.get_validity("xyzzy") is False

    def test_unavailable_dictionary_is_not_cached(self):
        client = FakeDictionaryClient(["CRANE"], unavailable=True)
        cache = WordCache()
        service = DictionaryService(client, cache)
        assert service.check_word("CRANE") == WordCheck.UNVERIFIED
        assert service.check_word("CRANE") == WordCheck.UNVERIFIED
        assert len(client.calls) == 2
        assert cache.validity_size() == 0

        client.unavailable = False
        assert service.check_word("CRANE") == WordCheck.VALID

    @pytest.mark.parametrize("word", ["", "   ", None])
    def test_blank_word_is_not_a_word(self, word):
        client = FakeDictionaryClient(["CRANE"])
        assert DictionaryService(client, WordCache()).check_word(word) == WordCheck.NOT_A_WORD
        assert client.calls == []

    def test_is_real_word(self):
        service = DictionaryService(FakeDictionaryClient(["CRANE"]), WordCache())
        assert service.is_real_word("crane")
        assert not service.is_real_word("xyzzy")

    def test_get_definition(self):
        service = DictionaryService(FakeDictionaryClient(["CRANE"]), WordCache())
        entry = service.get_definition("CRANE")
        assert entry.definition == "Definition of crane"
        assert service.get_definition("XYZZY") is None

    def test_get_definition_when_dictionary_is_down(self):
        service = DictionaryService(FakeDictionaryClient(["CRANE"], unavailable=True), WordCache())
        assert service.get_definition("CRANE") is None
