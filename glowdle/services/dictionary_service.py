"""
Dictionary Service

HTTP clients for the two external word services, and real-word checking on top
of them:

- the word-list source, a plain-text list of 5-letter answers used for daily puzzles
- the dictionary API, which says whether a word exists and what it means
"""

from typing import Any, Optional
from urllib.parse import quote

import requests

from ..models.game import DictionaryEntry, WordCheck
from ..utils.game_logger import game_logger
from .word_cache import WordCache


class WordSourceError(Exception):
    """The word-list source could not be reached or returned an error."""


class DictionaryUnavailableError(Exception):
    """The dictionary could not answer; distinct from a word not being found."""


class WordListClient:
    """Fetches the daily answer list as whitespace-separated text."""

    def __init__(self, url: str, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def fetch_words(self) -> str:
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise WordSourceError(f"Failed to fetch word list from {self.url}: {e}") from e
        return response.text


def _first_definition(data: Any) -> Optional[str]:
    """Pulls data[0].meanings[0].definitions[0].definition out of an API response."""
    try:
        return data[0]['meanings'][0]['definitions'][0]['definition']
    except (IndexError, KeyError, TypeError):
        return None


class DictionaryClient:
    """
    Client for a dictionaryapi.dev-compatible lookup endpoint.

    GET <base_url>/<word> answers 200 with a JSON list of entries, or 404 when
    the word is unknown.
    """

    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def lookup(self, word: str) -> DictionaryEntry:
        """
        Looks up a word.

        Returns:
            DictionaryEntry: found=False for an unknown word

        Raises:
            DictionaryUnavailableError: On network errors or any non-404 failure status
        """
        url = f"{self.base_url}/{quote(word.lower())}"
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryUnavailableError(f"Dictionary request failed: {e}") from e

        if response.status_code == 404:
            return DictionaryEntry(found=False)
        if not response.ok:
            raise DictionaryUnavailableError(f"Dictionary returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = None

        entry_word = None
        if isinstance(data, list) and data and isinstance(data[0], dict):
            entry_word = data[0].get('word')

        return DictionaryEntry(found=True, word=entry_word or word.lower(), definition=_first_definition(data))


class DictionaryService:
    """
    Real-word checks with a process-lifetime cache.

    Only definitive answers are cached, so a word that could not be verified is
    looked up again next time.
    """

    def __init__(self, client, cache: WordCache):
        self.client = client
        self.cache = cache

    def check_word(self, word: str) -> WordCheck:
        """
        Checks whether word is in the dictionary.

        Returns:
            WordCheck.VALID, WordCheck.NOT_A_WORD, or WordCheck.UNVERIFIED when
            the dictionary could not be reached
        """
        if not word or not word.strip():
            return WordCheck.NOT_A_WORD

        word = word.strip()
        cached = self.cache.get_validity(word)
        if cached is not None:
            return WordCheck.VALID if cached else WordCheck.NOT_A_WORD

        try:
            entry = self.client.lookup(word)
        except DictionaryUnavailableError as e:
            game_logger.logger.warning(f"Could not verify word '{word.upper()}': {e}")
            return WordCheck.UNVERIFIED

        self.cache.set_validity(word, entry.found)
        return WordCheck.VALID if entry.found else WordCheck.NOT_A_WORD

    def is_real_word(self, word: str) -> bool:
        return self.check_word(word) == WordCheck.VALID

    def get_definition(self, word: str) -> Optional[DictionaryEntry]:
        """Returns the entry for word, or None if it is unknown or the dictionary is down."""
        if not word or not word.strip():
            return None

        try:
            entry = self.client.lookup(word.strip())
        except DictionaryUnavailableError as e:
            game_logger.logger.warning(f"Could not fetch definition for '{word.upper()}': {e}")
            return None

        self.cache.set_validity(word.strip(), entry.found)
        return entry if entry.found else None


# Global service instance
_dictionary_service = None


def get_dictionary_service() -> Optional[DictionaryService]:
    """Get the global dictionary service instance."""
    return _dictionary_service


def initialize_dictionary_service(client, cache: WordCache) -> DictionaryService:
    """Initialize the global dictionary service instance."""
    global _dictionary_service
    _dictionary_service = DictionaryService(client, cache)
    return _dictionary_service
