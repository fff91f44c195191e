"""
Word Cache

Process-lifetime cache for the shuffled daily word corpus and for dictionary
answers. One instance is built at startup and shared by the daily puzzle
selector and the dictionary service; tests build their own.
"""

import threading
from typing import Callable, Dict, List, Optional


class WordCache:
    """
    Holds the shuffled corpus and word validity results. Nothing is ever evicted.

    The corpus is loaded at most once: concurrent first callers wait on the
    lock and receive the list the first caller stored.
    """

    def __init__(self):
        self._corpus: Optional[List[str]] = None
        self._corpus_lock = threading.Lock()
        self._validity: Dict[str, bool] = {}
        self._validity_lock = threading.Lock()
        self.corpus_loads = 0

    def get_corpus(self, loader: Callable[[], List[str]]) -> List[str]:
        """
        Returns the cached corpus, calling loader to build it on first use.

        Args:
            loader: Builds the final (already shuffled) word list

        Returns:
            List[str]: The cached corpus
        """
        if self._corpus is not None:
            return self._corpus

        with self._corpus_lock:
            if self._corpus is None:
                self._corpus = loader()
                self.corpus_loads += 1
            return self._corpus

    @property
    def corpus_loaded(self) -> bool:
        return self._corpus is not None

    def get_validity(self, word: str) -> Optional[bool]:
        """Cached dictionary answer for word, or None if it was never settled."""
        with self._validity_lock:
            return self._validity.get(word.upper())

    def set_validity(self, word: str, is_valid: bool) -> None:
        with self._validity_lock:
            self._validity[word.upper()] = is_valid

    def validity_size(self) -> int:
        with self._validity_lock:
            return len(self._validity)
