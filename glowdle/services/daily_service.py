"""
Daily Puzzle Service

Picks the daily puzzle word. The choice is a pure function of the calendar date,
the word corpus and the hashing below: every player gets the same word on the
same day. Changing the corpus, SHUFFLE_SEED or strong_hash changes the word for
every date, past ones included.
"""

import math
import re
from datetime import date, datetime
from typing import List, Optional, Sequence, TypeVar, Union

from ..config.game_settings import DAILY_WORD_LENGTH, FALLBACK_WORDS, SHUFFLE_SEED
from ..utils.game_logger import game_logger
from .word_cache import WordCache

T = TypeVar('T')

DateLike = Union[date, str, None]

# Linear congruential generator constants (Numerical Recipes)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN_BIT = 0x80000000
_DAILY_WORD = re.compile(r'[A-Z]{%d}' % DAILY_WORD_LENGTH)


def seeded_shuffle(items: Sequence[T], seed: int = SHUFFLE_SEED) -> List[T]:
    """
    Fisher-Yates shuffle driven by a seeded LCG.

    The same seed always produces the same order, on any platform.
    """
    shuffled = list(items)
    state = seed
    current_index = len(shuffled)

    while current_index != 0:
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        random_index = math.floor(state / LCG_MODULUS * current_index)
        current_index -= 1
        shuffled[current_index], shuffled[random_index] = shuffled[random_index], shuffled[current_index]

    return shuffled


def _to_uint32(value) -> int:
    return int(value) & _UINT32_MASK


def _to_int32(value) -> int:
    value = _to_uint32(value)
    return value - (_UINT32_MASK + 1) if value & _INT32_SIGN_BIT else value


def strong_hash(text: str) -> int:
    """
    Non-negative hash with good spread for near-identical strings such as
    consecutive dates.

    Each character is mixed in with a position-dependent weight, then a
    murmur-style finalizer scrambles the bits. The finalizer multiplies in
    double precision and truncates to 32 bits between steps; those exact
    semantics are part of which word a date maps to.
    """
    hash_value = 0
    for i, char in enumerate(text):
        position_multiplier = (i + 1) * 31
        hash_value = ((hash_value * 33) ^ (ord(char) * position_multiplier)) & _UINT32_MASK

    hash_value = _to_int32(hash_value ^ (hash_value >> 16))
    hash_value = float(hash_value) * 0x85EBCA6B
    unsigned = _to_uint32(hash_value)
    hash_value = _to_int32(unsigned ^ (unsigned >> 13))
    hash_value = float(hash_value) * 0xC2B2AE35
    unsigned = _to_uint32(hash_value)
    hash_value = _to_int32(unsigned ^ (unsigned >> 16))

    return abs(hash_value)


def parse_word_list(text: str) -> List[str]:
    """Uppercases whitespace-separated tokens and keeps the 5-letter alphabetic ones."""
    words = (token.upper() for token in text.strip().split())
    return [word for word in words if _DAILY_WORD.fullmatch(word)]


def to_daily_date(day: DateLike = None) -> date:
    """Normalizes a date, a 'YYYY-MM-DD' string, or None (today, local time)."""
    if day is None:
        return date.today()
    if isinstance(day, datetime):
        return day.date()
    if isinstance(day, date):
        return day
    return datetime.strptime(day, '%Y-%m-%d').date()


def format_daily_date(day: DateLike = None) -> str:
    return to_daily_date(day).strftime('%Y-%m-%d')


def daily_date_label(day: DateLike = None) -> str:
    """Human-readable date, e.g. 'Monday, October 19, 2026'."""
    day = to_daily_date(day)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class DailyPuzzleSelector:
    """
    Deterministic daily word selection.

    The corpus comes from the word source once per process, is shuffled with a
    fixed seed and kept in the WordCache. If the source cannot be reached the
    embedded fallback list is used instead. The two lists differ, so a date
    may map to a different word during an outage.
    """

    def __init__(self,
                 word_source=None,
                 dictionary=None,
                 cache: Optional[WordCache] = None,
                 validation_attempts: int = 10,
                 fallback_words: Sequence[str] = FALLBACK_WORDS,
                 seed: int = SHUFFLE_SEED):
        self.word_source = word_source
        self.dictionary = dictionary
        self.cache = cache if cache is not None else WordCache()
        self.validation_attempts = validation_attempts
        self.fallback_words = list(fallback_words)
        self.seed = seed

    def _build_corpus(self) -> List[str]:
        try:
            if self.word_source is None:
                raise ValueError("No word source configured")

            words = parse_word_list(self.word_source.fetch_words())
            if not words:
                raise ValueError("No valid words found in the response")

            shuffled = seeded_shuffle(words, self.seed)
            game_logger.logger.info(f"Loaded and shuffled {len(shuffled)} words from the daily word source")
            return shuffled

        except Exception as e:
            game_logger.logger.warning(f"Failed to fetch daily word list, using fallback list: {e}")
            return seeded_shuffle(self.fallback_words, self.seed)

    def load_corpus(self) -> List[str]:
        """Returns the shuffled corpus, fetching it on first use."""
        return self.cache.get_corpus(self._build_corpus)

    def daily_word(self, day: DateLike = None) -> str:
        """
        Returns the puzzle word for a date.

        The date hash picks a candidate; if the dictionary rejects it, the next
        candidates in the shuffled list are tried. When none is confirmed the
        first candidate is used anyway so the daily puzzle is always available.

        Args:
            day: date, 'YYYY-MM-DD' string, or None for today

        Returns:
            str: Uppercase 5-letter word
        """
        date_string = format_daily_date(day)
        corpus = self.load_corpus()
        hash_value = strong_hash(date_string)
        first_candidate = corpus[hash_value % len(corpus)]

        if self.dictionary is None:
            return first_candidate

        for attempt in range(self.validation_attempts):
            candidate = corpus[(hash_value + attempt) % len(corpus)]
            if self.dictionary.is_real_word(candidate):
                if attempt > 0:
                    game_logger.log_game_event(
                        None, 'daily_word_fallback', 'system',
                        date=date_string, attempts=attempt + 1
                    )
                return candidate

        game_logger.logger.warning(
            f"No dictionary-confirmed daily word for {date_string} after "
            f"{self.validation_attempts} attempts; using unverified candidate"
        )
        return first_candidate


# Global service instance
_daily_selector = None


def get_daily_selector() -> Optional[DailyPuzzleSelector]:
    """Get the global daily puzzle selector."""
    return _daily_selector


def initialize_daily_selector(word_source=None,
                              dictionary=None,
                              cache: Optional[WordCache] = None,
                              validation_attempts: int = 10) -> DailyPuzzleSelector:
    """Initialize the global daily puzzle selector."""
    global _daily_selector
    _daily_selector = DailyPuzzleSelector(word_source, dictionary, cache, validation_attempts)
    return _daily_selector
