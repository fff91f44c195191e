"""
Services Package

Contains all business logic and service classes.
"""

from .daily_service import DailyPuzzleSelector, get_daily_selector
from .dictionary_service import (
    DictionaryClient, DictionaryService, DictionaryUnavailableError, WordListClient, WordSourceError,
    get_dictionary_service
)
from .game_service import GameService, get_game_service
from .puzzle_codec import HintEncodingError, decode_puzzle, encode_puzzle
from .scoring import score_guess, validate_hard_mode
from .share_service import format_daily_share_text, format_share_text
from .word_cache import WordCache

__all__ = [
    'DailyPuzzleSelector', 'get_daily_selector',
    'DictionaryClient', 'DictionaryService', 'DictionaryUnavailableError', 'WordListClient',
    'WordSourceError', 'get_dictionary_service',
    'GameService', 'get_game_service',
    'HintEncodingError', 'decode_puzzle', 'encode_puzzle',
    'score_guess', 'validate_hard_mode',
    'format_daily_share_text', 'format_share_text',
    'WordCache'
]
