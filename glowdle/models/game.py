"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional
from ..config.game_settings import DEFAULT_MAX_GUESSES


class LetterStatus(Enum):
    """Per-position outcome of scoring a guess against the target."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"


class KeyStatus(Enum):
    """Keyboard letter status, aggregated over every guess of a game."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNUSED = "unused"


@dataclass(frozen=True)
class LetterResult:
    """Scoring result for one position of a guess."""
    letter: str
    status: LetterStatus


@dataclass(frozen=True)
class HardModeResult:
    """Outcome of a hard-mode check; error names the violated letter or position."""
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Everything needed to play a puzzle, and everything a share token carries.

    max_guesses is None for an unbounded puzzle.
    """
    word: str
    max_guesses: Optional[int] = DEFAULT_MAX_GUESSES
    hard_mode: bool = False
    real_words_only: bool = False
    hint: Optional[str] = None

    @property
    def unbounded(self) -> bool:
        return self.max_guesses is None


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    game_type: str  # "custom" or "daily"
    word_length: int
    max_guesses: Optional[int]
    hard_mode: bool
    real_words_only: bool
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Dict[str, str]]]  # letter/status pairs for JSON serialization
    letter_status: Dict[str, str]
    hint: Optional[str] = None
    daily_date: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over


class WordCheck(Enum):
    """Outcome of checking a guess against the dictionary."""
    VALID = "valid"
    NOT_A_WORD = "not_a_word"
    UNVERIFIED = "unverified"  # dictionary could not be reached


@dataclass(frozen=True)
class DictionaryEntry:
    """Dictionary lookup result. A missing word is found=False, not an error."""
    found: bool
    word: Optional[str] = None
    definition: Optional[str] = None
