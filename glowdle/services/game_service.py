"""
Game Service

Runs play sessions for custom (shared-link) and daily puzzles on top of the
scorer, the hard-mode rules and the share formatter.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import DEFAULT_MAX_GUESSES
from ..models.game import DictionaryEntry, GameState, PuzzleConfig, WordCheck
from .daily_service import DailyPuzzleSelector, DateLike, format_daily_date
from .dictionary_service import DictionaryService
from .puzzle_codec import decode_puzzle
from .scoring import is_valid_word_shape, new_key_board, score_guess, update_key_states, validate_hard_mode
from .share_service import format_daily_share_text, format_share_text

NOT_A_WORD_MESSAGE = "Not a real word. Please use a real dictionary word."
UNVERIFIED_MESSAGE = "Could not verify word. Please try again."


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Starting games from share tokens or from the daily puzzle
    - Guess validation (shape, real words, hard mode) and evaluation
    - Game state management without exposing answers to clients
    """

    def __init__(self,
                 dictionary: Optional[DictionaryService] = None,
                 daily_selector: Optional[DailyPuzzleSelector] = None):
        self.games: Dict[str, Dict] = {}  # Store active games by game_id
        self.dictionary = dictionary
        self.daily_selector = daily_selector

    def _start_game(self, config: PuzzleConfig, game_type: str,
                    daily_date: Optional[str] = None) -> str:
        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            "config": config,
            "game_type": game_type,
            "daily_date": daily_date,
            "game_over": False,
            "won": False,
            "guesses": [],
            "guess_results": [],
            "letter_status": new_key_board(),
            "lock": threading.Lock(),
        }
        return game_id

    def create_custom_game(self, token: str) -> Optional[str]:
        """
        Creates a game from a share token.

        Args:
            token: Token produced by the puzzle codec

        Returns:
            str: Unique game ID, or None if the token is invalid or corrupted
        """
        config = decode_puzzle(token)
        if config is None:
            return None
        return self._start_game(config, "custom")

    def create_daily_game(self, day: DateLike = None) -> str:
        """
        Creates a game for the daily puzzle.

        Daily puzzles use the default guess limit, no hard mode, and real words only.

        Raises:
            RuntimeError: If no daily puzzle selector is configured
        """
        if self.daily_selector is None:
            raise RuntimeError("Daily puzzle selector unavailable")

        daily_date = format_daily_date(day)
        word = self.daily_selector.daily_word(daily_date)
        config = PuzzleConfig(
            word=word,
            max_guesses=DEFAULT_MAX_GUESSES,
            hard_mode=False,
            real_words_only=True
        )
        return self._start_game(config, "daily", daily_date=daily_date)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        config: PuzzleConfig = game["config"]

        return GameState(
            game_id=game_id,
            game_type=game["game_type"],
            word_length=len(config.word),
            max_guesses=config.max_guesses,
            hard_mode=config.hard_mode,
            real_words_only=config.real_words_only,
            game_over=game["game_over"],
            won=game["won"],
            guesses=game["guesses"].copy(),
            guess_results=[row.copy() for row in game["guess_results"]],
            letter_status=game["letter_status"].copy(),
            hint=config.hint,
            daily_date=game["daily_date"],
            answer=config.word if game["game_over"] else None
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Checks run in order: game state, shape, dictionary (real-words puzzles),
        then hard mode, so a hard-mode message is only shown for real words.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if game_id not in self.games:
            return False, "Game not found"

        game = self.games[game_id]
        config: PuzzleConfig = game["config"]

        if game["game_over"]:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.strip().upper()

        if len(normalized_guess) != len(config.word):
            return False, f"Word must be {len(config.word)} letters long"

        if not is_valid_word_shape(normalized_guess, len(config.word)):
            return False, "Please enter a valid word with only letters"

        if config.real_words_only:
            check = self.dictionary.check_word(normalized_guess) if self.dictionary else WordCheck.UNVERIFIED
            if check == WordCheck.NOT_A_WORD:
                return False, NOT_A_WORD_MESSAGE
            if check == WordCheck.UNVERIFIED:
                return False, UNVERIFIED_MESSAGE

        if config.hard_mode:
            result = validate_hard_mode(normalized_guess, game["guesses"], config.word)
            if not result.valid:
                return False, f"Hard Mode: {result.error}"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The guess, same length as the puzzle word

        Returns:
            Updated GameState or None if invalid
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        # Validation and recording must not interleave with another guess for this game
        with game["lock"]:
            is_valid, _ = self.is_valid_guess(game_id, guess)
            if not is_valid:
                return None

            config: PuzzleConfig = game["config"]
            normalized_guess = guess.strip().upper()

            results = score_guess(normalized_guess, config.word)

            game["guesses"].append(normalized_guess)
            game["guess_results"].append([
                {"letter": result.letter, "status": result.status.value} for result in results
            ])
            update_key_states(game["letter_status"], results)

            if normalized_guess == config.word:
                game["won"] = True
                game["game_over"] = True
            elif config.max_guesses is not None and len(game["guesses"]) >= config.max_guesses:
                game["game_over"] = True

            return self.get_game_state(game_id)

    def get_share_text(self, game_id: str, origin: Optional[str] = None) -> Optional[str]:
        """
        Returns the share text for a finished game, or None if the game is
        unknown or still in progress.
        """
        game = self.games.get(game_id)
        if game is None or not game["game_over"]:
            return None

        config: PuzzleConfig = game["config"]
        outcome = "won" if game["won"] else "lost"

        if game["game_type"] == "daily":
            return format_daily_share_text(
                game["guesses"], config.word, outcome, config.max_guesses,
                day=game["daily_date"], origin=origin
            )

        return format_share_text(
            game["guesses"], config.word, outcome, config.max_guesses,
            hard_mode=config.hard_mode,
            real_words_only=config.real_words_only,
            origin=origin
        )

    def get_definition(self, game_id: str) -> Optional[DictionaryEntry]:
        """Definition of the answer; only available once the game is over."""
        game = self.games.get(game_id)
        if game is None or not game["game_over"] or self.dictionary is None:
            return None
        return self.dictionary.get_definition(game["config"].word)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[DictionaryService] = None,
                            daily_selector: Optional[DailyPuzzleSelector] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, daily_selector)
    return _game_service
