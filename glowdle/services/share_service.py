"""
Share Service

Builds the spoiler-free result text players paste into chats: a header with
the score, one emoji row per guess and a link to play the same puzzle.
"""

from typing import Optional, Sequence

from ..config.app_config import Config
from ..models.game import LetterStatus, PuzzleConfig
from .daily_service import DateLike, format_daily_date
from .puzzle_codec import encode_puzzle
from .scoring import score_guess

GAME_TITLE = 'Glowdle'
UNBOUNDED_SYMBOL = '∞'
HARD_MODE_MARKER = ' *'
OUTCOMES = ('won', 'lost')

STATUS_GLYPHS = {
    LetterStatus.CORRECT: '🟩',
    LetterStatus.PRESENT: '🟨',
    LetterStatus.ABSENT: '⬜',
}


def _default_origin() -> str:
    return Config.PUBLIC_ORIGIN or f"http://{Config.HOST}:{Config.PORT}"


def _score_line(guesses: Sequence[str], outcome: str, max_guesses: Optional[int]) -> str:
    if outcome not in OUTCOMES:
        raise ValueError(f"Outcome must be one of {OUTCOMES}, got {outcome!r}")
    score = str(len(guesses)) if outcome == 'won' else 'X'
    limit = UNBOUNDED_SYMBOL if max_guesses is None else str(max_guesses)
    return f"{score}/{limit}"


def render_grid(guesses: Sequence[str], target: str) -> str:
    """One line of glyphs per guess, each line newline-terminated."""
    grid = ''
    for guess in guesses:
        grid += ''.join(STATUS_GLYPHS[result.status] for result in score_guess(guess, target))
        grid += '\n'
    return grid


def build_play_link(origin: str, token: str) -> str:
    return f"{origin.rstrip('/')}/play?w={token}"


def format_share_text(guesses: Sequence[str],
                      target: str,
                      outcome: str,
                      max_guesses: Optional[int],
                      hard_mode: bool = False,
                      real_words_only: bool = False,
                      origin: Optional[str] = None) -> str:
    """
    Formats a finished custom game for sharing.

    Args:
        guesses: Every guess of the game, in order
        target: The puzzle word
        outcome: 'won' or 'lost'
        max_guesses: Guess limit, None if unbounded
        hard_mode: Appends the hard-mode marker to the header
        real_words_only: Carried into the replay link
        origin: Scheme and host for the replay link

    Returns:
        str: Header, blank line, grid, blank line, link
    """
    header = _score_line(guesses, outcome, max_guesses)
    if hard_mode:
        header += HARD_MODE_MARKER

    token = encode_puzzle(PuzzleConfig(
        word=target.upper(),
        max_guesses=max_guesses,
        hard_mode=hard_mode,
        real_words_only=real_words_only
    ))
    link = build_play_link(origin or _default_origin(), token)

    return f"{GAME_TITLE} {header}\n\n{render_grid(guesses, target)}\n{link}"


def format_daily_share_text(guesses: Sequence[str],
                            target: str,
                            outcome: str,
                            max_guesses: Optional[int],
                            day: DateLike = None,
                            origin: Optional[str] = None) -> str:
    """Share text for the daily puzzle; the link points at the daily page, not the word."""
    header = _score_line(guesses, outcome, max_guesses)
    link = f"{(origin or _default_origin()).rstrip('/')}/daily"
    return f"{GAME_TITLE} Daily {format_daily_date(day)} {header}\n\n{render_grid(guesses, target)}\n{link}"
