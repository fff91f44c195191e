"""
Scoring Service

Guess evaluation, hard-mode rule checking and keyboard letter tracking.
Everything here is a pure function of its arguments.
"""

import re
from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..config.game_settings import MIN_WORD_LENGTH, MAX_WORD_LENGTH
from ..models.game import HardModeResult, KeyStatus, LetterResult, LetterStatus

_LETTERS_ONLY = re.compile(r'[A-Za-z]+')

# Higher rank wins when a letter is seen with different results
_KEY_PRIORITY = {
    KeyStatus.UNUSED: 0,
    KeyStatus.ABSENT: 1,
    KeyStatus.PRESENT: 2,
    KeyStatus.CORRECT: 3,
}


def score_guess(guess: str, target: str) -> List[LetterResult]:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    The guess and target must have the same length; that is the caller's
    responsibility. A letter is credited CORRECT or PRESENT at most as many
    times as it appears in the target, and exact matches consume the count
    before any PRESENT marks are handed out.
    """
    guess = guess.upper()
    target = target.upper()

    remaining = Counter(target)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            statuses[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[letter] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return [LetterResult(letter, status) for letter, status in zip(guess, statuses)]


def validate_hard_mode(guess: str, prior_guesses: Sequence[str], target: str) -> HardModeResult:
    """
    Checks that a guess reuses every hint revealed by earlier guesses.

    Green letters must stay in their position and yellow letters must appear
    somewhere in the guess. A yellow letter seen twice only has to appear once.
    Position errors are reported before missing-letter errors.

    Args:
        guess: The guess being submitted
        prior_guesses: Every guess already accepted in this game, oldest first
        target: The puzzle word

    Returns:
        HardModeResult with a user-facing error when the guess is rejected
    """
    if not prior_guesses:
        return HardModeResult(valid=True)

    required_positions: Dict[int, str] = {}
    required_letters: Dict[str, None] = {}  # ordered set, first-seen order

    for prior in prior_guesses:
        for position, result in enumerate(score_guess(prior, target)):
            if result.status == LetterStatus.CORRECT:
                required_positions[position] = result.letter
            elif result.status == LetterStatus.PRESENT:
                required_letters.setdefault(result.letter)

    guess = guess.upper()

    for position in sorted(required_positions):
        letter = required_positions[position]
        if position >= len(guess) or guess[position] != letter:
            return HardModeResult(valid=False, error=f"Must use {letter} in position {position + 1}")

    for letter in required_letters:
        if letter not in guess:
            return HardModeResult(valid=False, error=f"Must include the letter {letter}")

    return HardModeResult(valid=True)


def is_valid_word_shape(word: str, length: Optional[int] = None) -> bool:
    """True if word is letters only, within the allowed size, and of the given length if any."""
    if not isinstance(word, str) or not _LETTERS_ONLY.fullmatch(word):
        return False
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return False
    return length is None or len(word) == length


def new_key_board() -> Dict[str, str]:
    return {letter: KeyStatus.UNUSED.value for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}


def update_key_states(letter_status: Dict[str, str], results: Sequence[LetterResult]) -> None:
    """
    Updates keyboard letter tracking based on guess results.

    Status can only progress in priority order: unused, absent, present, correct.
    """
    for result in results:
        if result.status == LetterStatus.EMPTY:
            continue
        new_status = KeyStatus(result.status.value)
        current_status = KeyStatus(letter_status.get(result.letter, KeyStatus.UNUSED.value))
        if _KEY_PRIORITY[new_status] > _KEY_PRIORITY[current_status]:
            letter_status[result.letter] = new_status.value
