"""
Game Configuration Constants Module

This module defines the game rules and fixed constants shared by the scorer,
the puzzle codec and the daily puzzle selector. Changing CIPHER_KEY invalidates
every shared link; changing SHUFFLE_SEED or FALLBACK_WORDS changes which word
is picked for past and future dates.
"""

from typing import List, Final

# Core Game Configuration Constants
DEFAULT_MAX_GUESSES: Final[int] = 6
"""
Guess limit used when a puzzle does not specify one.
The puzzle codec omits the guess-count suffix for this value.
"""

MIN_WORD_LENGTH: Final[int] = 1
MAX_WORD_LENGTH: Final[int] = 30
DAILY_WORD_LENGTH: Final[int] = 5

CIPHER_KEY: Final[str] = 'WORDLE'
"""Keyword for the letter-substitution cipher applied to puzzle words."""

SHUFFLE_SEED: Final[int] = 789456
"""Seed for the one-time shuffle of the daily word corpus."""

# Used when the official answer list cannot be fetched
FALLBACK_WORDS: Final[List[str]] = [
    'ABOUT', 'ABOVE', 'ABUSE', 'ACTOR', 'ACUTE', 'ADMIT', 'ADOPT', 'ADULT', 'AFTER', 'AGAIN',
    'AGENT', 'AGREE', 'AHEAD', 'ALARM', 'ALBUM', 'ALERT', 'ALIEN', 'ALIGN', 'ALIKE', 'ALIVE',
    'ALLOW', 'ALONE', 'ALONG', 'ALTER', 'AMONG', 'ANGER', 'ANGLE', 'ANGRY', 'APART', 'APPLE',
    'APPLY', 'ARENA', 'ARGUE', 'ARISE', 'ARRAY', 'ASIDE', 'ASSET', 'AUDIO', 'AUDIT', 'AVOID',
    'AWAKE', 'AWARE', 'BADLY', 'BAKER', 'BASES', 'BASIC', 'BEACH', 'BEGAN', 'BEGIN', 'BEING',
    'BELOW', 'BENCH', 'BILLY', 'BIRTH', 'BLACK', 'BLAME', 'BLANK', 'BLIND', 'BLOCK', 'BLOOD',
    'BOARD', 'BOOST', 'BOOTH', 'BOUND', 'BRAIN', 'BRAND', 'BRAVE', 'BREAD', 'BREAK', 'BREED',
    'BRIEF', 'BRING', 'BROAD', 'BROKE', 'BROWN', 'BUILD', 'BUILT', 'BUYER', 'CABLE', 'CARRY',
    'CATCH', 'CAUSE', 'CHAIN', 'CHAIR', 'CHAOS', 'CHARM', 'CHART', 'CHASE', 'CHEAP', 'CHECK',
    'CHEST', 'CHIEF', 'CHILD', 'CHINA', 'CHOSE', 'CIVIL', 'CLAIM', 'CLASS', 'CLEAN', 'CLEAR',
    'CLICK', 'CLIMB', 'CLOCK', 'CLOSE', 'CLOUD', 'COACH', 'COAST', 'COULD', 'COUNT', 'COURT',
    'COVER', 'CRAFT', 'CRASH', 'CRAZY', 'CREAM', 'CRIME', 'CROSS', 'CROWD', 'CROWN', 'CRUDE',
    'CURVE', 'CYCLE', 'DAILY', 'DANCE', 'DATED', 'DEALT', 'DEATH', 'DEBUT', 'DELAY', 'DEPTH',
    'DOING', 'DOUBT', 'DOZEN', 'DRAFT', 'DRAMA', 'DRANK', 'DRAWN', 'DREAM', 'DRESS', 'DRILL',
    'DRINK', 'DRIVE', 'DROVE', 'DYING', 'EAGER', 'EARLY', 'EARTH', 'EIGHT', 'ELITE', 'EMPTY',
    'ENEMY', 'ENJOY', 'ENTER', 'ENTRY', 'EQUAL', 'ERROR', 'EVENT', 'EVERY', 'EXACT', 'EXIST',
    'EXTRA', 'FAITH', 'FALSE', 'FAULT', 'FIBER', 'FIELD', 'FIFTH', 'FIFTY', 'FIGHT', 'FINAL',
    'FIRST', 'FIXED', 'FLASH', 'FLEET', 'FLOOR', 'FLUID', 'FOCUS', 'FORCE', 'FORTH', 'FORTY',
    'FORUM', 'FOUND', 'FRAME', 'FRANK', 'FRAUD', 'FRESH', 'FRONT', 'FRUIT', 'FULLY', 'FUNNY'
]


def validate_word_list_integrity(words: List[str] = FALLBACK_WORDS) -> bool:
    """
    Validates the integrity and consistency of a daily word list.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly DAILY_WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting
    4. Uniqueness validation: No duplicate entries
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(words):
        if len(word) != DAILY_WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {DAILY_WORD_LENGTH} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
    
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(f" Fallback word list validation passed ({len(FALLBACK_WORDS)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
