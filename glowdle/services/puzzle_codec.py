"""
Puzzle Codec

Turns a PuzzleConfig into a short token that fits in a query string, and back.

Token layout: <cipherword>[_<suffix>]*

The word is run through a Vigenère cipher with a fixed keyword. This only stops
the answer from being read straight off a link; anyone with this module can
decode any token.

Suffixes are written in this order, each only when it differs from the default:
    _<n> or _inf    guess limit (omitted for the default of 6)
    _h              hard mode
    _r              real words only
    _hint<payload>  hint, URL-safe base64 of its Latin-1 bytes without padding
"""

import base64
import re
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from ..config.game_settings import CIPHER_KEY, DEFAULT_MAX_GUESSES, MAX_WORD_LENGTH
from ..models.game import PuzzleConfig
from ..utils.game_logger import game_logger

SEPARATOR = '_'
HINT_PREFIX = 'hint'

_CIPHER_WORD = re.compile(r'[A-Za-z]{1,%d}' % MAX_WORD_LENGTH)
_GUESS_COUNT = re.compile(r'[0-9]+')


class SuffixKind(Enum):
    """Recognized token suffixes. The value is the literal tag where there is one."""
    GUESS_COUNT = None
    UNBOUNDED = 'inf'
    HARD_MODE = 'h'
    REAL_WORDS = 'r'
    HINT = HINT_PREFIX


SuffixField = Tuple[SuffixKind, Optional[str]]

_LITERAL_SUFFIXES = {
    SuffixKind.UNBOUNDED.value: SuffixKind.UNBOUNDED,
    SuffixKind.HARD_MODE.value: SuffixKind.HARD_MODE,
    SuffixKind.REAL_WORDS.value: SuffixKind.REAL_WORDS,
}


class HintEncodingError(ValueError):
    """Raised when a hint contains characters the hint payload cannot carry."""

    def __init__(self, characters: Sequence[str]):
        self.characters = list(characters)
        listed = ', '.join(repr(ch) for ch in self.characters)
        super().__init__(f"Hint contains unsupported characters: {listed}")


def vigenere_cipher(text: str, key: str = CIPHER_KEY, encrypt: bool = True) -> str:
    """
    Shifts each ASCII letter of text by the matching keyword letter.

    The keyword only advances on letters; everything else passes through
    unchanged. Letter case is preserved.
    """
    key = key.upper()
    result = []
    key_index = 0

    for char in text:
        upper = char.upper()
        if not ('A' <= upper <= 'Z'):
            result.append(char)
            continue

        shift = ord(key[key_index % len(key)]) - ord('A')
        if not encrypt:
            shift = -shift
        new_char = chr((ord(upper) - ord('A') + shift) % 26 + ord('A'))
        result.append(new_char if char.isupper() else new_char.lower())
        key_index += 1

    return ''.join(result)


def encode_hint(hint: str) -> str:
    """
    Encodes a hint as unpadded URL-safe base64.

    Raises:
        HintEncodingError: If the hint has characters outside Latin-1
    """
    unsupported = []
    for char in hint:
        if ord(char) > 0xFF and char not in unsupported:
            unsupported.append(char)
    if unsupported:
        raise HintEncodingError(unsupported)

    payload = base64.urlsafe_b64encode(hint.encode('latin-1')).decode('ascii')
    return payload.rstrip('=')


def decode_hint(payload: str) -> str:
    """Inverse of encode_hint. Raises binascii.Error on a malformed payload."""
    padded = payload + '=' * (-len(payload) % 4)
    return base64.b64decode(padded, altchars=b'-_', validate=True).decode('latin-1')


def _serialize_suffixes(config: PuzzleConfig) -> List[SuffixField]:
    fields: List[SuffixField] = []

    if config.max_guesses is None:
        fields.append((SuffixKind.UNBOUNDED, None))
    elif config.max_guesses != DEFAULT_MAX_GUESSES:
        fields.append((SuffixKind.GUESS_COUNT, str(config.max_guesses)))

    if config.hard_mode:
        fields.append((SuffixKind.HARD_MODE, None))
    if config.real_words_only:
        fields.append((SuffixKind.REAL_WORDS, None))
    if config.hint:
        fields.append((SuffixKind.HINT, encode_hint(config.hint)))

    return fields


def _format_suffix(kind: SuffixKind, value: Optional[str]) -> str:
    if kind is SuffixKind.GUESS_COUNT:
        return value
    if kind is SuffixKind.HINT:
        return HINT_PREFIX + value
    return kind.value


def _parse_suffixes(segments: Sequence[str]) -> Iterator[SuffixField]:
    """
    Classifies the segments that follow the cipherword.

    The hint payload may itself contain the separator, so a hint segment takes
    every segment after it. Unknown segments are skipped.
    """
    for index, segment in enumerate(segments):
        if segment in _LITERAL_SUFFIXES:
            yield _LITERAL_SUFFIXES[segment], None
        elif segment.startswith(HINT_PREFIX):
            rest = [segment[len(HINT_PREFIX):]] + list(segments[index + 1:])
            yield SuffixKind.HINT, SEPARATOR.join(rest)
            return
        elif _GUESS_COUNT.fullmatch(segment):
            yield SuffixKind.GUESS_COUNT, segment


def encode_puzzle(config: PuzzleConfig) -> str:
    """
    Encodes a puzzle configuration as a URL-safe token.

    The word is trusted as given; callers validate it before encoding.

    Raises:
        HintEncodingError: If the hint cannot be encoded
    """
    parts = [vigenere_cipher(config.word, CIPHER_KEY, encrypt=True)]
    parts.extend(_format_suffix(kind, value) for kind, value in _serialize_suffixes(config))
    return SEPARATOR.join(parts)


def decode_puzzle(token: str) -> Optional[PuzzleConfig]:
    """
    Decodes a token produced by encode_puzzle.

    Returns:
        PuzzleConfig, or None if the token is missing, malformed or corrupted
    """
    try:
        segments = token.split(SEPARATOR)
        cipher_word = segments[0]
        if not _CIPHER_WORD.fullmatch(cipher_word):
            return None

        max_guesses: Optional[int] = DEFAULT_MAX_GUESSES
        hard_mode = False
        real_words_only = False
        hint = None

        for kind, value in _parse_suffixes(segments[1:]):
            if kind is SuffixKind.UNBOUNDED:
                max_guesses = None
            elif kind is SuffixKind.GUESS_COUNT:
                count = int(value)
                if count >= 1:
                    max_guesses = count
            elif kind is SuffixKind.HARD_MODE:
                hard_mode = True
            elif kind is SuffixKind.REAL_WORDS:
                real_words_only = True
            elif kind is SuffixKind.HINT:
                hint = decode_hint(value) or None

        word = vigenere_cipher(cipher_word, CIPHER_KEY, encrypt=False).upper()

        return PuzzleConfig(
            word=word,
            max_guesses=max_guesses,
            hard_mode=hard_mode,
            real_words_only=real_words_only,
            hint=hint
        )

    except Exception as e:
        game_logger.logger.info(f"Failed to decode puzzle token {token!r}: {e}")
        return None
