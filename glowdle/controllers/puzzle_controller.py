"""
Puzzle Controller

Handles creating share links for custom puzzles and previewing them.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import DEFAULT_MAX_GUESSES, MIN_WORD_LENGTH, MAX_WORD_LENGTH
from ..models.game import PuzzleConfig
from ..services.puzzle_codec import HintEncodingError, decode_puzzle, encode_puzzle
from ..services.scoring import is_valid_word_shape
from ..services.share_service import build_play_link
from ..utils.game_logger import game_logger
from ..utils.helpers import get_public_origin, parse_bool

puzzle_bp = Blueprint('puzzle', __name__)

UNBOUNDED_VALUES = ('inf', 'infinite', 'unlimited')


def _parse_max_guesses(data):
    """Returns (max_guesses, error). None means unbounded."""
    if 'max_guesses' not in data:
        return DEFAULT_MAX_GUESSES, None

    value = data['max_guesses']
    if value is None or (isinstance(value, str) and value.strip().lower() in UNBOUNDED_VALUES):
        return None, None

    error = "Maximum guesses must be a positive whole number or 'inf'"
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None, error

    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None, error

    return value, None


def _error(action, message, status, **details):
    error_response = {
        'success': False,
        'error': message,
        **details
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status


@puzzle_bp.route('/puzzles', methods=['POST'])
def create_puzzle():
    """Encode a custom puzzle into a share token and link."""
    try:
        data = request.get_json(silent=True) or {}

        word = data.get('word')
        game_logger.log_user_action(
            request, 'create_puzzle',
            word_length=len(word) if isinstance(word, str) else None
        )

        if not isinstance(word, str) or not MIN_WORD_LENGTH <= len(word.strip()) <= MAX_WORD_LENGTH:
            return _error('create_puzzle', f'Word must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH} letters', 400)

        word = word.strip()
        if not is_valid_word_shape(word):
            return _error('create_puzzle', 'Word must contain only letters', 400)

        max_guesses, guess_error = _parse_max_guesses(data)
        if guess_error:
            return _error('create_puzzle', guess_error, 400)

        hint = data.get('hint')
        if hint is not None and not isinstance(hint, str):
            return _error('create_puzzle', 'Hint must be text', 400)
        hint = hint.strip() if hint else None

        config = PuzzleConfig(
            word=word.upper(),
            max_guesses=max_guesses,
            hard_mode=parse_bool(data.get('hard_mode')),
            real_words_only=parse_bool(data.get('real_words_only')),
            hint=hint or None
        )

        try:
            token = encode_puzzle(config)
        except HintEncodingError as e:
            return _error('create_puzzle', str(e), 400, unsupported_characters=e.characters)

        response_data = {
            'success': True,
            'token': token,
            'link': build_play_link(get_public_origin(), token)
        }

        game_logger.log_server_response(
            request, 'create_puzzle', True, response_data,
            max_guesses=max_guesses, hard_mode=config.hard_mode, real_words_only=config.real_words_only
        )

        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'create_puzzle')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'create_puzzle', False, error_response)
        return jsonify(error_response), 500


@puzzle_bp.route('/puzzles/<token>', methods=['GET'])
def preview_puzzle(token):
    """Describe a shared puzzle without revealing its word."""
    try:
        game_logger.log_user_action(request, 'preview_puzzle')

        config = decode_puzzle(token)
        if config is None:
            return _error('preview_puzzle', 'Invalid or corrupted link', 404)

        response_data = {
            'success': True,
            'puzzle': {
                'word_length': len(config.word),
                'max_guesses': config.max_guesses,
                'hard_mode': config.hard_mode,
                'real_words_only': config.real_words_only,
                'hint': config.hint
            }
        }

        game_logger.log_server_response(request, 'preview_puzzle', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'preview_puzzle')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'preview_puzzle', False, error_response)
        return jsonify(error_response), 500
