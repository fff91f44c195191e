"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import DAILY_WORD_LENGTH, DEFAULT_MAX_GUESSES
from ..services.daily_service import daily_date_label, format_daily_date, get_daily_selector
from ..services.dictionary_service import get_dictionary_service
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_public_origin

game_bp = Blueprint('game', __name__)

GAME_MODES = ('custom', 'daily')


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session from a share token or for the daily puzzle."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        game_mode = data.get('game_mode', 'custom')

        if game_mode not in GAME_MODES:
            error_response = {
                'success': False,
                'error': 'Invalid game mode. Must be "custom" or "daily"'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'new_game', extra_data={'game_mode': game_mode})

        if game_mode == 'daily':
            game_id = game_service.create_daily_game()
        else:
            game_id = game_service.create_custom_game(data.get('token'))
            if game_id is None:
                error_response = {
                    'success': False,
                    'error': 'Invalid or corrupted link'
                }
                game_logger.log_server_response(request, 'new_game', False, error_response)
                return jsonify(error_response), 400

        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            game_type=state.game_type, word_length=state.word_length, max_guesses=state.max_guesses
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guesses_made=len(state.guesses), game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess_length=len(guess) if isinstance(guess, str) else None
        )

        # Validate guess first
        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            status = 404 if error == 'Game not found' else 400
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error
            )
            return jsonify(error_response), status

        state = game_service.make_guess(game_id, guess)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Failed to process guess'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 500

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess_number=len(state.guesses), game_over=state.game_over
        )

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                game_type=state.game_type, guesses_used=len(state.guesses),
                max_guesses=state.max_guesses, hard_mode=state.hard_mode
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/share', methods=['GET'])
def get_share_text(game_id):
    """Get the share text for a finished game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_share_text', game_id)

        if game_service.get_game_state(game_id) is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_share_text', False, error_response, game_id)
            return jsonify(error_response), 404

        share_text = game_service.get_share_text(game_id, get_public_origin())
        if share_text is None:
            error_response = {
                'success': False,
                'error': 'Game is still in progress'
            }
            game_logger.log_server_response(request, 'get_share_text', False, error_response, game_id)
            return jsonify(error_response), 409

        response_data = {
            'success': True,
            'share_text': share_text
        }

        game_logger.log_server_response(request, 'get_share_text', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_share_text', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_share_text', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/definition', methods=['GET'])
def get_definition(game_id):
    """Get the dictionary definition of the answer once the game is over."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_definition', game_id)

        state = game_service.get_game_state(game_id)
        if state is None or not state.game_over:
            error_response = {
                'success': False,
                'error': 'Game not found' if state is None else 'Game is still in progress'
            }
            game_logger.log_server_response(request, 'get_definition', False, error_response, game_id)
            return jsonify(error_response), 404 if state is None else 409

        entry = game_service.get_definition(game_id)
        response_data = {
            'success': True,
            'word': state.answer,
            'definition': entry.definition if entry else None
        }

        game_logger.log_server_response(
            request, 'get_definition', True, response_data, game_id,
            definition_found=entry is not None
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_definition', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_definition', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/daily', methods=['GET'])
def daily_info():
    """Describe today's daily puzzle without revealing the word."""
    try:
        game_logger.log_user_action(request, 'daily_info')

        response_data = {
            'success': True,
            'date': format_daily_date(),
            'label': daily_date_label(),
            'word_length': DAILY_WORD_LENGTH,
            'max_guesses': DEFAULT_MAX_GUESSES,
            'available': get_daily_selector() is not None
        }

        game_logger.log_server_response(request, 'daily_info', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'daily_info')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'daily_info', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        daily_selector = get_daily_selector()
        dictionary_service = get_dictionary_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'daily_available': daily_selector is not None,
            'word_list_loaded': daily_selector.cache.corpus_loaded if daily_selector else False,
            'dictionary_available': dictionary_service is not None,
            'cached_word_checks': dictionary_service.cache.validity_size() if dictionary_service else 0
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
