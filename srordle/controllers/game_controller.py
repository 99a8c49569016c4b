"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import GuessRejected, get_game_service
from ..services.game_store import GameNotFoundError
from ..services.trie import InvalidInputError
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({'Error': 'Game service unavailable'}), 500


def _read_tz_offset(data) -> int:
    value = data.get('tzOffset', 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('tzOffset must be a number of seconds')
    return int(value)


@game_bp.route('/srordle', methods=['POST'])
def get_game():
    """Return today's game for the player's time zone, without the answer."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            error_response = {'Error': 'Failed to parse request'}
            game_logger.log_server_response(request, 'get_game', False, error_response)
            return jsonify(error_response), 400

        tz_offset = _read_tz_offset(data)
        game_logger.log_user_action(request, 'get_game', tz_offset=tz_offset)

        response_data = {'Game': game_service.todays_game(tz_offset)}

        game_logger.log_server_response(request, 'get_game', True, response_data)
        return jsonify(response_data)

    except GameNotFoundError as e:
        game_logger.log_error(request, e, 'get_game')
        error_response = {'Error': 'No game found for today'}
        game_logger.log_server_response(request, 'get_game', False, error_response)
        return jsonify(error_response), 404

    except ValueError as e:
        game_logger.log_error(request, e, 'get_game')
        error_response = {'Error': str(e)}
        game_logger.log_server_response(request, 'get_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'get_game')
        error_response = {'Error': 'Failed to load game'}
        game_logger.log_server_response(request, 'get_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/guess', methods=['POST'])
def make_guess():
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            error_response = {'Error': 'Guess is required'}
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']
        tz_offset = _read_tz_offset(data)
        guess_index = int(data.get('guessIndex', 0))
        use_full = bool(data.get('useFull', False))

        game_logger.log_user_action(
            request, 'submit_guess',
            guess=guess, guess_index=guess_index, use_full=use_full
        )

        try:
            response_data = game_service.submit_guess(
                guess, tz_offset=tz_offset, guess_index=guess_index, use_full=use_full
            )
        except GuessRejected as e:
            # Player-correctable, so the client shows the message and keeps playing
            error_response = {'Error': e.message}
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response,
                attempted_guess=guess
            )
            if e.invalid_words:
                game_logger.log_game_event('word_rejected', request.remote_addr, words=e.invalid_words)
            return jsonify(error_response)

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            guess_index=guess_index, use_full=use_full
        )

        if response_data['Won']:
            game_logger.log_game_event(
                'game_won', request.remote_addr,
                guess_index=guess_index, use_full=use_full
            )

        return jsonify(response_data)

    except GameNotFoundError as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {'Error': 'No game found for today'}
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 404

    except (InvalidInputError, ValueError, TypeError) as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {'Error': 'Guesses may only contain the letters A to Z'
                          if isinstance(e, InvalidInputError) else str(e)}
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {'Error': 'Failed to process guess'}
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'dictionary_size': game_service.dictionary.size if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {'status': 'error', 'error': str(e)}
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
