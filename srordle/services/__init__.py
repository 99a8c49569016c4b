"""
Services Package

Contains the dictionary, scoring, storage and game services.
"""

from .trie import Trie, InvalidInputError
from .scoring import score
from .game_store import GameStore, GameNotFoundError, game_date_for_offset
from .game_service import GameService, GuessRejected, get_game_service, initialize_game_service

__all__ = [
    'Trie', 'InvalidInputError',
    'score',
    'GameStore', 'GameNotFoundError', 'game_date_for_offset',
    'GameService', 'GuessRejected', 'get_game_service', 'initialize_game_service'
]
