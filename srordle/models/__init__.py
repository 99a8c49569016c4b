"""
Data Models Package

Contains the game record, board geometry and letter feedback types.
"""

from .game import Game, LetterAnswer, LetterStatus, answers_to_dicts
from .shape import Row, Shape, default_shape

__all__ = ['Game', 'LetterAnswer', 'LetterStatus', 'answers_to_dicts', 'Row', 'Shape', 'default_shape']
