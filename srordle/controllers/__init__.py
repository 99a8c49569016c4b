"""
Controllers Package

Contains the HTTP blueprints.
"""

from .game_controller import game_bp
from .static_controller import static_bp

__all__ = ['game_bp', 'static_bp']
