"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_public_origin, parse_bool
from .game_logger import game_logger

__all__ = ['get_public_origin', 'parse_bool', 'game_logger']
