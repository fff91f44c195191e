"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    DictionaryEntry, GameState, HardModeResult, KeyStatus, LetterResult, LetterStatus,
    PuzzleConfig, WordCheck
)

__all__ = [
    'DictionaryEntry', 'GameState', 'HardModeResult', 'KeyStatus', 'LetterResult',
    'LetterStatus', 'PuzzleConfig', 'WordCheck'
]
