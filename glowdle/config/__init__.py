"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_MAX_GUESSES, MIN_WORD_LENGTH, MAX_WORD_LENGTH, DAILY_WORD_LENGTH,
    CIPHER_KEY, SHUFFLE_SEED, FALLBACK_WORDS, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_MAX_GUESSES', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH', 'DAILY_WORD_LENGTH',
    'CIPHER_KEY', 'SHUFFLE_SEED', 'FALLBACK_WORDS', 'validate_word_list_integrity'
]
