"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Public origin used in share links; empty means use the request host
    PUBLIC_ORIGIN = os.getenv('PUBLIC_ORIGIN', '')
    
    # External Word Services
    WORD_LIST_URL = os.getenv(
        'WORD_LIST_URL',
        'https://gist.githubusercontent.com/cfreshman/a03ef2cba789d8cf00c08f767e0fad7b/raw/'
        'c46f451920d5cf6326d550fb2d6abb1642717852/wordle-answers-alphabetical.txt'
    )
    DICTIONARY_API_URL = os.getenv('DICTIONARY_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en')
    HTTP_TIMEOUT_SECONDS = float(os.getenv('HTTP_TIMEOUT_SECONDS', 10))
    PRELOAD_WORD_LIST = os.getenv('PRELOAD_WORD_LIST', 'True').lower() == 'true'
    
    # Game Settings
    DAILY_VALIDATION_ATTEMPTS = int(os.getenv('DAILY_VALIDATION_ATTEMPTS', 10))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    PUBLIC_ORIGIN = 'https://glowdle.test'
    PRELOAD_WORD_LIST = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
