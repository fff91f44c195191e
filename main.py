"""
Glowdle Server - Main Entry Point

This is the main entry point for the Glowdle server.
It initializes all services and starts the Flask application.
"""

from glowdle import create_app
from glowdle.config import Config, validate_word_list_integrity
from glowdle.services.daily_service import initialize_daily_selector
from glowdle.services.dictionary_service import DictionaryClient, WordListClient, initialize_dictionary_service
from glowdle.services.game_service import initialize_game_service
from glowdle.services.word_cache import WordCache
from glowdle.utils.game_logger import game_logger


def initialize_services(config_class=Config):
    """
    Builds the shared word cache, the HTTP clients and every service.

    Returns:
        Tuple of (game_service, daily_selector, dictionary_service)
    """
    validate_word_list_integrity()

    cache = WordCache()
    dictionary_client = DictionaryClient(config_class.DICTIONARY_API_URL, config_class.HTTP_TIMEOUT_SECONDS)
    word_source = WordListClient(config_class.WORD_LIST_URL, config_class.HTTP_TIMEOUT_SECONDS)

    dictionary_service = initialize_dictionary_service(dictionary_client, cache)
    daily_selector = initialize_daily_selector(
        word_source, dictionary_service, cache,
        validation_attempts=config_class.DAILY_VALIDATION_ATTEMPTS
    )
    game_service = initialize_game_service(dictionary_service, daily_selector)

    return game_service, daily_selector, dictionary_service


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        game_service, daily_selector, dictionary_service = initialize_services(Config)
        print("✓ Game, daily puzzle and dictionary services initialized")
        
        if Config.PRELOAD_WORD_LIST:
            corpus = daily_selector.load_corpus()
            print(f"✓ Daily word list ready ({len(corpus)} words)")
        
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info("Glowdle Server Starting")
        
        print(f"\nStarting Glowdle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Glowdle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
