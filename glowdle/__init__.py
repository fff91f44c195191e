"""
Glowdle Server Application Package

This package contains the Glowdle puzzle engine (scoring, hard-mode rules,
share tokens, daily puzzle selection) and the Flask API that serves it.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Services are initialized separately (see main.py) so tests can inject
    their own word source and dictionary.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False
    
    # Initialize extensions
    CORS(app)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.puzzle_controller import puzzle_bp
    
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(puzzle_bp, url_prefix='/api')
    
    return app
