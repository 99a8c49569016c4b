"""
Srordle Game Server Application Package

A daily word game where each guess is split into one or more words by the
shape of the row being played.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all blueprints registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    if app.config.get('SERVE_STATIC'):
        from .controllers.static_controller import static_bp
        app.register_blueprint(static_bp)

    return app
