"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(Path(__file__).resolve().parent / 'config.env')


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_bool('DEBUG', 'False')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8000))

    # Frontend assets, served by this process only when running locally
    SERVE_STATIC = _env_bool('SERVE_STATIC', 'True')
    STATIC_DIR = os.getenv('STATIC_DIR', 'dist')
    IMAGES_DIR = os.getenv('IMAGES_DIR', 'images')

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'srordle')

    # Word Lists
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH', 'wordlists/dict.txt')
    TARGET_WORDS_PATH = os.getenv('TARGET_WORDS_PATH', 'wordlists/target.txt')

    # Game Settings
    REQUIRE_EXACT_GUESS_LENGTH = _env_bool('REQUIRE_EXACT_GUESS_LENGTH', 'False')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SERVE_STATIC = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SERVE_STATIC = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
