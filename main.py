"""
Srordle Game Server - Main Entry Point

This is the main entry point for the game server.
It loads the dictionary, connects to the game store and starts the Flask application.
"""

from srordle import create_app
from srordle.config import Config
from srordle.services.game_service import initialize_game_service
from srordle.services.game_store import GameStore
from srordle.services.trie import Trie
from srordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    store = None
    try:
        game_logger.configure(Config.LOG_DIR, Config.LOG_LEVEL)

        # The dictionary must be fully built before any request can read it
        print("Loading dictionary...")
        dictionary = Trie.from_file(Config.DICTIONARY_PATH)
        print(f"✓ Dictionary loaded ({dictionary.size} words)")

        store = GameStore.connect(Config.MONGO_URI, Config.MONGO_DB_NAME)
        print("✓ Game store connected")

        initialize_game_service(dictionary, store, require_exact=Config.REQUIRE_EXACT_GUESS_LENGTH)
        print("✓ Game service initialized successfully")

        app = create_app(Config)

        game_logger.logger.info("Srordle Server Starting")

        print(f"\nStarting Srordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Srordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if store is not None:
            store.close()


if __name__ == '__main__':
    main()
