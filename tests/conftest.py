import copy
import datetime
from pathlib import Path

import pytest

from srordle import create_app
from srordle.config import TestingConfig
from srordle.models import Game, default_shape
from srordle.services import game_service as game_service_module
from srordle.services.game_service import GameService, initialize_game_service
from srordle.services.game_store import GameStore
from srordle.services.trie import Trie
from srordle.utils.game_logger import game_logger

DATA_DIR = Path(__file__).parent / "data"

# Noon UTC keeps every small offset on the same calendar day
NOW = datetime.datetime(2024, 3, 10, 12, 0, tzinfo=datetime.timezone.utc)


class InMemoryCollection:
    """The slice of the pymongo collection API the game store uses."""

    def __init__(self):
        self.documents = {}

    def replace_one(self, filter, replacement, upsert=False):
        key = filter["_id"]
        if key in self.documents or upsert:
            self.documents[key] = copy.deepcopy(replacement)

    def find_one(self, filter):
        document = self.documents.get(filter["_id"])
        return copy.deepcopy(document) if document is not None else None


@pytest.fixture(autouse=True, scope="session")
def quiet_game_logger(tmp_path_factory):
    game_logger.configure(str(tmp_path_factory.mktemp("logs")), "INFO")


@pytest.fixture(scope="session")
def dict_path() -> Path:
    return DATA_DIR / "dict_small.txt"


@pytest.fixture(scope="session")
def dictionary(dict_path) -> Trie:
    return Trie.from_file(dict_path)


@pytest.fixture
def telling_game() -> Game:
    return Game(target_word="telling", shape=default_shape(), full_attempts=2)


@pytest.fixture
def store(telling_game) -> GameStore:
    store = GameStore(InMemoryCollection())
    store.add_game(NOW.date(), telling_game)
    return store


@pytest.fixture
def service(dictionary, store) -> GameService:
    return GameService(dictionary, store)


@pytest.fixture
def client(dictionary, telling_game):
    store = GameStore(InMemoryCollection())
    # The API reads the wall clock, so cover the days around it
    today = datetime.datetime.now(datetime.timezone.utc).date()
    for delta in (-1, 0, 1):
        store.add_game(today + datetime.timedelta(days=delta), telling_game)

    initialize_game_service(dictionary, store)
    app = create_app(TestingConfig)
    yield app.test_client()
    game_service_module._game_service = None
