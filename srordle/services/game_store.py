"""
Game Store

Persists one game per calendar day in MongoDB. Documents are keyed by the
ISO date string so a day's game is a single primary-key lookup.
"""

import datetime
import logging
from typing import Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.game import Game

logger = logging.getLogger(__name__)


class GameNotFoundError(LookupError):
    """No game has been stored for the requested date."""

    def __init__(self, date: datetime.date):
        super().__init__(f"game not found for {date.isoformat()}")
        self.date = date


def game_key(date: datetime.date) -> str:
    return date.isoformat()


def game_date_for_offset(tz_offset: int, now: Optional[datetime.datetime] = None) -> datetime.date:
    """
    Calendar date in a fixed-offset zone.

    Args:
        tz_offset: Zone offset in seconds east of UTC, as sent by the client
        now: Current time, defaults to the system clock

    Returns:
        The date at that offset
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    zone = datetime.timezone(datetime.timedelta(seconds=tz_offset))
    return now.astimezone(zone).date()


class GameStore:
    """
    Date-keyed game storage on top of a MongoDB collection.
    """

    def __init__(self, collection, client: Optional[MongoClient] = None):
        """
        Args:
            collection: pymongo collection holding the game documents
            client: Owning client, closed by close() when given
        """
        self.collection = collection
        self.client = client

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str = 'srordle') -> 'GameStore':
        """
        Open a store against a MongoDB server.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        try:
            client.admin.command('ping')
        except Exception:
            client.close()
            raise
        logger.info("Connected to MongoDB database %s", db_name)
        return cls(client[db_name].games, client=client)

    def add_game(self, date: datetime.date, game: Game) -> None:
        """Store the game for a date, replacing any existing one."""
        document = {'_id': game_key(date), **game.to_dict()}
        self.collection.replace_one({'_id': document['_id']}, document, upsert=True)

    def game(self, date: datetime.date) -> Game:
        """
        Load the game for a date.

        Raises:
            GameNotFoundError: If no game is stored for that date
        """
        document = self.collection.find_one({'_id': game_key(date)})
        if document is None:
            raise GameNotFoundError(date)
        return Game.from_dict(document)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
