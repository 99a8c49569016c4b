"""
Command line tools for seeding the game store with daily games.
"""

import datetime
import logging
import random
from typing import List, Optional

import typer
from rich import print

from .config import Config, DEFAULT_FULL_ATTEMPTS, WORD_LENGTH, load_word_list
from .models.game import Game
from .models.shape import default_shape
from .services.game_store import GameStore

logger = logging.getLogger(__name__)

app = typer.Typer(help="Srordle administration commands.")


def schedule_games(words: List[str],
                   start: datetime.date,
                   seed: int = 0,
                   full_attempts: int = DEFAULT_FULL_ATTEMPTS):
    """
    Yield (date, game) pairs, one game per day from start, in a seeded
    random order of the target words.
    """
    order = list(range(len(words)))
    random.Random(seed).shuffle(order)

    shape = default_shape()
    date = start
    for idx in order:
        yield date, Game(target_word=words[idx], shape=shape, full_attempts=full_attempts)
        date += datetime.timedelta(days=1)


def populate_store(store: GameStore,
                   words: List[str],
                   start: datetime.date,
                   seed: int = 0,
                   full_attempts: int = DEFAULT_FULL_ATTEMPTS) -> int:
    """Write the whole schedule into the store. Returns the number of games written."""
    count = 0
    for date, game in schedule_games(words, start, seed=seed, full_attempts=full_attempts):
        store.add_game(date, game)
        count += 1
    return count


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging.")):
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
def populate(mongo_uri: str = typer.Argument(Config.MONGO_URI, help="MongoDB connection string."),
             target_words_path: str = typer.Argument(Config.TARGET_WORDS_PATH,
                                                     help="Path to the word list to use for the game."),
             db_name: str = typer.Option(Config.MONGO_DB_NAME, help="Database holding the games collection."),
             start_date: Optional[datetime.datetime] = typer.Option(
                 None, formats=["%Y-%m-%d"], help="First game date, defaults to yesterday."),
             seed: int = typer.Option(0, help="Seed for the word order."),
             full_attempts: int = typer.Option(DEFAULT_FULL_ATTEMPTS, help="Full-word attempts per game.")):
    """Populate the database with one game per day."""
    words = load_word_list(target_words_path)
    bad = [w for w in words if len(w) != WORD_LENGTH]
    if bad:
        print(f"[red]Target words must be {WORD_LENGTH} letters long, got {bad[0]!r}[/]")
        raise typer.Exit(code=1)

    start = start_date.date() if start_date else datetime.date.today() - datetime.timedelta(days=1)

    store = GameStore.connect(mongo_uri, db_name)
    try:
        count = populate_store(store, words, start, seed=seed, full_attempts=full_attempts)
    finally:
        store.close()

    logger.info("Populated %d games starting %s", count, start.isoformat())
    print(f"[green]Wrote[/] {count} games starting {start.isoformat()}")


if __name__ == "__main__":
    app()
