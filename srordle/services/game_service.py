"""
Game Service

Contains the guess pipeline: pick the row being guessed, split the guess
into the row's words, check them against the dictionary and score them.
"""

import datetime
from typing import Any, Dict, List, Optional

from ..models.game import Game, answers_to_dicts
from ..models.shape import Row
from .game_store import GameStore, game_date_for_offset
from .scoring import score
from .trie import Trie


class GuessRejected(Exception):
    """A guess the player can fix: wrong shape, wrong length or unknown words."""

    def __init__(self, message: str, invalid_words: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.invalid_words = invalid_words or []


class GameService:
    """
    Scores guesses against the stored game of the player's day.

    This class handles:
    - Looking up the day's game for the player's time zone
    - Choosing the shaped row or a requested full-word row
    - Dictionary validation of every sub-word
    - Letter feedback and win detection
    """

    def __init__(self, dictionary: Trie, store: GameStore, require_exact: bool = False):
        """
        Args:
            dictionary: Built dictionary trie, read-only from here on
            store: Date-keyed game store
            require_exact: Reject shaped guesses with leftover characters
        """
        self.dictionary = dictionary
        self.store = store
        self.require_exact = require_exact

    def game_for(self, tz_offset: int, now: Optional[datetime.datetime] = None) -> Game:
        """
        Load the game for the player's current date.

        Raises:
            GameNotFoundError: If no game is stored for that date
        """
        return self.store.game(game_date_for_offset(tz_offset, now))

    def todays_game(self, tz_offset: int, now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
        """Public view of the player's game, without the target word."""
        return self.game_for(tz_offset, now).public_dict()

    def split_for_row(self, game: Game, guess: str, guess_index: int, use_full: bool):
        """
        Pick the row for this attempt and split the guess into its words.

        Attempts past the end of the shape, and requested full attempts, use
        a single full-width word.

        Returns:
            Tuple of (row, words)

        Raises:
            GuessRejected: If the index is invalid or the guess has the wrong shape
        """
        if guess_index < 0:
            raise GuessRejected("Invalid guess index given")

        if use_full or guess_index >= len(game.shape):
            return Row.full(game.width), [guess]

        row = game.shape[guess_index]
        words, ok = row.split_guess(guess, exact=self.require_exact)
        if not ok:
            raise GuessRejected("Your guess wasn't the right shape")
        return row, words

    def check_words(self, row: Row, words: List[str]) -> None:
        """
        Verify word count, word lengths and dictionary membership.

        Raises:
            GuessRejected: For any user-correctable problem
            InvalidInputError: If a word has characters outside a-z
        """
        lengths = row.segment_lengths()
        if len(words) != len(lengths):
            raise GuessRejected(f"Wanted {len(lengths)} guesses, got {len(words)}")

        invalid_words = []
        for word, length in zip(words, lengths):
            if len(word) != length:
                raise GuessRejected(f"{word} isn't {length} letters long")
            if not self.dictionary.contains(word):
                invalid_words.append(word)

        if len(invalid_words) == 1:
            raise GuessRejected(f"{invalid_words[0].upper()} isn't a word", invalid_words)
        if invalid_words:
            raise GuessRejected("Neither of those are real words", invalid_words)

    def submit_guess(self,
                     guess: str,
                     tz_offset: int = 0,
                     guess_index: int = 0,
                     use_full: bool = False,
                     now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
        """
        Processes one guess for the player's game.

        Args:
            guess: The raw guess, all slots of the row concatenated
            tz_offset: Player's zone offset in seconds east of UTC
            guess_index: Which shaped row is being guessed
            use_full: Player requested a full-word attempt
            now: Current time, defaults to the system clock

        Returns:
            Dict with the letter feedback ('Answer'), 'Won' and the split 'Words'

        Raises:
            GuessRejected: If the guess cannot be scored
            InvalidInputError: If the guess has characters outside a-z
            GameNotFoundError: If no game is stored for the player's date
        """
        game = self.game_for(tz_offset, now)
        guess = guess.lower()

        row, words = self.split_for_row(game, guess, guess_index, use_full)
        self.check_words(row, words)

        return {
            'Answer': answers_to_dicts(score(game.target_word, row, words)),
            'Won': game.is_win(words),
            'Words': words,
        }


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Trie, store: GameStore, require_exact: bool = False) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, store, require_exact=require_exact)
    return _game_service
