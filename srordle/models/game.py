"""
Game Data Models

Contains the game record and the per-slot letter feedback types.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Sequence

from .shape import Shape


class LetterStatus(IntEnum):
    """Feedback for one board slot. Integer values are what the frontend reads."""
    UNKNOWN = 0
    NOT_IN_WORD = 1
    WRONG_POSITION = 2
    CORRECT = 3
    POSITION_NOT_USED = 4


@dataclass
class LetterAnswer:
    """A guessed letter (empty for uncovered slots) and its status."""
    letter: str = ""
    status: LetterStatus = LetterStatus.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {'Letter': self.letter, 'Status': int(self.status)}


@dataclass(frozen=True)
class Game:
    """
    One day's game: the target word, its shape and the number of
    full-word attempts the player may request.
    """
    target_word: str
    shape: Shape
    full_attempts: int

    @property
    def width(self) -> int:
        return len(self.target_word)

    def is_win(self, words: Sequence[str]) -> bool:
        """A guess wins only as a single full-width word equal to the target."""
        return len(words) == 1 and words[0] == self.target_word

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the game store."""
        return {
            'target_word': self.target_word,
            'shape': self.shape.to_list(),
            'full_attempts': self.full_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Game':
        return cls(
            target_word=data['target_word'],
            shape=Shape(data['shape']),
            full_attempts=int(data['full_attempts']),
        )

    def public_dict(self) -> Dict[str, Any]:
        """
        Game as sent to clients. The target word is blanked since the
        server scores every guess.
        """
        return {
            'TargetWord': '',
            'Shape': self.shape.to_list(),
            'FullAttempts': self.full_attempts,
        }


def answers_to_dicts(answers: List[LetterAnswer]) -> List[Dict[str, Any]]:
    return [a.to_dict() for a in answers]
