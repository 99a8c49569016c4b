"""
Guess Scoring

Computes per-slot letter feedback for a shaped guess. A row may split the
board into several words, so every guessed letter is placed at the board
slot its segment maps to before the usual two scoring passes run.
"""

from collections import Counter
from typing import Dict, List, Sequence

from ..models.game import LetterAnswer, LetterStatus
from ..models.shape import Row


def target_frequencies(target: str) -> Dict[str, int]:
    """Letter counts over the whole target word."""
    return Counter(target)


def score(target: str, row: Row, segments: Sequence[str]) -> List[LetterAnswer]:
    """
    Scores guessed sub-words against the target word.

    The caller must have split the guess with row.split_guess, so there is
    one sub-word per segment and each has its segment's length.

    Letter counts come from the whole target, including slots this row does
    not cover. Those letters stay available to mark duplicates elsewhere as
    WRONG_POSITION.

    Args:
        target: The day's target word
        row: Geometry of the row being guessed
        segments: Guessed sub-words in row order

    Returns:
        One LetterAnswer per target slot, in target order
    """
    freq = target_frequencies(target)
    answers = [LetterAnswer("", LetterStatus.POSITION_NOT_USED) for _ in target]

    covered = []
    for offset, word in zip(row.segment_start_offsets(), segments):
        for j, letter in enumerate(word):
            idx = offset + j
            answers[idx].letter = letter
            answers[idx].status = LetterStatus.NOT_IN_WORD
            covered.append(idx)

    # Exact matches first
    for idx in covered:
        letter = answers[idx].letter
        if letter == target[idx]:
            answers[idx].status = LetterStatus.CORRECT
            freq[letter] -= 1

    # Then misplaced letters, left to right, while any remain
    for idx in covered:
        answer = answers[idx]
        if answer.status == LetterStatus.CORRECT or freq[answer.letter] <= 0:
            continue
        answer.status = LetterStatus.WRONG_POSITION
        freq[answer.letter] -= 1

    return answers
