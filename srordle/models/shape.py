"""
Board Geometry Models

A Row is a boolean mask over the board slots for one guess attempt. Active
slots are grouped into segments (maximal runs of active slots), and each
segment is guessed as its own word. A Shape is the ordered list of rows
for a whole game.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class Row:
    """Immutable activity mask for a single row of the board."""
    slots: Tuple[bool, ...]

    def __init__(self, slots: Iterable[bool]):
        object.__setattr__(self, 'slots', tuple(bool(s) for s in slots))

    @classmethod
    def full(cls, width: int) -> 'Row':
        """Row with every slot active, i.e. a single full-width word."""
        return cls([True] * width)

    @property
    def width(self) -> int:
        return len(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def __getitem__(self, index):
        return self.slots[index]

    def to_list(self) -> List[bool]:
        return list(self.slots)

    def segment_lengths(self) -> List[int]:
        """
        Lengths of the segments in the row, left to right.

        Returns:
            List of run lengths, empty for a row with no active slots
        """
        lengths = []
        run = 0
        for active in self.slots:
            if active:
                run += 1
            elif run > 0:
                lengths.append(run)
                run = 0

        # Close the last run if the row ends inside a segment
        if run > 0:
            lengths.append(run)
        return lengths

    def segment_start_offsets(self) -> List[int]:
        """Slot index of the first letter of every segment, in row order."""
        offsets = []
        prev = False
        for i, active in enumerate(self.slots):
            if active and not prev:
                offsets.append(i)
            prev = active
        return offsets

    def split_guess(self, text: str, exact: bool = False) -> Tuple[List[str], bool]:
        """
        Splits a raw guess into one sub-word per segment.

        One character of the guess is consumed per active slot. Running out
        of characters means the guess has the wrong shape. Leftover characters
        are ignored unless exact is set.

        Args:
            text: The raw guess, as typed
            exact: Also fail when the guess has more characters than active slots

        Returns:
            Tuple of (sub_words, ok)
        """
        words: List[List[str]] = []
        cursor = 0
        prev = False
        for active in self.slots:
            if active:
                if cursor >= len(text):
                    return [], False
                if not prev:
                    words.append([text[cursor]])
                else:
                    words[-1].append(text[cursor])
                cursor += 1
            prev = active

        if exact and cursor != len(text):
            return [], False

        return [''.join(chars) for chars in words], True


@dataclass(frozen=True)
class Shape:
    """Ordered rows of a game, one per shaped guess attempt."""
    rows: Tuple[Row, ...]

    def __init__(self, rows: Iterable[Sequence[bool]]):
        converted = tuple(r if isinstance(r, Row) else Row(r) for r in rows)
        widths = {r.width for r in converted}
        if len(widths) > 1:
            raise ValueError(f"All rows in a shape must share one width, got widths {sorted(widths)}")
        object.__setattr__(self, 'rows', converted)

    @property
    def width(self) -> int:
        return self.rows[0].width if self.rows else 0

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index) -> Row:
        return self.rows[index]

    def to_list(self) -> List[List[bool]]:
        return [r.to_list() for r in self.rows]


def default_shape() -> Shape:
    """The six-row shape used for every daily game."""
    t, f = True, False
    return Shape([
        [t, t, t, t, t, t, t],
        [t, t, t, t, f, t, t],
        [t, t, t, f, t, t, t],
        [t, t, f, t, t, t, t],
        [f, f, t, t, t, f, f],
        [f, t, t, t, t, t, f],
    ])
