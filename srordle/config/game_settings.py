"""
Game Configuration Constants Module

Board constants shared by the server and the populate CLI, and the loader
for the newline-delimited word lists.
"""

from pathlib import Path
from typing import Final, List, Union

# Number of slots on the board, and the length of every target word
WORD_LENGTH: Final[int] = 7

# Full-word attempts a player may request per game
DEFAULT_FULL_ATTEMPTS: Final[int] = 2


def load_word_list(path: Union[str, Path]) -> List[str]:
    """
    Load a newline-delimited word list.

    Args:
        path: Path to the word list file

    Returns:
        List[str]: Words in file order, stripped, with blank lines skipped

    Raises:
        FileNotFoundError: If the word list file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")

    with path.open('r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]
