"""
Dictionary Trie

A build-once, read-many prefix tree over lowercase ASCII words. Every node
has 26 fixed child slots, so a lookup costs one array index per letter no
matter how large the dictionary is.

The trie is frozen as soon as it is built. Concurrent lookups from any
number of request threads need no locking.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26
ORD_A = ord('a')
ORD_Z = ord('z')


class InvalidInputError(ValueError):
    """Raised for words containing anything other than the letters a-z."""


def check_input(word: str) -> None:
    """
    Validates that every character of the word is a lowercase ASCII letter.

    Raises:
        InvalidInputError: naming the first offending character and its index
    """
    for i, char in enumerate(word):
        code = ord(char)
        if code > 0x7F:
            raise InvalidInputError(
                f"character at index {i} in {word!r} would require more than one byte to encode"
            )
        if not ORD_A <= code <= ORD_Z:
            raise InvalidInputError(f"character at index {i} in {word!r} is not a lowercase letter")


class _Node:
    __slots__ = ('leaf', 'children')

    def __init__(self):
        # True if this node ends a full word
        self.leaf = False
        self.children: List[Optional['_Node']] = [None] * ALPHABET_SIZE


class Trie:
    """
    Word membership structure for the game dictionary.

    Use Trie.build or Trie.from_file to construct one.
    """

    def __init__(self):
        self._roots: List[Optional[_Node]] = [None] * ALPHABET_SIZE
        self._size = 0
        self._frozen = False
        self.rejected = 0

    @classmethod
    def build(cls, words: Iterable[str], strict: bool = False) -> 'Trie':
        """
        Builds a frozen trie from a sequence of words.

        Args:
            words: Words to insert. Blank entries are ignored.
            strict: Raise on the first invalid entry instead of skipping it

        Returns:
            The built Trie

        Raises:
            InvalidInputError: If strict is set and an entry is not a-z only
        """
        trie = cls()
        first_rejected = None
        for word in words:
            if not word:
                continue
            try:
                trie._insert(word)
            except InvalidInputError:
                if strict:
                    raise
                trie.rejected += 1
                if first_rejected is None:
                    first_rejected = word

        if trie.rejected:
            logger.warning(
                "Skipped %d dictionary entries with invalid characters (first: %r)",
                trie.rejected, first_rejected
            )

        trie._frozen = True
        return trie

    @classmethod
    def from_file(cls, path: Union[str, Path], strict: bool = False) -> 'Trie':
        """Builds a trie from a newline-delimited word list file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list file not found: {path}")

        with path.open('r', encoding='utf-8') as handle:
            trie = cls.build((line.strip() for line in handle), strict=strict)

        logger.info("Loaded %d words from %s", trie.size, path)
        return trie

    @property
    def size(self) -> int:
        """Number of distinct words in the trie."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def contains(self, word: str) -> bool:
        """
        Checks if the word is in the dictionary.

        Raises:
            InvalidInputError: If the word has characters outside a-z. This is
                never reported as a plain False.
        """
        check_input(word)
        if not word:
            return False

        nodes = self._roots
        node = None
        for char in word:
            node = nodes[ord(char) - ORD_A]
            if node is None:
                return False
            nodes = node.children

        return node.leaf

    has_word = contains

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _insert(self, word: str) -> None:
        if self._frozen:
            raise RuntimeError("Trie is read-only once built")
        check_input(word)

        nodes = self._roots
        node = None
        for char in word:
            idx = ord(char) - ORD_A
            node = nodes[idx]
            if node is None:
                node = _Node()
                nodes[idx] = node
            nodes = node.children

        if node is not None and not node.leaf:
            node.leaf = True
            self._size += 1
