"""Alphabet: an ordered set of distinct characters with index <-> character mapping."""

from .errors import BadAlphabetError, InvalidIndexError, NotInAlphabetError

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Alphabet:
    """
    The symbol space of a machine. Character number k has index k (from 0).
    Immutable; safe to share between permutations, rotors and machines.
    """

    __slots__ = ("_chars", "_index")

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise BadAlphabetError("Alphabet cannot be empty")
        index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch in index:
                raise BadAlphabetError(f"Duplicate character in alphabet: {ch!r}")
            index[ch] = i
        self._chars = chars
        self._index = index

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def to_char(self, index: int) -> str:
        """Return character number index; 0 <= index < size()."""
        if not 0 <= index < len(self._chars):
            raise InvalidIndexError(index, len(self._chars))
        return self._chars[index]

    def to_int(self, ch: str) -> int:
        """Return the index of ch, which must be in the alphabet. Inverse of to_char()."""
        try:
            return self._index[ch]
        except KeyError:
            raise NotInAlphabetError(ch) from None

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __iter__(self):
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __str__(self) -> str:
        return self._chars

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
