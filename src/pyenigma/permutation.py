"""Permutation of an alphabet, built from cycle notation such as "(AELT) (BK) (S)"."""

import logging
import re

from .alphabet import Alphabet
from .errors import BadCycleError, NotInAlphabetError

logger = logging.getLogger(__name__)

# Zero or more parenthesized groups, whitespace allowed only between groups
_CYCLES_PATTERN = re.compile(r"\s*(?:\([^()\s]*\)\s*)*")
_GROUP_PATTERN = re.compile(r"\(([^()\s]*)\)")


def _parse_cycles(cycles: str, alphabet: Alphabet) -> tuple[str, ...]:
    """Validate cycle notation and return the non-empty cycles in order of appearance."""
    if not _CYCLES_PATTERN.fullmatch(cycles):
        raise BadCycleError(cycles)
    result: list[str] = []
    seen: set[str] = set()
    for group in _GROUP_PATTERN.findall(cycles):
        if not group:
            continue
        for ch in group:
            if ch not in alphabet:
                raise NotInAlphabetError(ch, f"Cycle character not in alphabet: {ch!r} in {cycles!r}")
            if ch in seen:
                raise BadCycleError(cycles, f"Character {ch!r} appears more than once in {cycles!r}")
            seen.add(ch)
        result.append(group)
    return tuple(result)


class Permutation:
    """
    A bijection over the indices of an alphabet. Characters not named in any
    cycle map to themselves. Immutable once built; forward and inverse tables
    are precomputed so both directions are O(1).
    """

    __slots__ = ("_alphabet", "_cycles", "_fwd", "_inv")

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._cycles = _parse_cycles(cycles, alphabet)
        n = alphabet.size()
        fwd = list(range(n))
        for cycle in self._cycles:
            for j, ch in enumerate(cycle):
                fwd[alphabet.to_int(ch)] = alphabet.to_int(cycle[(j + 1) % len(cycle)])
        inv = [0] * n
        for i, j in enumerate(fwd):
            inv[j] = i
        self._fwd = tuple(fwd)
        self._inv = tuple(inv)

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a wiring table: wiring[k] is where alphabet character k is sent."""
        return cls(wiring_to_cycles(wiring, alphabet), alphabet)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> tuple[str, ...]:
        return self._cycles

    def size(self) -> int:
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        """Return p modulo size(), always in [0, size())."""
        return p % self.size()

    def permute(self, p: int | str) -> int | str:
        """Apply the permutation to an index (wrapped) or to a character of the alphabet."""
        if isinstance(p, str):
            return self._alphabet.to_char(self._fwd[self._alphabet.to_int(p)])
        return self._fwd[self.wrap(p)]

    def invert(self, c: int | str) -> int | str:
        """Apply the inverse permutation to an index (wrapped) or to a character of the alphabet."""
        if isinstance(c, str):
            return self._alphabet.to_char(self._inv[self._alphabet.to_int(c)])
        return self._inv[self.wrap(c)]

    def derangement(self) -> bool:
        """True iff no character maps to itself."""
        return all(i != j for i, j in enumerate(self._fwd))

    def involution(self) -> bool:
        """True iff applying the permutation twice is the identity."""
        return self._fwd == self._inv

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._alphabet == other._alphabet and self._fwd == other._fwd

    def __hash__(self) -> int:
        return hash((self._alphabet, self._fwd))

    def __str__(self) -> str:
        return " ".join(f"({cycle})" for cycle in self._cycles)

    def __repr__(self) -> str:
        return f"Permutation({str(self)!r}, {self._alphabet!r})"


def wiring_to_cycles(wiring: str, alphabet: Alphabet) -> str:
    """
    Convert a wiring table into cycle notation, listing every cycle (fixed
    points included) starting from its earliest alphabet character.

    wiring must be a rearrangement of the alphabet's characters.
    """
    if sorted(wiring) != sorted(alphabet.chars):
        raise BadCycleError(wiring, f"Wiring {wiring!r} is not a rearrangement of {alphabet.chars!r}")
    visited: set[int] = set()
    groups: list[str] = []
    for start in range(alphabet.size()):
        if start in visited:
            continue
        cycle: list[str] = []
        i = start
        while i not in visited:
            visited.add(i)
            cycle.append(alphabet.to_char(i))
            i = alphabet.to_int(wiring[i])
        groups.append("(" + "".join(cycle) + ")")
    result = " ".join(groups)
    logger.debug("Wiring %s -> %s", wiring, result)
    return result
