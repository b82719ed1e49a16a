"""Rotor: a machine slot's wheel, cloned from a RotorDef, carrying position and ring setting."""

from .alphabet import Alphabet
from .errors import BadReflectorError
from .permutation import Permutation
from .types import RotorDef, RotorKind


class Rotor:
    """
    Mutable wheel installed in a machine slot. Wiring, kind and notches come
    from the shared RotorDef; position and ring belong to this instance only.

    Contact numbers are converted into wiring coordinates by adding the
    position and subtracting the ring, then converted back after the wiring.
    """

    __slots__ = ("_defn", "_setting", "_ring")

    def __init__(self, defn: RotorDef) -> None:
        self._defn = defn
        self._setting = 0
        self._ring = 0

    @property
    def defn(self) -> RotorDef:
        return self._defn

    @property
    def name(self) -> str:
        return self._defn.name

    @property
    def kind(self) -> RotorKind:
        return self._defn.kind

    @property
    def notches(self) -> str:
        return self._defn.notches

    @property
    def permutation(self) -> Permutation:
        return self._defn.permutation

    @property
    def alphabet(self) -> Alphabet:
        return self._defn.alphabet

    def size(self) -> int:
        return self.alphabet.size()

    def rotates(self) -> bool:
        return self._defn.kind.rotates

    def reflecting(self) -> bool:
        return self._defn.kind is RotorKind.REFLECTOR

    @property
    def setting(self) -> int:
        return self._setting

    @property
    def ring(self) -> int:
        return self._ring

    def _index(self, value: int | str) -> int:
        if isinstance(value, str):
            return self.alphabet.to_int(value)
        return self.permutation.wrap(value)

    def set(self, posn: int | str) -> None:
        """Set the position to an index (wrapped) or to the index of an alphabet character."""
        index = self._index(posn)
        if self.reflecting() and index != 0:
            raise BadReflectorError(f"Reflector {self.name!r} must stay at position 0")
        self._setting = index

    def set_ring(self, ring: int | str) -> None:
        """Set the ring offset (Ringstellung) to an index or alphabet character."""
        index = self._index(ring)
        if self.reflecting() and index != 0:
            raise BadReflectorError(f"Reflector {self.name!r} cannot have a ring setting")
        self._ring = index

    def at_notch(self) -> bool:
        """True iff this is a moving rotor whose current position is one of its notches."""
        if not self.rotates():
            return False
        return self.alphabet.to_char(self._setting) in self._defn.notches

    def advance(self) -> None:
        """Step a moving rotor one position; fixed rotors and reflectors never move."""
        if self.rotates():
            self._setting = self.permutation.wrap(self._setting + 1)

    def convert_forward(self, p: int) -> int:
        """Convert contact p entering the right face to the contact leaving the left face."""
        shift = self._setting - self._ring
        return self.permutation.wrap(self.permutation.permute(p + shift) - shift)

    def convert_backward(self, e: int) -> int:
        """Convert contact e entering the left face to the contact leaving the right face."""
        shift = self._setting - self._ring
        return self.permutation.wrap(self.permutation.invert(e + shift) - shift)

    def __repr__(self) -> str:
        return (
            f"Rotor({self.name!r}, kind={self.kind.name}, "
            f"setting={self.alphabet.to_char(self._setting)!r}, ring={self.alphabet.to_char(self._ring)!r})"
        )
