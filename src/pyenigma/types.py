"""Core data model: rotor kind enum, RotorDef catalogue entry, MachineConfig and MachineSettings."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .alphabet import Alphabet
from .errors import (
    BadReflectorError,
    BadRotorKindError,
    ConfigError,
    DuplicateNotchError,
    NotInAlphabetError,
)
from .permutation import Permutation

if TYPE_CHECKING:
    from .machine import Machine


class RotorKind(str, Enum):
    """Rotor kinds, valued by the letter that introduces them in a configuration."""

    REFLECTOR = "R"
    FIXED = "N"
    MOVING = "M"

    @property
    def rotates(self) -> bool:
        return self is RotorKind.MOVING


@dataclass(frozen=True)
class RotorDef:
    """Immutable catalogue entry: a named wiring of a given kind, with notches for moving rotors."""

    name: str
    kind: RotorKind
    permutation: Permutation
    notches: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigError("Rotor name cannot be empty")
        if self.kind is not RotorKind.MOVING and self.notches:
            raise BadRotorKindError(
                f"Rotor {self.name!r} of kind {self.kind.name.lower()} cannot have notches"
            )
        if self.kind is RotorKind.REFLECTOR:
            if not self.permutation.derangement():
                raise BadReflectorError(f"Reflector {self.name!r} wiring has a fixed point")
            if not self.permutation.involution():
                raise BadReflectorError(f"Reflector {self.name!r} wiring is not made of pairs")
        seen: set[str] = set()
        for notch in self.notches:
            if notch not in self.permutation.alphabet:
                raise NotInAlphabetError(notch, f"Notch {notch!r} of rotor {self.name!r} not in alphabet")
            if notch in seen:
                raise DuplicateNotchError(self.name, notch)
            seen.add(notch)

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet


@dataclass(frozen=True)
class MachineConfig:
    """Result of parsing a configuration: alphabet, slot shape and the rotor catalogue."""

    alphabet: Alphabet
    num_rotors: int
    pawls: int
    rotors: tuple[RotorDef, ...]

    def build(self) -> "Machine":
        """Return a new Machine with this shape and catalogue; no rotors inserted yet."""
        from .machine import Machine

        return Machine(self.alphabet, self.num_rotors, self.pawls, self.rotors)


@dataclass(frozen=True)
class MachineSettings:
    """Parsed setting line: slot rotor names, positions, optional rings, plugboard cycles."""

    rotors: tuple[str, ...]
    positions: str
    rings: str | None = None
    plugboard: str = ""
