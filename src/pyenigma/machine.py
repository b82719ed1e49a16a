"""Machine: ordered rotor slots, plugboard, double stepping and the per-character substitution."""

import logging
from typing import Iterable, Sequence

from .alphabet import Alphabet
from .errors import (
    BadPlugboardError,
    BadReflectorError,
    DuplicateRotorError,
    NotInAlphabetError,
    SlotShapeError,
    UnknownRotorError,
)
from .permutation import Permutation
from .rotor import Rotor
from .types import RotorDef, RotorKind

logger = logging.getLogger(__name__)


class Machine:
    """
    An Enigma machine with num_rotors slots, the rightmost pawls of which hold
    moving rotors. Slot 0 is the reflector and the last slot is the fast rotor.

    Rotors are chosen by name from the catalogue given at construction; each
    insert_rotors() call clones fresh Rotor instances, so the catalogue is
    never mutated and can be shared by many machines.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[RotorDef],
    ) -> None:
        if num_rotors <= 1:
            raise SlotShapeError(f"A machine needs more than one rotor slot, got {num_rotors}")
        if not 0 <= pawls < num_rotors:
            raise SlotShapeError(f"Pawls must be in 0..{num_rotors - 1}, got {pawls}")
        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls
        self._catalogue: dict[str, RotorDef] = {}
        for defn in all_rotors:
            if defn.name in self._catalogue:
                raise DuplicateRotorError(defn.name, f"Duplicate rotor in catalogue: {defn.name!r}")
            self._catalogue[defn.name] = defn
        self._slots: list[Rotor] = []
        self._plugboard = Permutation("", alphabet)
        logger.debug(
            "Machine created: %d slots, %d pawls, %d rotors available",
            num_rotors,
            pawls,
            len(self._catalogue),
        )

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def num_rotors(self) -> int:
        return self._num_rotors

    @property
    def num_pawls(self) -> int:
        return self._pawls

    @property
    def catalogue(self) -> dict[str, RotorDef]:
        return dict(self._catalogue)

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return tuple(self._slots)

    @property
    def rotor_names(self) -> tuple[str, ...]:
        return tuple(rotor.name for rotor in self._slots)

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    @property
    def positions(self) -> str:
        """Current positions of slots 1..num_rotors-1, as alphabet characters."""
        return "".join(self._alphabet.to_char(rotor.setting) for rotor in self._slots[1:])

    def _require_rotors(self) -> None:
        if not self._slots:
            raise SlotShapeError("No rotors inserted")

    def _make_slots(self, rotors: Sequence[str]) -> list[Rotor]:
        """Validate rotor names and slot kinds; return fresh rotors without installing them."""
        if len(rotors) != self._num_rotors:
            raise SlotShapeError(f"Expected {self._num_rotors} rotor names, got {len(rotors)}")
        seen: set[str] = set()
        for name in rotors:
            if name not in self._catalogue:
                raise UnknownRotorError(name)
            if name in seen:
                raise DuplicateRotorError(name, f"Rotor {name!r} used in more than one slot")
            seen.add(name)

        defs = [self._catalogue[name] for name in rotors]
        if defs[0].kind is not RotorKind.REFLECTOR:
            raise BadReflectorError(f"First rotor must be a reflector, got {defs[0].name!r}")
        if self._pawls == 0:
            raise SlotShapeError("Machine has no pawls; the last slot must hold a moving rotor")
        if defs[-1].kind is not RotorKind.MOVING:
            raise SlotShapeError(f"Last slot must hold a moving rotor, got {defs[-1].name!r}")
        first_moving = self._num_rotors - self._pawls
        for i, defn in enumerate(defs[1:], start=1):
            if defn.kind is RotorKind.REFLECTOR:
                raise BadReflectorError(f"Reflector {defn.name!r} can only go in the first slot")
            if i < first_moving and defn.kind is not RotorKind.FIXED:
                raise SlotShapeError(f"Slot {i} must hold a fixed rotor, got {defn.name!r}")
            if i >= first_moving and defn.kind is not RotorKind.MOVING:
                raise SlotShapeError(f"Slot {i} must hold a moving rotor, got {defn.name!r}")
        return [Rotor(defn) for defn in defs]

    def insert_rotors(self, rotors: Sequence[str]) -> None:
        """
        Fill the slots with the catalogue rotors named in rotors, leftmost
        (the reflector) first. Every slot starts at position 0 and ring 0.
        """
        self._slots = self._make_slots(rotors)
        logger.debug("Rotors inserted: %s", " ".join(rotors))

    def configure(
        self,
        rotors: Sequence[str],
        setting: str,
        rings: str | None = None,
        plugboard: Permutation | None = None,
    ) -> None:
        """
        Insert rotors, set positions, rings and plugboard in one go. Everything
        is checked first; on any error the machine is left as it was.
        """
        slots = self._make_slots(rotors)
        self._check_setting_shape(setting, "setting")
        if rings is not None:
            self._check_setting_shape(rings, "ring setting")
        if plugboard is not None:
            self._check_plugboard(plugboard)

        for rotor, ch in zip(slots[1:], setting):
            rotor.set(ch)
        if rings is not None:
            for rotor, ch in zip(slots[1:], rings):
                rotor.set_ring(ch)
        self._slots = slots
        if plugboard is not None:
            self._plugboard = plugboard
        logger.debug("Machine configured: %s at %s", " ".join(rotors), setting)

    def set_rotors(self, setting: str) -> None:
        """
        Set positions from setting, a string of num_rotors-1 alphabet characters.
        The first character is for slot 1; the reflector is not set.
        """
        self._require_rotors()
        self._check_setting_shape(setting, "setting")
        for rotor, ch in zip(self._slots[1:], setting):
            rotor.set(ch)

    def set_rings(self, rings: str) -> None:
        """Set ring offsets from rings, shaped like the argument of set_rotors()."""
        self._require_rotors()
        self._check_setting_shape(rings, "ring setting")
        for rotor, ch in zip(self._slots[1:], rings):
            rotor.set_ring(ch)

    def _check_setting_shape(self, setting: str, what: str) -> None:
        if len(setting) != self._num_rotors - 1:
            raise SlotShapeError(
                f"{what.capitalize()} {setting!r} must have {self._num_rotors - 1} characters"
            )
        for ch in setting:
            if ch not in self._alphabet:
                raise NotInAlphabetError(ch, f"{what.capitalize()} character not in alphabet: {ch!r}")

    def _check_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self._alphabet:
            raise BadPlugboardError("Plugboard alphabet does not match the machine's")
        for cycle in plugboard.cycles:
            if len(cycle) > 2:
                raise BadPlugboardError(f"Plugboard can only swap pairs, got ({cycle})")

    def set_plugboard(self, plugboard: Permutation) -> None:
        """Install plugboard, which may only swap pairs of characters."""
        self._check_plugboard(plugboard)
        self._plugboard = plugboard

    def step(self) -> tuple[int, ...]:
        """
        Advance the rotors as for one key press and return the advanced slot
        indices. The fast rotor always steps; a moving rotor steps when its
        right neighbour is at a notch, or when it is itself at a notch and its
        left neighbour rotates (the double step). All decisions read the
        positions from before any rotor moves.
        """
        self._require_rotors()
        slots = self._slots
        fast = self._num_rotors - 1
        advancing = [fast]
        for i in range(self._num_rotors - self._pawls, fast):
            if slots[i + 1].at_notch() or (slots[i].at_notch() and slots[i - 1].rotates()):
                advancing.append(i)
        for i in advancing:
            slots[i].advance()
        return tuple(sorted(advancing))

    def _convert_index(self, c: int) -> int:
        self.step()
        c = self._plugboard.permute(c)
        for rotor in reversed(self._slots):
            c = rotor.convert_forward(c)
        for rotor in self._slots[1:]:
            c = rotor.convert_backward(c)
        return self._plugboard.permute(c)

    def convert(self, msg: int | str) -> int | str:
        """
        Convert an index (returning an index) or a message string (returning a
        string), advancing the machine before each character.
        """
        self._require_rotors()
        if isinstance(msg, str):
            for ch in msg:
                if ch not in self._alphabet:
                    raise NotInAlphabetError(ch, f"Message character not in alphabet: {ch!r}")
            to_int = self._alphabet.to_int
            to_char = self._alphabet.to_char
            return "".join(to_char(self._convert_index(to_int(ch))) for ch in msg)
        return self._convert_index(msg)
