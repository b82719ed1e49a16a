"""Configuration parser: alphabet, slot shape and rotor catalogue; packaged default via importlib.resources."""

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from .alphabet import Alphabet
from .errors import (
    BadAlphabetError,
    BadRotorKindError,
    ConfigError,
    DuplicateRotorError,
    SlotShapeError,
)
from .permutation import Permutation
from .types import MachineConfig, RotorDef, RotorKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PACKAGE = "pyenigma.data"
DEFAULT_CONFIG_NAME = "default.conf"

# Characters with a meaning of their own in configurations and setting lines
_RESERVED = frozenset("()*")


@dataclass
class _ParserState:
    """Token stream and cursor, passed explicitly to every reader helper."""

    tokens: list[str]
    pos: int = 0

    def peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def next(self, expected: str) -> str:
        token = self.peek()
        if token is None:
            raise ConfigError(f"Configuration truncated: expected {expected}")
        self.pos += 1
        return token


def _read_int(state: _ParserState, expected: str) -> int:
    token = state.next(expected)
    try:
        return int(token)
    except ValueError:
        raise ConfigError(f"Expected {expected} as an integer, got {token!r}", token=token) from None


def _read_rotor(state: _ParserState, alphabet: Alphabet) -> RotorDef:
    """Read one rotor description: name, kind token (with notches), then cycle tokens."""
    name = state.next("rotor name")
    if name.startswith("("):
        raise ConfigError(f"Expected rotor name, got cycles {name!r}", token=name)
    kind_token = state.next(f"kind of rotor {name!r}")
    try:
        kind = RotorKind(kind_token[0])
    except ValueError:
        raise BadRotorKindError(f"Unknown kind {kind_token[0]!r} for rotor {name!r}") from None

    cycles: list[str] = []
    while (token := state.peek()) is not None and token.startswith("("):
        cycles.append(state.next("cycles"))
    if not cycles:
        raise ConfigError(f"Bad rotor description: rotor {name!r} has no cycles", token=name)

    permutation = Permutation(" ".join(cycles), alphabet)
    return RotorDef(name=name, kind=kind, permutation=permutation, notches=kind_token[1:])


def parse_config(text: str) -> MachineConfig:
    """
    Parse a configuration: alphabet, number of slots, number of pawls, then
    rotor descriptions such as "I MQ (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)".
    """
    state = _ParserState(text.split())

    chars = state.next("alphabet")
    reserved = _RESERVED.intersection(chars)
    if reserved:
        raise BadAlphabetError(f"Alphabet cannot contain {''.join(sorted(reserved))!r}")
    alphabet = Alphabet(chars)

    num_rotors = _read_int(state, "number of rotor slots")
    pawls = _read_int(state, "number of pawls")
    if num_rotors <= 1:
        raise SlotShapeError(f"A machine needs more than one rotor slot, got {num_rotors}")
    if not 0 <= pawls < num_rotors:
        raise SlotShapeError(f"Pawls must be in 0..{num_rotors - 1}, got {pawls}")

    rotors: list[RotorDef] = []
    names: set[str] = set()
    while state.peek() is not None:
        defn = _read_rotor(state, alphabet)
        if defn.name in names:
            raise DuplicateRotorError(defn.name, f"Duplicate rotor in configuration: {defn.name!r}")
        names.add(defn.name)
        rotors.append(defn)

    logger.debug(
        "Configuration parsed: alphabet of %d, %d slots, %d pawls, %d rotors",
        alphabet.size(),
        num_rotors,
        pawls,
        len(rotors),
    )
    return MachineConfig(alphabet=alphabet, num_rotors=num_rotors, pawls=pawls, rotors=tuple(rotors))


def load_config(path: str | Path) -> MachineConfig:
    """Read and parse the configuration file at path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not open {path}: {e.strerror or e}") from e
    logger.debug("Loading configuration from %s", path)
    return parse_config(text)


def load_default_config() -> MachineConfig:
    """Parse the packaged default configuration (historical rotors I-V, Beta, Gamma, B, C)."""
    try:
        text = resources.files(DEFAULT_CONFIG_PACKAGE).joinpath(DEFAULT_CONFIG_NAME).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Default configuration not found: {DEFAULT_CONFIG_PACKAGE}/{DEFAULT_CONFIG_NAME}") from None
    return parse_config(text)
