"""Parse and apply setting lines: "* B Beta III IV I AXLE [RINGS] (YF) (ZH)"."""

import logging
import re

from .errors import BadCycleError, BadPlugboardError, NotInAlphabetError, SlotShapeError
from .machine import Machine
from .permutation import Permutation
from .types import MachineSettings

logger = logging.getLogger(__name__)

SETTING_MARKER = "*"

# A plugboard token: one or more parenthesized groups
_PLUG_TOKEN = re.compile(r"(?:\([^()]*\))+")


def is_setting_line(line: str) -> bool:
    """True iff the first non-blank character of line is the setting marker."""
    return line.lstrip().startswith(SETTING_MARKER)


def parse_setting_line(line: str, num_rotors: int) -> MachineSettings:
    """
    Split a setting line into rotor names, positions, optional rings and
    plugboard cycles. Checks shape only; names and characters are checked
    when the settings are applied to a machine.

    Raises SlotShapeError for a malformed line and BadPlugboardError for a
    malformed plugboard token.
    """
    tokens = line.split()
    if not tokens or tokens[0] != SETTING_MARKER:
        raise SlotShapeError(f"Setting line must start with {SETTING_MARKER!r} token: {line!r}")
    rest = tokens[1:]
    if len(rest) < num_rotors + 1:
        raise SlotShapeError(f"Setting line needs {num_rotors} rotor names and a position setting: {line!r}")

    rotors = tuple(rest[:num_rotors])
    for name in rotors:
        if name.startswith("("):
            raise SlotShapeError(f"Expected {num_rotors} rotor names before plugboard: {line!r}")
    positions = rest[num_rotors]
    if "(" in positions or ")" in positions:
        raise SlotShapeError(f"Position setting cannot contain parentheses: {positions!r}")

    extra = rest[num_rotors + 1:]
    rings: str | None = None
    if extra and "(" not in extra[0]:
        rings = extra[0]
        extra = extra[1:]
        if ")" in rings:
            raise SlotShapeError(f"Ring setting cannot contain parentheses: {rings!r}")
    for token in extra:
        if not token.startswith("("):
            raise SlotShapeError(f"Unexpected token {token!r} in setting line; plugboard cycles must be parenthesized")
        if not _PLUG_TOKEN.fullmatch(token):
            raise BadPlugboardError(f"Malformed plugboard token: {token!r}")

    return MachineSettings(rotors=rotors, positions=positions, rings=rings, plugboard=" ".join(extra))


def apply_settings(machine: Machine, settings: MachineSettings) -> None:
    """
    Insert rotors, set positions and rings, and install the plugboard on
    machine. Nothing changes unless every part of settings is valid.
    """
    try:
        plugboard = Permutation(settings.plugboard, machine.alphabet)
    except NotInAlphabetError as e:
        raise BadPlugboardError(f"Plugboard character not in alphabet: {e.char!r}") from e
    except BadCycleError as e:
        raise BadPlugboardError(f"Malformed plugboard: {e}") from e
    machine.configure(settings.rotors, settings.positions, settings.rings, plugboard)
    logger.debug(
        "Machine set: rotors=%s positions=%s rings=%s plugboard=%s",
        " ".join(settings.rotors),
        settings.positions,
        settings.rings,
        settings.plugboard or "-",
    )


def setup(machine: Machine, line: str) -> MachineSettings:
    """Parse a setting line and apply it to machine; returns the parsed settings."""
    settings = parse_setting_line(line, machine.num_rotors)
    apply_settings(machine, settings)
    return settings
