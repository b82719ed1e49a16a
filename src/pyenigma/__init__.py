"""pyenigma: Enigma rotor machine simulator over an arbitrary alphabet."""

__version__ = "0.1.0"

from .alphabet import Alphabet
from .config import load_config, load_default_config, parse_config
from .driver import format_message, process_lines, run
from .errors import (
    BadAlphabetError,
    BadCycleError,
    BadPlugboardError,
    BadReflectorError,
    BadRotorKindError,
    ConfigError,
    DuplicateNotchError,
    DuplicateRotorError,
    EnigmaError,
    InvalidIndexError,
    NotInAlphabetError,
    SlotShapeError,
    UnknownRotorError,
)
from .machine import Machine
from .permutation import Permutation, wiring_to_cycles
from .rotor import Rotor
from .settings import apply_settings, parse_setting_line, setup
from .types import MachineConfig, MachineSettings, RotorDef, RotorKind

__all__ = [
    "__version__",
    "Alphabet",
    "Machine",
    "MachineConfig",
    "MachineSettings",
    "Permutation",
    "Rotor",
    "RotorDef",
    "RotorKind",
    "apply_settings",
    "format_message",
    "load_config",
    "load_default_config",
    "parse_config",
    "parse_setting_line",
    "process_lines",
    "run",
    "setup",
    "wiring_to_cycles",
    "BadAlphabetError",
    "BadCycleError",
    "BadPlugboardError",
    "BadReflectorError",
    "BadRotorKindError",
    "ConfigError",
    "DuplicateNotchError",
    "DuplicateRotorError",
    "EnigmaError",
    "InvalidIndexError",
    "NotInAlphabetError",
    "SlotShapeError",
    "UnknownRotorError",
]
