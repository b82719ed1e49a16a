"""Exceptions for pyenigma: one base class, one subclass per kind of contract violation."""


class EnigmaError(Exception):
    """Base exception for pyenigma. The message is the human-readable reason."""

    pass


class NotInAlphabetError(EnigmaError):
    """Raised when a character outside the alphabet is presented."""

    def __init__(self, char: str, message: str | None = None) -> None:
        self.char = char
        super().__init__(message or f"Character not in alphabet: {char!r}")


class InvalidIndexError(EnigmaError):
    """Raised on out-of-range numeric access into an alphabet."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range 0..{size - 1}")


class BadAlphabetError(EnigmaError):
    """Raised when an alphabet is empty, repeats a character, or uses a reserved one."""

    pass


class BadCycleError(EnigmaError):
    """Raised for malformed cycle notation or a character repeated across cycles."""

    def __init__(self, cycles: str, message: str | None = None) -> None:
        self.cycles = cycles
        super().__init__(message or f"Malformed cycles: {cycles!r}")


class BadReflectorError(EnigmaError):
    """Raised when reflector wiring is not a fixed-point-free involution, or a reflector is moved."""

    pass


class BadRotorKindError(EnigmaError):
    """Raised for an unknown rotor kind letter or notches on a non-moving rotor."""

    pass


class DuplicateNotchError(EnigmaError):
    """Raised when a moving rotor lists the same notch twice."""

    def __init__(self, rotor: str, notch: str) -> None:
        self.rotor = rotor
        self.notch = notch
        super().__init__(f"Duplicate notch {notch!r} on rotor {rotor!r}")


class DuplicateRotorError(EnigmaError):
    """Raised when a rotor name is repeated in a catalogue or in the machine's slots."""

    def __init__(self, rotor: str, message: str | None = None) -> None:
        self.rotor = rotor
        super().__init__(message or f"Duplicate rotor: {rotor!r}")


class UnknownRotorError(EnigmaError):
    """Raised when a slot names a rotor that is not in the catalogue."""

    def __init__(self, rotor: str) -> None:
        self.rotor = rotor
        super().__init__(f"Unknown rotor: {rotor!r}")


class BadPlugboardError(EnigmaError):
    """Raised when a plugboard has a cycle longer than two or a non-alphabet character."""

    pass


class SlotShapeError(EnigmaError):
    """Raised for wrong slot counts, setting lengths, slot kinds, or pawl counts."""

    pass


class ConfigError(EnigmaError):
    """Raised when a configuration source is truncated or malformed."""

    def __init__(self, message: str, *, token: str | None = None) -> None:
        self.token = token
        super().__init__(message)
