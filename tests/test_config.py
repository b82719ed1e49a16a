"""Tests for configuration parsing and the packaged default configuration."""

from pathlib import Path

import pytest

from pyenigma import RotorKind, load_config, load_default_config, parse_config
from pyenigma.errors import (
    BadAlphabetError,
    BadCycleError,
    BadReflectorError,
    BadRotorKindError,
    ConfigError,
    DuplicateNotchError,
    DuplicateRotorError,
    NotInAlphabetError,
    SlotShapeError,
)

SMALL_CONFIG = """
ABCD 3 1
R1 R (AB) (CD)
F1 N (ABC)
M1 MAC (AD)(BC)
"""


def test_parse_small_config() -> None:
    config = parse_config(SMALL_CONFIG)
    assert config.alphabet.chars == "ABCD"
    assert config.num_rotors == 3
    assert config.pawls == 1
    assert [r.name for r in config.rotors] == ["R1", "F1", "M1"]
    assert [r.kind for r in config.rotors] == [RotorKind.REFLECTOR, RotorKind.FIXED, RotorKind.MOVING]
    assert config.rotors[2].notches == "AC"
    assert config.rotors[2].permutation.cycles == ("AD", "BC")


def test_parsed_config_builds_working_machine() -> None:
    machine = parse_config(SMALL_CONFIG).build()
    machine.insert_rotors(["R1", "F1", "M1"])
    machine.set_rotors("AB")
    cipher = machine.convert("ABCDDCBA")
    machine.set_rotors("AB")
    assert machine.convert(cipher) == "ABCDDCBA"


def test_default_config() -> None:
    config = load_default_config()
    assert config.alphabet.chars == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert config.num_rotors == 5
    assert config.pawls == 3
    kinds = {r.name: r.kind for r in config.rotors}
    assert kinds == {
        "I": RotorKind.MOVING,
        "II": RotorKind.MOVING,
        "III": RotorKind.MOVING,
        "IV": RotorKind.MOVING,
        "V": RotorKind.MOVING,
        "Beta": RotorKind.FIXED,
        "Gamma": RotorKind.FIXED,
        "B": RotorKind.REFLECTOR,
        "C": RotorKind.REFLECTOR,
    }
    notches = {r.name: r.notches for r in config.rotors if r.kind is RotorKind.MOVING}
    assert notches == {"I": "Q", "II": "E", "III": "V", "IV": "J", "V": "Z"}


def test_default_config_wirings_are_historical() -> None:
    expected = {
        "I": "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
        "II": "AJDKSIRUXBLHWTMCQGZNPYFVOE",
        "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
        "IV": "ESOVPZJAYQUIRHXLNFTGKDCMWB",
        "V": "VZBRGITYUPSDNHLXAWMJQOFECK",
        "Beta": "LEYJVCNIXWPBQMDRTAKZGFUHOS",
        "Gamma": "FSOKANUERHMBTIYCWLQPZXVGJD",
        "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
        "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
    }
    config = load_default_config()
    for defn in config.rotors:
        wiring = "".join(defn.permutation.permute(ch) for ch in config.alphabet)
        assert wiring == expected[defn.name], defn.name


def test_load_config_from_file(tmp_path: Path) -> None:
    path = tmp_path / "small.conf"
    path.write_text(SMALL_CONFIG, encoding="utf-8")
    assert load_config(path) == parse_config(SMALL_CONFIG)


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Could not open"):
        load_config(tmp_path / "missing.conf")


def test_cycles_may_span_tokens_and_lines() -> None:
    config = parse_config("ABCDEF 2 1\nR R (AB)\n  (CD)\n  (EF)\nM M (ABCDEF)")
    assert config.rotors[0].permutation.cycles == ("AB", "CD", "EF")


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("", ConfigError),
        ("ABCD", ConfigError),
        ("ABCD 3", ConfigError),
        ("ABCD three 1", ConfigError),
        ("ABCD 3 x", ConfigError),
        ("AB*D 3 1", BadAlphabetError),
        ("AB(D 3 1", BadAlphabetError),
        ("ABCA 3 1", BadAlphabetError),
        ("ABCD 1 0", SlotShapeError),
        ("ABCD 3 3", SlotShapeError),
        ("ABCD 3 -1", SlotShapeError),
        ("ABCD 3 1 R1", ConfigError),
        ("ABCD 3 1 R1 R", ConfigError),
        ("ABCD 3 1 (AB) R (CD)", ConfigError),
        ("ABCD 3 1 R1 R (AB)(CD) M1 MA", ConfigError),
        ("ABCD 3 1 X1 X (AB)(CD)", BadRotorKindError),
        ("ABCD 3 1 R1 RA (AB)(CD)", BadRotorKindError),
        ("ABCD 3 1 F1 NA (AB)", BadRotorKindError),
        ("ABCD 3 1 M1 MAA (AB)", DuplicateNotchError),
        ("ABCD 3 1 M1 ME (AB)", NotInAlphabetError),
        ("ABCD 3 1 R1 R (AB)", BadReflectorError),
        ("ABCD 3 1 M1 M (AB)(BC)", BadCycleError),
        ("ABCD 3 1 R1 R (AB)(CD) R1 R (AC)(BD)", DuplicateRotorError),
    ],
)
def test_bad_config_raises(text: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        parse_config(text)
