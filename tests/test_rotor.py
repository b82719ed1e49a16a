"""Tests for RotorDef validation and Rotor position, ring, notch and conversion behavior."""

import pytest

from pyenigma import Alphabet, Permutation, Rotor, RotorDef, RotorKind
from pyenigma.errors import (
    BadReflectorError,
    BadRotorKindError,
    DuplicateNotchError,
    NotInAlphabetError,
)

ALPHA = Alphabet()
ROTOR_I = Permutation("(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)", ALPHA)
REFLECTOR_B = Permutation("(AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO) (TZ) (VW)", ALPHA)


def moving_i() -> Rotor:
    return Rotor(RotorDef("I", RotorKind.MOVING, ROTOR_I, "Q"))


def test_new_rotor_starts_at_zero() -> None:
    rotor = moving_i()
    assert rotor.setting == 0
    assert rotor.ring == 0
    assert rotor.name == "I"
    assert rotor.rotates()


def test_set_by_char_and_index() -> None:
    rotor = moving_i()
    rotor.set("C")
    assert rotor.setting == 2
    rotor.set(27)
    assert rotor.setting == 1


def test_set_not_in_alphabet_raises() -> None:
    with pytest.raises(NotInAlphabetError):
        moving_i().set("a")


def test_convert_forward_at_origin_follows_wiring() -> None:
    rotor = moving_i()
    assert rotor.convert_forward(ALPHA.to_int("A")) == ALPHA.to_int("E")
    assert rotor.convert_backward(ALPHA.to_int("E")) == ALPHA.to_int("A")


def test_convert_forward_with_position() -> None:
    rotor = moving_i()
    rotor.set("B")
    assert rotor.convert_forward(ALPHA.to_int("A")) == ALPHA.to_int("J")


def test_convert_forward_with_ring() -> None:
    rotor = moving_i()
    rotor.set_ring("B")
    assert rotor.convert_forward(ALPHA.to_int("A")) == ALPHA.to_int("K")


@pytest.mark.parametrize(("posn", "ring"), [("A", "A"), ("Q", "A"), ("D", "X"), ("Z", "B")])
def test_backward_inverts_forward(posn: str, ring: str) -> None:
    rotor = moving_i()
    rotor.set(posn)
    rotor.set_ring(ring)
    for c in range(ALPHA.size()):
        assert rotor.convert_backward(rotor.convert_forward(c)) == c


def test_at_notch_and_advance() -> None:
    rotor = moving_i()
    rotor.set("P")
    assert not rotor.at_notch()
    rotor.advance()
    assert rotor.setting == ALPHA.to_int("Q")
    assert rotor.at_notch()


def test_advance_wraps() -> None:
    rotor = moving_i()
    rotor.set("Z")
    rotor.advance()
    assert rotor.setting == 0


def test_fixed_rotor_never_steps() -> None:
    rotor = Rotor(RotorDef("Beta", RotorKind.FIXED, ROTOR_I))
    rotor.set("D")
    rotor.advance()
    assert rotor.setting == 3
    assert not rotor.rotates()
    assert not rotor.at_notch()


def test_reflector_must_stay_at_zero() -> None:
    rotor = Rotor(RotorDef("B", RotorKind.REFLECTOR, REFLECTOR_B))
    rotor.set("A")
    assert rotor.setting == 0
    assert not rotor.rotates()
    assert not rotor.at_notch()
    with pytest.raises(BadReflectorError):
        rotor.set("B")
    with pytest.raises(BadReflectorError):
        rotor.set_ring("C")


def test_reflector_with_fixed_point_raises() -> None:
    with pytest.raises(BadReflectorError):
        RotorDef("X", RotorKind.REFLECTOR, Permutation("(AB)", Alphabet("ABC")))


def test_reflector_not_an_involution_raises() -> None:
    with pytest.raises(BadReflectorError):
        RotorDef("X", RotorKind.REFLECTOR, Permutation("(ABCD)", Alphabet("ABCD")))


@pytest.mark.parametrize("kind", [RotorKind.REFLECTOR, RotorKind.FIXED])
def test_notches_on_non_moving_rotor_raise(kind: RotorKind) -> None:
    with pytest.raises(BadRotorKindError):
        RotorDef("X", kind, Permutation("(AB)(CD)", Alphabet("ABCD")), "A")


def test_duplicate_notch_raises() -> None:
    with pytest.raises(DuplicateNotchError) as exc_info:
        RotorDef("VI", RotorKind.MOVING, ROTOR_I, "ZMZ")
    assert exc_info.value.notch == "Z"


def test_notch_not_in_alphabet_raises() -> None:
    with pytest.raises(NotInAlphabetError):
        RotorDef("I", RotorKind.MOVING, ROTOR_I, "q")


def test_clones_do_not_share_position() -> None:
    defn = RotorDef("I", RotorKind.MOVING, ROTOR_I, "Q")
    first, second = Rotor(defn), Rotor(defn)
    first.advance()
    assert first.setting == 1
    assert second.setting == 0
