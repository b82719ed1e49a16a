#!/usr/bin/env python3
"""Example: set up an M4 naval Enigma from the packaged rotors, encipher and decipher a message."""

import sys

from pyenigma import Permutation, load_default_config
from pyenigma.errors import EnigmaError, NotInAlphabetError, SlotShapeError


def main() -> None:
    config = load_default_config()
    message = "WEATHERREPORTNORTHSEA"

    try:
        machine = config.build()
        machine.insert_rotors(["B", "Beta", "III", "IV", "I"])
        machine.set_rotors("AXLE")
        machine.set_rings("AAAB")
        machine.set_plugboard(Permutation("(HQ) (EX) (IP) (TR) (BY)", machine.alphabet))
        print(f"rotors {' '.join(machine.rotor_names)} at {machine.positions}")

        cipher = machine.convert(message)
        print(f"cipher: {cipher} (rotors now at {machine.positions})")

        # Same starting positions deciphers
        machine.set_rotors("AXLE")
        print(f"plain:  {machine.convert(cipher)}")
    except NotInAlphabetError as e:
        print(f"Not in alphabet: {e}", file=sys.stderr)
        sys.exit(1)
    except SlotShapeError as e:
        print(f"Bad rotor setup: {e}", file=sys.stderr)
        sys.exit(1)
    except EnigmaError as e:
        print(f"Enigma error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
