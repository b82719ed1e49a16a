#!/usr/bin/env python3
"""
Dev-only: turn historical rotor wiring tables into cycle notation for configuration files.
Usage: python tools/wiring_to_cycles.py ALPHABET NAME KIND WIRING [NAME KIND WIRING ...]
Example: python tools/wiring_to_cycles.py ABCDEFGHIJKLMNOPQRSTUVWXYZ I MQ EKMFLGDQVZNTOWYHXUSPAIBRCJ
Prints one configuration line per rotor: NAME KIND (cycles...)
"""

import logging
import sys

from pyenigma import Alphabet, wiring_to_cycles
from pyenigma.errors import EnigmaError

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main() -> int:
    args = sys.argv[1:]
    if len(args) < 4 or (len(args) - 1) % 3 != 0:
        logger.error("Usage: %s ALPHABET NAME KIND WIRING [NAME KIND WIRING ...]", sys.argv[0])
        return 2
    try:
        alphabet = Alphabet(args[0])
    except EnigmaError as e:
        logger.error("%s", e)
        return 1
    for i in range(1, len(args), 3):
        name, kind, wiring = args[i:i + 3]
        try:
            cycles = wiring_to_cycles(wiring, alphabet)
        except EnigmaError as e:
            logger.error("Rotor %s: %s", name, e)
            return 1
        print(f"{name} {kind} {cycles}")
    logger.info("Converted %d rotors", (len(args) - 1) // 3)
    return 0


if __name__ == "__main__":
    sys.exit(main())
