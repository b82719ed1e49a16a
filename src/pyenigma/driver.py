"""Message driver: apply setting lines, convert message lines, group output in blocks of five."""

import logging
from typing import Iterable, Iterator, TextIO

from .errors import SlotShapeError
from .machine import Machine
from .settings import is_setting_line, setup
from .types import MachineConfig

logger = logging.getLogger(__name__)

GROUP_SIZE = 5


def format_message(msg: str, group_size: int = GROUP_SIZE) -> str:
    """Split msg into space-separated groups of group_size; the last group may be shorter."""
    return " ".join(msg[i:i + group_size] for i in range(0, len(msg), group_size))


def process_lines(machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """
    Yield one output line per message line. Setting lines reconfigure machine
    and yield nothing; blank lines yield empty lines. Whitespace inside a
    message is ignored.
    """
    configured = False
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if is_setting_line(line):
            setup(machine, line)
            configured = True
            logger.debug("Line %d: machine set to %s", lineno, machine.positions)
            continue
        msg = "".join(line.split())
        if not msg:
            yield ""
            continue
        if not configured:
            raise SlotShapeError(f"Line {lineno}: message before the first setting line")
        yield format_message(machine.convert(msg))


def run(config: MachineConfig, source: TextIO, sink: TextIO) -> int:
    """Build a machine from config, process every line of source into sink; return lines written."""
    machine = config.build()
    count = 0
    for out in process_lines(machine, source):
        sink.write(out + "\n")
        count += 1
    logger.debug("Processed %d message lines", count)
    return count
