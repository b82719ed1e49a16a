#!/usr/bin/env python3
"""Command-line interface for pyenigma using Typer."""

import json
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, TextIO

import typer
from typing_extensions import Annotated

from . import __version__  # type: ignore
from .config import load_config, load_default_config
from .driver import process_lines
from .errors import EnigmaError
from .types import MachineConfig

app = typer.Typer(
    name="pyenigma",
    help="Enigma machine simulator: encipher and decipher message files.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Shared options and helpers
# ============================================================================

ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Machine configuration file (default: packaged historical rotors)",
        envvar="PYENIGMA_CONFIG",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Output as JSON"),
]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if not verbose else "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_config(path: Optional[Path]) -> MachineConfig:
    """Load the configuration at path, or the packaged default when path is None."""
    if path is None:
        logger.debug("Using packaged default configuration")
        return load_default_config()
    return load_config(path)


@contextmanager
def open_stream(path: Optional[Path], mode: str, default: TextIO) -> Iterator[TextIO]:
    """Open path as a text stream, or yield default (left open) when path is None."""
    if path is None:
        yield default
        return
    try:
        f = open(path, mode, encoding="utf-8")
    except OSError as e:
        raise EnigmaError(f"Could not open {path}: {e.strerror or e}") from e
    with f:
        yield f


def describe_config(config: MachineConfig) -> dict[str, Any]:
    """Summarize a configuration as plain data for display."""
    return {
        "alphabet": config.alphabet.chars,
        "num_rotors": config.num_rotors,
        "pawls": config.pawls,
        "rotors": [
            {
                "name": defn.name,
                "kind": defn.kind.name.lower(),
                "notches": defn.notches,
                "cycles": str(defn.permutation),
            }
            for defn in config.rotors
        ],
    }


# ============================================================================
# Commands
# ============================================================================

@app.command()
def convert(
    input_file: Annotated[
        Optional[Path], typer.Argument(help="Input with setting and message lines (default: standard input)")
    ] = None,
    output_file: Annotated[
        Optional[Path], typer.Argument(help="Where to write converted messages (default: standard output)")
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Encipher or decipher the messages in INPUT_FILE.

    Lines starting with '*' set up the machine, e.g. "* B Beta III IV I AXLE (HQ) (EX)".
    Every other line is converted and written in groups of five letters.
    Exits with status 1 on any configuration or message error.
    """
    setup_logging(verbose)

    try:
        machine = get_config(config).build()
        with open_stream(input_file, "r", sys.stdin) as source, open_stream(output_file, "w", sys.stdout) as sink:
            for line in process_lines(machine, source):
                sink.write(line + "\n")
    except EnigmaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"Error: Unexpected error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        raise typer.Exit(4)


@app.command()
def info(
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
) -> None:
    """
    Show the alphabet, slot shape and rotor catalogue of a configuration.

    Without --config: describes the packaged default configuration.
    """
    setup_logging(verbose)

    try:
        data = describe_config(get_config(config))
    except EnigmaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(data, indent=2))
        return
    typer.echo(f"Alphabet:  {data['alphabet']}")
    typer.echo(f"Slots:     {data['num_rotors']}")
    typer.echo(f"Pawls:     {data['pawls']}")
    for rotor in data["rotors"]:
        notches = f" notches={rotor['notches']}" if rotor["notches"] else ""
        typer.echo(f"  {rotor['name']:<8} {rotor['kind']:<9}{notches} {rotor['cycles']}")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"pyenigma {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """pyenigma - Enigma machine simulator over any alphabet."""
    pass


if __name__ == "__main__":
    app()
