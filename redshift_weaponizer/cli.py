"""Command that walks through weapon creation and prints the stat block."""

from __future__ import annotations

import argparse
import sys

from .assembler import assemble_weapon, format_stats
from .prompts import WeaponPrompter

_WELCOME = (
    "Welcome to the weaponizer!\n"
    "This program will walk you through weapon creation and output a stat block.\n"
    "It makes it very easy for the DM to generate weapons on the fly.\n\n"
    "Begin by deciding what weapon frame to begin with.\n"
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive weapon builder; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="redshift-weaponizer",
        description="Build a weapon part by part and print its stat block.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    out.write(_WELCOME)
    prompter = WeaponPrompter(sys.stdin, out)
    try:
        frame = prompter.get_frame()
        receiver = prompter.get_receiver()
        barrel = prompter.get_barrel()
        sight = prompter.get_sight(receiver)
    except EOFError as exc:
        sys.stderr.write(f"\n{exc}\n")
        return 1
    out.write(format_stats(assemble_weapon(frame, receiver, barrel, sight)))
    return 0


if __name__ == "__main__":
    sys.exit(main())