"""Interactive menus that ask for each weapon part and check compatibility."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INVALID_INPUT = "Invalid input. Please enter a digit only.\n"
_INVALID_CHOICE = "Invalid choice. Please try again.\n\n"

_FRAME_MENU = (
    "\n\nSelect a Frame:\n"
    "1. Physical Frame\n"
    "2. Plasma Frame\n"
    "3. Laser Frame\n"
    "4. Explosive Frame\n\n"
    "Enter your choice: "
)
_RECEIVER_MENU = (
    "\n\nSelect a Receiver:\n"
    "1. Single shot\n"
    "2. Semi automatic\n"
    "3. Fully automatic (required for Holographic AI sight use)\n"
    "Enter your choice: "
)
_EXPLOSIVE_RECEIVER_MENU = (
    "\n\nSelect a Receiver:\n"
    "4. Grenade lobber\n"
    "5. Rocket launcher\n"
    "Enter your choice: "
)
_BARREL_MENU = (
    "\n\nSelect a Barrel:\n"
    "1. Short Barrel\n"
    "2. Standard Barrel\n"
    "3. Long Barrel\n"
    "4. Sniper Barrel\n\n"
    "Enter your choice: "
)
_SIGHT_MENU = (
    "\n\nSelect a Sight:\n"
    "1. Iron Sight\n"
    "2. 2x Scope\n"
    "3. 5x Scope\n"
    "4. Holographic Sight\n"
    "5. Holographic Sight with AI Targeting (requires full auto receiver)\n\n"
    "Enter your choice: "
)
_AI_SIGHT_REJECTED = (
    "Invalid choice. Automatic receiver must be selected to use this sight. "
    "Please select a different sight.\n"
)

STANDARD_BARREL = 2
IRON_SIGHTS = 1
FULL_AUTO_RECEIVER = 3
AI_SIGHT = 5


class WeaponPrompter:
    """Asks for frame, receiver, barrel and sight, repeating until each answer is valid."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""
        self.is_explosive_frame = False

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _read_int(self) -> int | None:
        """Read the next whitespace-separated integer; None (rest of line dropped) if it is not one."""
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                break
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended before a valid choice was entered")
            self._pending = line
        match = _INT_PATTERN.match(self._pending)
        if match is None or not _INT_MIN <= int(match.group()) <= _INT_MAX:
            self._pending = ""
            return None
        self._pending = self._pending[match.end():]
        return int(match.group())

    def _ask(self, menu: str, accept, reject_message=lambda choice: _INVALID_CHOICE) -> int:
        while True:
            self._write(menu)
            choice = self._read_int()
            if choice is None:
                self._write(_INVALID_INPUT)
            elif accept(choice):
                return choice
            else:
                self._write(reject_message(choice))

    def get_frame(self) -> int:
        """Ask for a frame (1-4); choosing the explosive frame restricts later parts."""
        choice = self._ask(_FRAME_MENU, lambda c: 1 <= c <= 4)
        if choice == 4:
            self.is_explosive_frame = True
        return choice

    def get_receiver(self) -> int:
        """Ask for a receiver compatible with the chosen frame."""
        if self.is_explosive_frame:
            return self._ask(_EXPLOSIVE_RECEIVER_MENU, lambda c: 4 <= c <= 5)
        return self._ask(_RECEIVER_MENU, lambda c: 1 <= c <= 3)

    def get_barrel(self) -> int:
        """Ask for a barrel; explosive frames always get the standard barrel."""
        if self.is_explosive_frame:
            return STANDARD_BARREL
        return self._ask(_BARREL_MENU, lambda c: 1 <= c <= 4)

    def get_sight(self, receiver_choice: int) -> int:
        """Ask for a sight; the AI sight needs the fully automatic receiver."""
        if self.is_explosive_frame:
            return IRON_SIGHTS
        full_auto = receiver_choice == FULL_AUTO_RECEIVER
        return self._ask(
            _SIGHT_MENU,
            lambda c: 1 <= c <= 4 or (c == AI_SIGHT and full_auto),
            lambda c: _AI_SIGHT_REJECTED if c == AI_SIGHT else _INVALID_CHOICE,
        )