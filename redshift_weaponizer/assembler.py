"""Part tables and the arithmetic that turns four part choices into a stat block."""

from __future__ import annotations

from dataclasses import astuple, dataclass, replace

_DIE_TYPES = {1: "d4", 2: "d6", 3: "d8", 4: "d10", 5: "d12", 6: "d20"}
_MIN_DIE_STEP = 1
_MAX_DIE_STEP = 6


@dataclass(frozen=True)
class PartStats:
    """Stat contribution of one weapon part; the weapon is the sum of its parts."""

    weight: float
    hit_modifier: float
    dice_quantity: float
    dice_quality: float
    min_range: float
    max_range: float
    value: float


@dataclass(frozen=True)
class WeaponStats:
    """Summed stats of an assembled weapon."""

    weight: float
    hit_modifier: float
    dice_quantity: float
    dice_quality: float
    min_range: float
    max_range: float
    value: float

    def damage(self) -> str:
        """Damage dice such as '3d10': at least one die, between a d4 and a d20."""
        quantity = max(int(self.dice_quantity), 1)
        step = min(max(int(self.dice_quality), _MIN_DIE_STEP), _MAX_DIE_STEP)
        return f"{quantity}{_DIE_TYPES[step]}"


FRAMES = {
    1: PartStats(7.5, 0, 2, 2, 30, 150, 45),   # physical
    2: PartStats(10, 0, 3, 2, 40, 200, 100),   # plasma
    3: PartStats(8, 0, 3, 2, 60, 300, 85),     # laser
    4: PartStats(15, 1, 6, 1, 15, 50, 170),    # explosive
}
EXPLOSIVE_FRAME = 4

RECEIVERS = {
    1: PartStats(-1, 2, 1, 1, 20, 100, 20),    # single shot
    2: PartStats(1, 1, 0, 1, 0, 0, 0),         # semi automatic
    3: PartStats(2, 0, 3, -2, 0, -50, 55),     # fully automatic
    4: PartStats(4, 0, 0, 0, 0, 50, 120),      # grenade lobber (explosive only)
    5: PartStats(7, 2, 2, 2, 100, 500, 225),   # rocket launcher (explosive only)
}

BARRELS = {
    1: PartStats(-2, -1, 0, 1, -50, -100, 25),  # short
    2: PartStats(0, 0, 0, 0, 0, 0, 30),         # standard
    3: PartStats(1, 1, 0, 0, 25, 25, 50),       # long
    4: PartStats(4, 2, 2, 1, 75, 150, 120),     # sniper
}

SIGHTS = {
    1: PartStats(-1, -1, 0, 0, 0, 0, 15),       # iron sights
    2: PartStats(1, 1, 0, 0, 0, 50, 50),        # 2x scope
    3: PartStats(3, 1, 0, 0, 50, 100, 95),      # 5x scope
    4: PartStats(2, 2, 0, 0, -50, -25, 120),    # holographic
    5: PartStats(8, 5, 0, 0, -50, -100, 765),   # holographic with AI targeting
}
IRON_SIGHTS = 1


def _pick(table: dict[int, PartStats], choice: int, kind: str) -> PartStats:
    try:
        return table[choice]
    except KeyError:
        raise ValueError(f"Invalid {kind} choice!") from None


def assemble_weapon(
    frame_choice: int, receiver_choice: int, barrel_choice: int, sight_choice: int
) -> WeaponStats:
    """Sum the chosen parts into a weapon; explosive frames always use iron sights."""
    frame = _pick(FRAMES, frame_choice, "frame")
    receiver = _pick(RECEIVERS, receiver_choice, "receiver")
    barrel = _pick(BARRELS, barrel_choice, "barrel")
    if frame_choice == EXPLOSIVE_FRAME:
        sight = SIGHTS[IRON_SIGHTS]
    else:
        sight = _pick(SIGHTS, sight_choice, "sight")

    totals = [sum(column) for column in zip(*(astuple(p) for p in (frame, receiver, barrel, sight)))]
    stats = WeaponStats(*totals)
    if stats.min_range <= 0:
        stats = replace(stats, min_range=0)
    return stats


def _num(value: float) -> str:
    return f"{value:g}"


def _row(label: str, value: str) -> str:
    return f"{label:<15}{'|':<10}{value}\n"


def format_stats(stats: WeaponStats) -> str:
    """Render the final stat table."""
    rule = "===============================\n"
    return (
        "\n\nFinal Weapon Stats\n"
        + rule
        + _row("Stat", "Value")
        + rule
        + _row("Weight:", _num(stats.weight))
        + _row("Hit Modifier: ", _num(stats.hit_modifier))
        + _row("Damage:", stats.damage())
        + _row("Range:", f"{_num(stats.min_range)}/{_num(stats.max_range)}")
        + _row("Value:", _num(stats.value))
    )