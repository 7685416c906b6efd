# redshift-weaponizer

A small console tool for game masters who need a weapon on the fly. It walks
you through picking a frame, a receiver, a barrel and a sight, then prints a
stat block with weight, hit modifier, damage dice, range and value.

## Installation

```
pip install .
```

## Usage

Run the interactive builder:

```
redshift-weaponizer
```

You are asked for each part in turn by menu number:

- **Frame**: 1 Physical, 2 Plasma, 3 Laser or 4 Explosive.
- **Receiver**: 1 Single shot, 2 Semi automatic or 3 Fully automatic.
  Explosive frames offer 4 Grenade lobber or 5 Rocket launcher instead.
- **Barrel**: 1 Short, 2 Standard, 3 Long or 4 Sniper. Explosive frames
  always use the standard barrel and are not asked.
- **Sight**: 1 Iron sight, 2 2x scope, 3 5x scope, 4 Holographic, or
  5 Holographic with AI targeting. The AI sight needs the fully automatic
  receiver. Explosive frames always use iron sights and are not asked.

Entries that are not whole numbers, or numbers outside the menu, are reported
and the menu is shown again. If input ends before every part has been chosen,
the command writes a message to standard error and exits with status 1.

Choosing 1 at every menu prints:

```
Final Weapon Stats
===============================
Stat           |         Value
===============================
Weight:        |         3.5
Hit Modifier:  |         0
Damage:        |         3d10
Range:         |         0/150
Value:         |         105
```

Each stat is the sum of the four parts' stats. Damage uses at least one die,
and the die size is held between a d4 and a d20. A minimum range below zero is
shown as 0.

## Library use

The parts can also be combined without prompting:

```python
from redshift_weaponizer.assembler import assemble_weapon, format_stats

stats = assemble_weapon(3, 3, 2, 5)
print(stats.damage())      # 6d4
print(format_stats(stats))
```

`assemble_weapon(frame_choice, receiver_choice, barrel_choice, sight_choice)`
takes the menu numbers and returns a `WeaponStats` with `weight`,
`hit_modifier`, `dice_quantity`, `dice_quality`, `min_range`, `max_range` and
`value`. With the explosive frame (4) the sight choice is ignored and iron
sights are used. A number that names no part raises `ValueError`. It does not
check receiver or sight compatibility; that is done by the menus.

`WeaponPrompter(stdin, stdout)` in `redshift_weaponizer.prompts` runs the
menus against any pair of text streams (the process's own by default). Call
`get_frame()`, `get_receiver()`, `get_barrel()` and `get_sight(receiver_choice)`
in that order; each returns the chosen number and raises `EOFError` if the
input runs out.

## Running the tests

```
pip install .[test]
pytest
```