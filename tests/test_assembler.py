import pytest

from redshift_weaponizer.assembler import (
    PartStats,
    WeaponStats,
    assemble_weapon,
    format_stats,
)


def test_simplest_combo_stats():
    stats = assemble_weapon(1, 1, 1, 1)
    assert stats.weight == 3.5
    assert stats.hit_modifier == 0
    assert stats.damage() == "3d10"
    assert stats.min_range == 0
    assert stats.max_range == 150
    assert stats.value == 105


def test_simplest_combo_output_not_empty():
    output = format_stats(assemble_weapon(1, 1, 1, 1))
    assert output.strip()
    assert "Final Weapon Stats" in output


def test_ai_sight_full_auto_combo():
    stats = assemble_weapon(3, 3, 2, 5)
    assert stats.weight == 18
    assert stats.hit_modifier == 5
    assert stats.damage() == "6d4"
    assert (stats.min_range, stats.max_range) == (10, 150)
    assert stats.value == 935


def test_format_rows_layout():
    output = format_stats(assemble_weapon(1, 1, 1, 1))
    lines = output.splitlines()
    assert "Weight:        |         3.5" in lines
    assert "Hit Modifier:  |         0" in lines
    assert "Damage:        |         3d10" in lines
    assert "Range:         |         0/150" in lines
    assert "Value:         |         105" in lines
    assert "Stat           |         Value" in lines


def test_explosive_frame_ignores_sight_choice():
    assert assemble_weapon(4, 4, 2, 5) == assemble_weapon(4, 4, 2, 1)


def test_rocket_launcher_damage():
    assert assemble_weapon(4, 5, 2, 1).damage() == "8d8"


def test_min_range_never_negative():
    for frame in (1, 2, 3):
        for sight in (1, 2, 3, 4, 5):
            assert assemble_weapon(frame, 1, 1, sight).min_range >= 0


@pytest.mark.parametrize(
    "choices, message",
    [
        ((0, 1, 1, 1), "Invalid frame choice!"),
        ((1, 6, 1, 1), "Invalid receiver choice!"),
        ((1, 1, 5, 1), "Invalid barrel choice!"),
        ((1, 1, 1, 6), "Invalid sight choice!"),
    ],
)
def test_invalid_choices_raise(choices, message):
    with pytest.raises(ValueError, match=message):
        assemble_weapon(*choices)


def test_damage_clamps_dice():
    stats = WeaponStats(0, 0, 0, 9, 0, 0, 0)
    assert stats.damage() == "1d20"
    assert WeaponStats(0, 0, 2, -3, 0, 0, 0).damage() == "2d4"


def test_part_stats_is_frozen():
    part = PartStats(1, 2, 3, 4, 5, 6, 7)
    with pytest.raises(AttributeError):
        part.weight = 2
    assert part.weight == 1
    assert part == PartStats(1, 2, 3, 4, 5, 6, 7)