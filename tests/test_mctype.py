import pytest

from mcwss.mctype import ArmourSlot, BlockPosition, Direction, Position, Target


def test_direction_formats_as_value():
    assert f"{Direction('forward')}" == "forward"
    assert str(Direction("left")) == "left"


def test_direction_lookup_by_value():
    assert Direction("up") is Direction.UP
    with pytest.raises(ValueError):
        Direction("sideways")


def test_target_selectors():
    assert Target("@a") is Target.ALL_PLAYERS
    assert f"{Target('@s')}" == "@s"
    with pytest.raises(ValueError):
        Target("@x")


def test_armour_slots_range_from_helmet_to_boots():
    assert [int(slot) for slot in ArmourSlot] == list(range(2, 6))
    assert ArmourSlot(2) is ArmourSlot.HELMET
    assert ArmourSlot(5) is ArmourSlot.BOOTS


def test_position_round_trip():
    position = Position(1.5, -2.0, 64.25)
    assert Position.from_dict(position.to_dict()) == position


def test_position_missing_and_null_coordinates_are_zero():
    assert Position.from_dict({"x": 3}) == Position(3.0, 0.0, 0.0)
    assert Position.from_dict({"x": None, "y": 2, "z": 1}) == Position(0.0, 2.0, 1.0)
    assert Position.from_dict(None) == Position()


def test_position_rejects_non_numbers():
    with pytest.raises(ValueError):
        Position.from_dict({"x": "one"})
    with pytest.raises(ValueError):
        Position.from_dict([1, 2, 3])


def test_block_position_round_trip():
    position = BlockPosition(10, 70, -3)
    assert BlockPosition.from_dict(position.to_dict()) == position


def test_block_position_accepts_integral_floats():
    assert BlockPosition.from_dict({"x": 4.0, "y": 5, "z": -6.0}) == BlockPosition(4, 5, -6)


def test_block_position_rejects_fractions_and_bools():
    with pytest.raises(ValueError):
        BlockPosition.from_dict({"x": 1.5})
    with pytest.raises(ValueError):
        BlockPosition.from_dict({"y": True})