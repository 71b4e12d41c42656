import pytest

from jps_navigation import Direction


def test_offsets():
    assert Direction.TOP_LEFT.x_offset == -1
    assert Direction.TOP_LEFT.y_offset == 1
    assert Direction.BOTTOM.value == (0, -1)


def test_every_offset_maps_back_to_its_direction():
    for direction in Direction:
        assert Direction.from_offsets(direction.x_offset, direction.y_offset) is direction


def test_from_offsets_rejects_zero_and_out_of_range():
    with pytest.raises(ValueError):
        Direction.from_offsets(0, 0)
    with pytest.raises(ValueError):
        Direction.from_offsets(2, 0)


def test_sub_directions_of_diagonal():
    assert Direction.TOP_RIGHT.x_sub_direction is Direction.RIGHT
    assert Direction.TOP_RIGHT.y_sub_direction is Direction.TOP
    assert Direction.BOTTOM_LEFT.x_sub_direction is Direction.LEFT
    assert Direction.BOTTOM_LEFT.y_sub_direction is Direction.BOTTOM


def test_is_diagonal():
    diagonals = {d for d in Direction if d.is_diagonal}
    assert diagonals == {Direction.TOP_LEFT, Direction.TOP_RIGHT,
                         Direction.BOTTOM_LEFT, Direction.BOTTOM_RIGHT}


def test_between_clamps_long_offsets():
    assert Direction.between(0, 0, 5, -3) is Direction.BOTTOM_RIGHT
    assert Direction.between(4, 2, 0, 2) is Direction.LEFT
    assert Direction.between(1, 1, 1, 9) is Direction.TOP
