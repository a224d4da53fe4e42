import pytest

from quadrix.game import Block, Coord, ROTATIONS, TetrominoType, bounding_box, num_rotations


def test_spawn_shifts_template_three_columns():
    block = Block(TetrominoType.T)
    assert block.rotation == 0
    assert block.coords == [Coord(1, 3), Coord(1, 4), Coord(1, 5), Coord(2, 4)]


def test_block_accepts_type_name():
    assert Block("I").kind is TetrominoType.I


def test_unknown_type_fails_fast():
    with pytest.raises(KeyError):
        Block("X")


@pytest.mark.parametrize(
    "kind,count",
    [("I", 2), ("J", 4), ("L", 4), ("O", 1), ("S", 2), ("T", 4), ("Z", 2)],
)
def test_rotation_state_counts(kind, count):
    assert num_rotations(TetrominoType[kind]) == count


def test_every_rotation_state_has_four_cells():
    for states in ROTATIONS.values():
        for cells in states:
            assert len(set(cells)) == 4


def test_next_rotation_does_not_mutate():
    block = Block(TetrominoType.J)
    before = list(block.coords)
    coords, rotation = block.get_next_rotation()
    assert rotation == 1
    assert block.coords == before
    assert block.rotation == 0
    assert coords != before


def test_next_rotation_keeps_translation():
    block = Block(TetrominoType.T)
    block.coords = block.translated(Coord(4, 0))
    coords, rotation = block.get_next_rotation()
    assert rotation == 1
    assert coords == [Coord(4, 4), Coord(5, 4), Coord(5, 5), Coord(6, 4)]


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_rotation_closure(kind):
    block = Block(kind)
    block.coords = block.translated(Coord(5, 1))
    start = list(block.coords)
    for _ in range(num_rotations(kind)):
        block.coords, block.rotation = block.get_next_rotation()
    assert block.rotation == 0
    assert block.coords == start


def test_o_rotation_maps_to_itself():
    block = Block(TetrominoType.O)
    coords, rotation = block.get_next_rotation()
    assert rotation == 0
    assert coords == block.coords


def test_bounding_box():
    assert bounding_box(TetrominoType.I) == (1, 4)
    assert bounding_box(TetrominoType.O) == (2, 2)
    assert bounding_box(TetrominoType.T) == (2, 3)
    assert bounding_box(TetrominoType.S) == (2, 3)


def test_rows_span():
    assert Block(TetrominoType.I).rows() == (2, 2)
    assert Block(TetrominoType.L).rows() == (1, 2)
