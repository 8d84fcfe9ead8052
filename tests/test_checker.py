import pytest

from solong.checker import (
    ComponentCounts,
    MapError,
    check_map,
    count_components,
    has_valid_structure,
    is_rectangular,
    is_square,
    is_walled,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


def test_check_map_accepts_valid_map():
    assert check_map(VALID) == ComponentCounts(collectibles=1, exits=1, players=1)


def test_check_map_counts_several_collectibles():
    grid = ["11111111", "1PCC0CE1", "11111111"]
    assert check_map(grid).collectibles == 3


@pytest.mark.parametrize(
    "grid, message",
    [
        (["1111111", "1P0X0E1", "1111111"], "Structure issue."),
        (["1111111", "1P0C0E11", "1111111"], "Design issue."),
        (["1111111", "1P0C0E", "1111111"], "Design issue."),
        ([], "Design issue."),
        (["111", "1PE", "111"], "The map is a square."),
        (["1111111", "0P0C0E1", "1111111"], "Wall issue."),
        (["1111111", "1P0C0E1", "1110111"], "Wall issue."),
        (["1111111", "1P000E1", "1111111"], "Component issue."),
        (["1111111", "1P0CEE1", "1111111"], "Component issue."),
        (["1111111", "1PPC0E1", "1111111"], "Component issue."),
        (["1111111", "100C0E1", "1111111"], "Component issue."),
    ],
)
def test_check_map_reports_first_failure(grid, message):
    with pytest.raises(MapError) as info:
        check_map(grid)
    assert str(info.value) == message
    assert info.value.message == message


def test_structure_check():
    assert has_valid_structure(VALID)
    assert not has_valid_structure(["11 1"])


def test_rectangular_check():
    assert is_rectangular(VALID)
    assert not is_rectangular(["111", "11"])
    assert not is_rectangular([])


def test_square_check():
    assert is_square(["111", "101", "111"])
    assert not is_square(VALID)
    assert not is_square([])


def test_wall_check():
    assert is_walled(VALID)
    assert not is_walled(["1111111", "1P0C0E0", "1111111"])
    assert not is_walled(["1011111", "1P0C0E1", "1111111"])


def test_count_components_matches_grid():
    counts = count_components(["1111", "1CC1", "1PE1", "1111"])
    assert (counts.collectibles, counts.exits, counts.players) == (2, 1, 1)
    assert counts.is_valid


def test_component_counts_validity():
    assert not ComponentCounts(collectibles=0, exits=1, players=1).is_valid
    assert not ComponentCounts(collectibles=2, exits=2, players=1).is_valid
    assert ComponentCounts(collectibles=2, exits=1, players=1).is_valid