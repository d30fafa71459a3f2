import pytest

from simulation.integrators.rounding import round4, round_half_away


@pytest.mark.parametrize("value, decimals, expected", [
    (0.5, 0, 1.0),
    (-0.5, 0, -1.0),
    (2.5, 0, 3.0),      # built-in round() would give 2
    (1.23456, 4, 1.2346),
    (-1.23456, 4, -1.2346),
    (1.1, 4, 1.1),
])
def test_round_half_away(value, decimals, expected):
    assert round_half_away(value, decimals) == expected


def test_round4_is_idempotent():
    value = round4(3.14159265)
    assert value == 3.1416
    assert round4(value) == value


if __name__ == "__main__":
    pytest.main([__file__])
