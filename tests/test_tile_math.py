import pytest

from slidemerge.utils.tile_math import is_on_ladder, power_for_value, value_for_power


def test_power_is_log2_of_value_over_lowest():
    assert power_for_value(2, 2) == 0
    assert power_for_value(4, 2) == 1
    assert power_for_value(2048, 2) == 10


def test_value_for_power_inverts_power_for_value():
    assert value_for_power(0, 2) == 2
    assert value_for_power(3, 2) == 16


def test_off_ladder_values():
    assert not is_on_ladder(6, 2)
    assert not is_on_ladder(1, 2)
    assert is_on_ladder(12, 3)
    with pytest.raises(ValueError):
        power_for_value(6, 2)
    with pytest.raises(ValueError):
        value_for_power(-1, 2)
