import pytest

from tempest.exceptions import CommandLineError
from tempest.parser import coerce_int_range


@pytest.mark.parametrize("value, expected", [("1", 1), ("15", 15), ("30", 30), ("07", 7)])
def test_coerce_int_range_accepts(value, expected):
    assert coerce_int_range(value, 1, 30, "interval") == expected


@pytest.mark.parametrize("value", ["0", "31", "-1", "", "abc", "5.5", "1_0", "5abc", "0x5"])
def test_coerce_int_range_rejects(value):
    with pytest.raises(CommandLineError, match="--interval"):
        coerce_int_range(value, 1, 30, "interval")
