import pytest

from tempest.exceptions import CommandLineError
from tempest.parser import scan


def test_scan_empty():
    assert list(scan(["tempest"])) == []


def test_scan_long_options():
    pairs = list(scan(["tempest", "--url=http://h", "--format", "2", "--daemon"]))
    assert pairs == [("u", "http://h"), ("f", "2"), ("d", None)]


def test_scan_short_options():
    pairs = list(scan(["tempest", "-u=192.168.1.100:39500", "-l", "1", "-i5"]))
    assert pairs == [("u", "=192.168.1.100:39500"), ("l", "1"), ("i", "5")]


def test_scan_bundled_switches():
    assert list(scan(["tempest", "-dt"])) == [("d", None), ("t", None)]


def test_scan_long_option_prefix():
    assert list(scan(["tempest", "--int=5", "--ver"])) == [("i", "5"), ("v", None)]


def test_scan_keeps_order_and_repeats():
    pairs = list(scan(["tempest", "--log=1", "--trace", "--log=4"]))
    assert pairs == [("l", "1"), ("t", None), ("l", "4")]


def test_scan_double_dash_terminates():
    assert list(scan(["tempest", "--stop", "--"])) == [("s", None)]


@pytest.mark.parametrize(
    "argv",
    [
        ["tempest", "--bogus"],
        ["tempest", "-x"],
        ["tempest", "--url"],
        ["tempest", "-f"],
        ["tempest", "--daemon=1"],
        ["tempest", "relay"],
        ["tempest", "--stop", "now"],
        ["tempest", "--", "--stop"],
        ["tempest", "-"],
    ],
)
def test_scan_rejects(argv):
    with pytest.raises(CommandLineError):
        list(scan(argv))
