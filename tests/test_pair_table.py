import enum

import pytest

from cutil.pair_table import PairTable


class Letter(enum.Enum):
    A = enum.auto()
    B = enum.auto()
    C = enum.auto()


@pytest.fixture
def table():
    return PairTable([(Letter.A, "A"), (Letter.C, "C")])


def test_find_first_by_string(table):
    assert table.find_first("A") is Letter.A
    assert table.find_first("C") is Letter.C


def test_find_first_missing(table):
    assert table.find_first("B") is None


def test_find_second_by_enum(table):
    assert table.find_second(Letter.A) == "A"
    assert table.find_second(Letter.C) == "C"


def test_find_second_missing(table):
    assert table.find_second(Letter.B) is None


def test_first_match_wins():
    duplicated = PairTable([(1, "x"), (2, "x"), (1, "y")])
    assert duplicated.find_first("x") == 1
    assert duplicated.find_second(1) == "x"


def test_accepts_any_iterable():
    pairs = PairTable(iter([("k", 10)]))
    assert pairs.find_second("k") == 10
    assert pairs.find_second("k") == 10


def test_empty_table():
    empty = PairTable([])
    assert empty.find_first("A") is None
    assert empty.find_second(Letter.A) is None