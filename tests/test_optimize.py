import pytest

from tcam_range.optimize import choose_best_encoding
from tcam_range.split_range import CapacityExceeded, PrefixEntry, RangeTooLarge, decompose


def test_zero_start_keeps_direct_form():
    choice = choose_best_encoding(0, 6)
    assert not choice.is_split
    assert choice.reject is None
    assert choice.accept == decompose(0, 6)


def test_tie_keeps_direct_form():
    # direct: {6} [4,5] [2,3] {1}; split: {0} + {6} [4,5] [0,3]
    assert len(decompose(1, 6)) == 4
    assert len(decompose(0, 0)) + len(decompose(0, 6)) == 4
    choice = choose_best_encoding(1, 6)
    assert not choice.is_split
    assert choice.total == 4


def test_split_form_when_smaller():
    choice = choose_best_encoding(1, 0x7FFFFFFF)
    assert choice.is_split
    assert choice.reject.entries == (PrefixEntry(0, 0xFFFFFFFF),)
    assert choice.accept.entries == (PrefixEntry(0, 0x80000000),)
    assert choice.total == 2
    assert len(decompose(1, 0x7FFFFFFF)) == 31


def test_direct_form_when_smaller():
    choice = choose_best_encoding(8, 15)
    assert not choice.is_split
    assert choice.accept.entries == (PrefixEntry(8, 0xFFFFFFF8),)


def test_split_form_when_direct_overflows():
    choice = choose_best_encoding(1, 0xFFFFFFFE)
    assert choice.is_split
    assert len(choice.reject) == 1
    assert len(choice.accept) == 32


def test_overflow_without_alternative():
    with pytest.raises(CapacityExceeded):
        choose_best_encoding(0, 0xFFFFFFFE, max_entries=4)
    with pytest.raises(CapacityExceeded):
        choose_best_encoding(1, 0xFFFFFFFE, max_entries=31)


def test_range_too_large_propagates():
    with pytest.raises(RangeTooLarge):
        choose_best_encoding(5, 0xFFFFFFFF)


def test_direct_form_kept_when_split_overflows():
    # reject [0, 0xfffffffd] needs 31 entries, over the limit of 4
    choice = choose_best_encoding(0xFFFFFFFE, 0xFFFFFFFE, max_entries=4)
    assert not choice.is_split
    assert choice.total == 1
    assert choice.accept.entries == (PrefixEntry(0xFFFFFFFE, 0xFFFFFFFF),)
