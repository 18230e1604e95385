import pytest

from bidijoin.joining import join_arabic
from bidijoin.joining_types import (
    JoiningType,
    join_shape,
    joins_left,
    joins_right,
)
from bidijoin.types import BidiType


def test_empty_input_gives_empty_result():
    assert join_arabic([], [], []) == []


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        join_arabic([BidiType.AL], [1, 1], [JoiningType.D])


def test_two_dual_joining_in_rtl():
    result = join_arabic(
        [BidiType.AL, BidiType.AL], [1, 1], [JoiningType.D, JoiningType.D]
    )
    assert result == [JoiningType.L, JoiningType.R]


def test_two_dual_joining_in_ltr_is_mirror_of_rtl():
    rtl = join_arabic([BidiType.AL] * 2, [1, 1], [JoiningType.D] * 2)
    ltr = join_arabic([BidiType.LTR] * 2, [0, 0], [JoiningType.D] * 2)
    assert [joins_left(p) for p in rtl] == [joins_right(p) for p in ltr]
    assert [joins_right(p) for p in rtl] == [joins_left(p) for p in ltr]


def test_isolated_dual_joining_loses_both_sides():
    result = join_arabic([BidiType.AL], [1], [JoiningType.D])
    assert join_shape(result[0]) == 0


def test_non_joining_is_unchanged():
    props = [JoiningType.U, JoiningType.U]
    assert join_arabic([BidiType.ON] * 2, [1, 1], props) == [int(p) for p in props]


def test_transparent_between_joined_characters_gets_both_sides():
    props = [JoiningType.D, JoiningType.T, JoiningType.D]
    result = join_arabic([BidiType.AL, BidiType.NSM, BidiType.AL], [1, 1, 1], props)
    assert joins_left(result[1]) and joins_right(result[1])
    assert joins_left(result[0])
    assert joins_right(result[2])


def test_different_levels_do_not_join():
    props = [JoiningType.D, JoiningType.D]
    result = join_arabic([BidiType.AL, BidiType.AL], [0, 2], props)
    assert [join_shape(p) for p in result] == [0, 0]


def test_non_joining_breaks_the_chain():
    props = [JoiningType.D, JoiningType.U, JoiningType.D]
    result = join_arabic([BidiType.AL, BidiType.ON, BidiType.AL], [1, 1, 1], props)
    assert join_shape(result[0]) == 0
    assert join_shape(result[2]) == 0


def test_input_is_not_modified():
    props = [JoiningType.D, JoiningType.D]
    join_arabic([BidiType.AL] * 2, [1, 1], props)
    assert props == [JoiningType.D, JoiningType.D]