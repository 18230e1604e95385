import pytest

from bidijoin.joining_types import (
    JoiningMask,
    JoiningType,
    arab_shapes,
    char_from_joining_type,
    classify,
    is_join_base_shapes,
    is_join_skipped,
    is_left_join_causing,
    is_right_join_causing,
    join_shape,
    joining_type_name,
    joins_following_mask,
    joins_left,
    joins_preceding_mask,
    joins_right,
)

SYMBOLS = {
    JoiningType.U: "|",
    JoiningType.R: "<",
    JoiningType.D: "+",
    JoiningType.C: "-",
    JoiningType.T: "^",
    JoiningType.L: ">",
    JoiningType.G: "~",
}


def test_mask_combinations_classify():
    assert classify(0) is JoiningType.U
    assert classify(JoiningMask.JOINS_RIGHT | JoiningMask.ARAB_SHAPES) is JoiningType.R
    assert classify(
        JoiningMask.JOINS_RIGHT | JoiningMask.JOINS_LEFT | JoiningMask.ARAB_SHAPES
    ) is JoiningType.D
    assert classify(JoiningMask.JOINS_RIGHT | JoiningMask.JOINS_LEFT) is JoiningType.C
    assert classify(JoiningMask.TRANSPARENT | JoiningMask.ARAB_SHAPES) is JoiningType.T
    assert classify(JoiningMask.JOINS_LEFT | JoiningMask.ARAB_SHAPES) is JoiningType.L
    assert classify(JoiningMask.IGNORED) is JoiningType.G


def test_canonical_order():
    assert [joining_type_name(t) for t in JoiningType] == [
        "U", "R", "D", "C", "T", "L", "G"
    ]


@pytest.mark.parametrize("jt", list(JoiningType))
def test_classify_round_trip(jt):
    assert classify(jt) is jt


@pytest.mark.parametrize("jt", list(JoiningType))
def test_name_round_trip(jt):
    assert joining_type_name(jt) == jt.name
    assert JoiningType[joining_type_name(jt)] is jt


def test_unknown_name():
    assert joining_type_name(JoiningMask.LIGATURED) == "?"


@pytest.mark.parametrize("jt,symbol", list(SYMBOLS.items()))
def test_logical_symbols(jt, symbol):
    assert char_from_joining_type(jt, False) == symbol


def test_visual_swaps_one_sided():
    assert char_from_joining_type(JoiningType.R, True) == SYMBOLS[JoiningType.L]
    assert char_from_joining_type(JoiningType.L, True) == SYMBOLS[JoiningType.R]


@pytest.mark.parametrize(
    "jt", [JoiningType.U, JoiningType.D, JoiningType.C, JoiningType.T, JoiningType.G]
)
def test_visual_keeps_symmetric(jt):
    assert char_from_joining_type(jt, True) == char_from_joining_type(jt, False)


def test_unclassifiable_property():
    prop = JoiningMask.TRANSPARENT | JoiningMask.IGNORED
    assert classify(prop) is None
    assert char_from_joining_type(prop, False) == "?"


def test_cleared_bit_reclassifies():
    prop = int(JoiningType.D) & ~int(JoiningMask.JOINS_RIGHT)
    assert classify(prop) is JoiningType.L
    prop = int(JoiningType.D) & ~int(JoiningMask.JOINS_LEFT)
    assert classify(prop) is JoiningType.R


def test_side_predicates():
    assert [joins_right(t) for t in JoiningType] == [
        False, True, True, True, False, False, False
    ]
    assert [joins_left(t) for t in JoiningType] == [
        False, False, True, True, False, True, False
    ]


def test_shaping_predicates():
    shaping = {t for t in JoiningType if arab_shapes(t)}
    assert shaping == {JoiningType.R, JoiningType.D, JoiningType.T, JoiningType.L}
    base = {t for t in JoiningType if is_join_base_shapes(t)}
    assert base == {JoiningType.R, JoiningType.D, JoiningType.L}
    skipped = {t for t in JoiningType if is_join_skipped(t)}
    assert skipped == {JoiningType.T, JoiningType.G}


def test_join_causing_classes():
    right = {t for t in JoiningType if is_right_join_causing(t)}
    left = {t for t in JoiningType if is_left_join_causing(t)}
    assert right == {JoiningType.R, JoiningType.D, JoiningType.C}
    assert left == {JoiningType.L, JoiningType.D, JoiningType.C}


def test_join_shape_keeps_side_bits():
    assert join_shape(JoiningType.D) == JoiningType.C
    assert join_shape(JoiningType.T) == 0
    assert join_shape(JoiningType.R | JoiningMask.LIGATURED) == JoiningMask.JOINS_RIGHT


@pytest.mark.parametrize("level", [0, 2, 4])
def test_masks_ltr(level):
    assert joins_preceding_mask(level) is JoiningMask.JOINS_LEFT
    assert joins_following_mask(level) is JoiningMask.JOINS_RIGHT


@pytest.mark.parametrize("level", [1, 3, 125])
def test_masks_rtl(level):
    assert joins_preceding_mask(level) is JoiningMask.JOINS_RIGHT
    assert joins_following_mask(level) is JoiningMask.JOINS_LEFT