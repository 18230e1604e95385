"""Arabic joining types and queries on Arabic joining properties.

An Arabic property is a small integer bit set built from ``JoiningMask``
bits.  A ``JoiningType`` is one of the few property values that a character
starts with.  The joining algorithm later clears bits, so the predicates here
accept any property value, not only the enum members.
"""

from __future__ import annotations

import enum

from .types import level_is_rtl

__all__ = [
    "JoiningMask",
    "JoiningType",
    "classify",
    "joining_type_name",
    "char_from_joining_type",
    "joins_right",
    "joins_left",
    "arab_shapes",
    "is_join_skipped",
    "is_join_base_shapes",
    "is_right_join_causing",
    "is_left_join_causing",
    "joins_preceding_mask",
    "joins_following_mask",
    "join_shape",
]


class JoiningMask(enum.IntFlag):
    """Single-bit masks that Arabic properties are built from."""

    JOINS_RIGHT = 0x01
    JOINS_LEFT = 0x02
    ARAB_SHAPES = 0x04
    TRANSPARENT = 0x08
    IGNORED = 0x10
    LIGATURED = 0x20


_JR = int(JoiningMask.JOINS_RIGHT)
_JL = int(JoiningMask.JOINS_LEFT)
_SH = int(JoiningMask.ARAB_SHAPES)
_TR = int(JoiningMask.TRANSPARENT)
_IG = int(JoiningMask.IGNORED)


class JoiningType(enum.IntEnum):
    """Primary Arabic joining classes, in their canonical order."""

    U = 0  # nUn-joining, e.g. Full Stop
    R = _JR | _SH  # Right-joining, e.g. Arabic Letter Dal
    D = _JR | _JL | _SH  # Dual-joining, e.g. Arabic Letter Ain
    C = _JR | _JL  # join-Causing, e.g. Tatweel, ZWJ
    T = _TR | _SH  # Transparent, e.g. Arabic Fatha
    L = _JL | _SH  # Left-joining, i.e. fictional
    G = _IG  # iGnored, e.g. LRE, RLE, ZWNBSP


_SYMBOLS: dict[JoiningType, str] = {
    JoiningType.U: "|",
    JoiningType.R: "<",
    JoiningType.D: "+",
    JoiningType.C: "-",
    JoiningType.T: "^",
    JoiningType.L: ">",
    JoiningType.G: "~",
}


def _matches(prop: int, value: int, mask: int) -> bool:
    return (prop & mask) == value


# (type, expected bits, bits examined) in canonical order.
_CLASS_TESTS: tuple[tuple[JoiningType, int, int], ...] = (
    (JoiningType.U, 0, _TR | _IG | _JR | _JL),
    (JoiningType.R, _JR, _TR | _IG | _JR | _JL),
    (JoiningType.D, _JR | _JL | _SH, _TR | _IG | _JR | _JL | _SH),
    (JoiningType.C, _JR | _JL, _TR | _IG | _JR | _JL | _SH),
    (JoiningType.T, _TR, _TR | _IG),
    (JoiningType.L, _JL, _TR | _IG | _JR | _JL),
    (JoiningType.G, _IG, _TR | _IG),
)


def classify(prop: int) -> JoiningType | None:
    """Return the first joining class the property belongs to, or None."""
    prop = int(prop)
    for joining_type, value, mask in _CLASS_TESTS:
        if _matches(prop, value, mask):
            return joining_type
    return None


def joining_type_name(joining_type: int) -> str:
    """Return the one-letter name of a joining type, or "?" if unknown."""
    try:
        return JoiningType(int(joining_type)).name
    except ValueError:
        return "?"


def char_from_joining_type(joining_type: int, visual: bool) -> str:
    """Return the debug symbol of a property.

    In a visual context a property joining on one side only has its left
    and right sides swapped first.
    """
    prop = int(joining_type)
    if visual and (bool(prop & _JR) != bool(prop & _JL)):
        prop ^= _JR | _JL
    found = classify(prop)
    return "?" if found is None else _SYMBOLS[found]


def joins_right(prop: int) -> bool:
    """True if the property may join to the right (R, D, C)."""
    return bool(int(prop) & _JR)


def joins_left(prop: int) -> bool:
    """True if the property may join to the left (L, D, C)."""
    return bool(int(prop) & _JL)


def arab_shapes(prop: int) -> bool:
    """True if the property may take Arabic shaping (R, D, L, T)."""
    return bool(int(prop) & _SH)


def is_join_skipped(prop: int) -> bool:
    """True if the character is skipped in joining (T, G)."""
    return bool(int(prop) & (_TR | _IG))


def is_join_base_shapes(prop: int) -> bool:
    """True for a base character that will be shaped (R, D, L)."""
    return _matches(int(prop), _SH, _TR | _IG | _SH)


def is_right_join_causing(prop: int) -> bool:
    """True for the derived right join-causing class."""
    return _matches(int(prop), _JR, _TR | _IG | _JR)


def is_left_join_causing(prop: int) -> bool:
    """True for the derived left join-causing class."""
    return _matches(int(prop), _JL, _TR | _IG | _JL)


def joins_preceding_mask(level: int) -> JoiningMask:
    """Mask for joining with the logically preceding character at a level."""
    return JoiningMask.JOINS_RIGHT if level_is_rtl(level) else JoiningMask.JOINS_LEFT


def joins_following_mask(level: int) -> JoiningMask:
    """Mask for joining with the logically following character at a level."""
    return JoiningMask.JOINS_LEFT if level_is_rtl(level) else JoiningMask.JOINS_RIGHT


def join_shape(prop: int) -> int:
    """Return only the joining-side bits of a property."""
    return int(prop) & (_JR | _JL)