"""Core types, flags and Unicode constants for the bidirectional algorithm."""

from __future__ import annotations

import enum

__all__ = [
    "Flags",
    "BidiType",
    "ParType",
    "char_from_bidi_type",
    "is_explicit_or_bn",
    "is_isolate",
    "level_is_rtl",
    "NO_BRACKET",
    "SENTINEL_LEVEL",
    "LEVEL_INVALID",
    "UNICODE_CHARS",
    "BIDI_NUM_TYPES",
    "BIDI_MAX_EXPLICIT_LEVEL",
    "BIDI_MAX_RESOLVED_LEVELS",
    "BIDI_MAX_NESTED_BRACKET_PAIRS",
    "CHAR_LRM",
    "CHAR_RLM",
    "CHAR_LRE",
    "CHAR_RLE",
    "CHAR_PDF",
    "CHAR_LRO",
    "CHAR_RLO",
    "CHAR_LRI",
    "CHAR_RLI",
    "CHAR_FSI",
    "CHAR_PDI",
    "CHAR_LS",
    "CHAR_PS",
    "CHAR_ZWNJ",
    "CHAR_ZWJ",
    "CHAR_HEBREW_ALEF",
    "CHAR_ARABIC_ALEF",
    "CHAR_ARABIC_ZERO",
    "CHAR_PERSIAN_ZERO",
    "CHAR_ZWNBSP",
    "CHAR_FILL",
]

# Bracket type value meaning "not a bracket".
NO_BRACKET = 0

# Level sentinel used inside the algorithms.
SENTINEL_LEVEL = -1

# Number of code points handled (surrogates are not supported).
UNICODE_CHARS = 0x110000

# Number of types defined in the bidi algorithm.
BIDI_NUM_TYPES = 19

# Maximum embedding level assigned by explicit marks.
BIDI_MAX_EXPLICIT_LEVEL = 125

# Maximum number of distinct resolved embedding levels (0-126).
BIDI_MAX_RESOLVED_LEVELS = 127

# Maximum number of nested bracket pairs (0-63).
BIDI_MAX_NESTED_BRACKET_PAIRS = 63

LEVEL_INVALID = BIDI_MAX_RESOLVED_LEVELS

# Bidirectional marks
CHAR_LRM = 0x200E
CHAR_RLM = 0x200F
CHAR_LRE = 0x202A
CHAR_RLE = 0x202B
CHAR_PDF = 0x202C
CHAR_LRO = 0x202D
CHAR_RLO = 0x202E
CHAR_LRI = 0x2066
CHAR_RLI = 0x2067
CHAR_FSI = 0x2068
CHAR_PDI = 0x2069

# Line and paragraph separators
CHAR_LS = 0x2028
CHAR_PS = 0x2029

# Arabic joining marks
CHAR_ZWNJ = 0x200C
CHAR_ZWJ = 0x200D

# Hebrew and Arabic
CHAR_HEBREW_ALEF = 0x05D0
CHAR_ARABIC_ALEF = 0x0627
CHAR_ARABIC_ZERO = 0x0660
CHAR_PERSIAN_ZERO = 0x06F0

CHAR_ZWNBSP = 0xFEFF
# Placeholder put in a deleted slot, to be removed later.
CHAR_FILL = CHAR_ZWNBSP


class Flags(enum.IntFlag):
    """Option flags used by the shaping and reordering functions."""

    NONE = 0
    SHAPE_MIRRORING = 0x00000001
    REORDER_NSM = 0x00000002
    SHAPE_ARAB_PRES = 0x00000100
    SHAPE_ARAB_LIGA = 0x00000200
    SHAPE_ARAB_CONSOLE = 0x00000400
    REMOVE_BIDI = 0x00010000
    REMOVE_JOINING = 0x00020000
    REMOVE_SPECIALS = 0x00040000

    DEFAULT = SHAPE_MIRRORING | REORDER_NSM | REMOVE_SPECIALS
    ARABIC = SHAPE_ARAB_PRES | SHAPE_ARAB_LIGA


class BidiType(enum.Enum):
    """Bidirectional character types; L, R, B and S are aliases."""

    LTR = 1
    RTL = 2
    AL = 3
    EN = 4
    AN = 5
    ES = 6
    ET = 7
    CS = 8
    NSM = 9
    BN = 10
    BS = 11
    SS = 12
    WS = 13
    ON = 14
    LRE = 15
    RLE = 16
    LRO = 17
    RLO = 18
    PDF = 19
    LRI = 20
    RLI = 21
    FSI = 22
    PDI = 23
    SENTINEL = 24

    L = 1
    R = 2
    B = 11
    S = 12


class ParType(enum.Enum):
    """Paragraph base directions."""

    LTR = "L"
    RTL = "R"
    ON = "n"
    WLTR = "l"
    WRTL = "r"


_BIDI_SYMBOLS: dict[BidiType, str] = {
    BidiType.LTR: "L",
    BidiType.RTL: "R",
    BidiType.AL: "A",
    BidiType.EN: "1",
    BidiType.AN: "9",
    BidiType.ES: "w",
    BidiType.ET: "w",
    BidiType.CS: "w",
    BidiType.NSM: "`",
    BidiType.BN: "b",
    BidiType.BS: "B",
    BidiType.SS: "S",
    BidiType.WS: "_",
    BidiType.ON: "n",
    BidiType.LRE: "+",
    BidiType.RLE: "+",
    BidiType.LRO: "+",
    BidiType.RLO: "+",
    BidiType.PDF: "-",
    BidiType.LRI: "+",
    BidiType.RLI: "+",
    BidiType.FSI: "+",
    BidiType.PDI: "-",
    BidiType.SENTINEL: "$",
}

_EXPLICIT_OR_BN = frozenset(
    {
        BidiType.LRE,
        BidiType.RLE,
        BidiType.LRO,
        BidiType.RLO,
        BidiType.PDF,
        BidiType.BN,
    }
)

_ISOLATES = frozenset({BidiType.LRI, BidiType.RLI, BidiType.FSI, BidiType.PDI})


def char_from_bidi_type(bidi_type: BidiType | ParType) -> str:
    """Return the one-character debug symbol of a bidi or paragraph type."""
    if isinstance(bidi_type, ParType):
        return bidi_type.value
    return _BIDI_SYMBOLS.get(bidi_type, "?")


def is_explicit_or_bn(bidi_type: BidiType) -> bool:
    """True for explicit embedding/override codes and boundary neutrals."""
    return bidi_type in _EXPLICIT_OR_BN


def is_isolate(bidi_type: BidiType) -> bool:
    """True for the isolate initiators and the pop-isolate code."""
    return bidi_type in _ISOLATES


def level_is_rtl(level: int) -> bool:
    """True if the embedding level is odd, i.e. right-to-left."""
    return bool(level & 1)