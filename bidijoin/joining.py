"""The Arabic cursive joining algorithm."""

from __future__ import annotations

from collections.abc import Sequence

from .joining_types import (
    JoiningMask,
    arab_shapes,
    is_join_skipped,
    joins_following_mask,
    joins_preceding_mask,
)
from .types import SENTINEL_LEVEL, BidiType, is_explicit_or_bn

__all__ = ["join_arabic"]

_SKIP_BITS = int(JoiningMask.TRANSPARENT | JoiningMask.IGNORED)
_IGNORED = int(JoiningMask.IGNORED)


def _is_ignored(prop: int) -> bool:
    return (prop & _SKIP_BITS) == _IGNORED


def _levels_match(a: int, b: int) -> bool:
    return a == b or a == SENTINEL_LEVEL or b == SENTINEL_LEVEL


def join_arabic(
    bidi_types: Sequence[BidiType],
    embedding_levels: Sequence[int],
    ar_props: Sequence[int],
) -> list[int]:
    """Apply the Arabic cursive joining rules and return the new properties.

    ``ar_props`` holds the initial joining types of the characters.  The
    result has, for every character, the joining bits that survive the
    influence of its neighbours.  Characters at different embedding levels
    never join; explicit codes and boundary neutrals match any level.
    Skipped (transparent) characters between two joined characters receive
    both joining bits, so marks may later be placed on a tatweel.
    """
    props = [int(p) for p in ar_props]
    if len(bidi_types) != len(props) or len(embedding_levels) != len(props):
        raise ValueError(
            "bidi_types, embedding_levels and ar_props must have the same length"
        )
    if not props:
        return props

    saved = 0
    saved_level = SENTINEL_LEVEL
    saved_shapes = False
    saved_following = 0
    joins = False

    for i, (bidi_type, embedding_level) in enumerate(zip(bidi_types, embedding_levels)):
        if _is_ignored(props[i]):
            continue

        disjoin = False
        shapes = arab_shapes(props[i])
        level = SENTINEL_LEVEL if is_explicit_or_bn(bidi_type) else embedding_level

        if joins and not _levels_match(saved_level, level):
            disjoin = True
            joins = False

        if not is_join_skipped(props[i]):
            preceding = int(joins_preceding_mask(level))
            if not joins:
                if shapes:
                    props[i] &= ~preceding
            elif not props[i] & preceding:
                disjoin = True
            else:
                for j in range(saved + 1, i):
                    props[j] |= preceding | saved_following

        if disjoin and saved_shapes:
            props[saved] &= ~saved_following

        if not is_join_skipped(props[i]):
            saved = i
            saved_level = level
            saved_shapes = shapes
            saved_following = int(joins_following_mask(level))
            joins = bool(props[i] & saved_following)

    if joins and saved_shapes:
        props[saved] &= ~saved_following

    return props