"""Removal of bidi marks and explicit codes from a string and its companions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

from .types import CHAR_LRM, CHAR_RLM, BidiType, is_explicit_or_bn, is_isolate

__all__ = ["RemovedMarks", "remove_bidi_marks"]

Chars = Union[str, Sequence[int]]


@dataclass
class RemovedMarks:
    """The result of removing bidi marks.

    ``chars`` has the same kind as the input (a ``str`` or a list of code
    points).  Lists that were not supplied are ``None``.
    ``positions_to_this`` keeps the full original length and holds -1 for
    positions whose character was removed; the other lists are as long as
    the cleaned string.
    """

    chars: Union[str, list[int]]
    embedding_levels: Optional[list[int]] = None
    positions_to_this: Optional[list[int]] = None
    positions_from_this: Optional[list[int]] = None

    def __len__(self) -> int:
        return len(self.chars)


def _code_point(ch: Union[str, int]) -> int:
    return ord(ch) if isinstance(ch, str) else int(ch)


def _is_removable(code_point: int, bidi_type: BidiType) -> bool:
    return (
        is_explicit_or_bn(bidi_type)
        or is_isolate(bidi_type)
        or code_point in (CHAR_LRM, CHAR_RLM)
    )


def _check_length(name: str, values: Optional[Sequence[int]], length: int) -> None:
    if values is not None and len(values) != length:
        raise ValueError(f"{name} must have the same length as chars")


def _invert(positions: Sequence[int], length: int) -> list[int]:
    inverse = [0] * length
    for i, target in enumerate(positions):
        if not 0 <= target < length:
            raise ValueError(f"position {target} out of range for length {length}")
        inverse[target] = i
    return inverse


def remove_bidi_marks(
    chars: Chars,
    bidi_types: Sequence[BidiType],
    positions_to_this: Optional[Sequence[int]] = None,
    positions_from_this: Optional[Sequence[int]] = None,
    embedding_levels: Optional[Sequence[int]] = None,
) -> RemovedMarks:
    """Remove explicit codes, boundary neutrals, isolates, LRM and RLM.

    This is rule X9 of the bidirectional algorithm, extended to also drop
    U+200E and U+200F.  ``bidi_types`` gives the bidi type of each
    character.  The optional lists are compacted alongside the string.  If
    ``chars`` is the visual string, ``positions_to_this`` is the
    logical-to-visual map and ``positions_from_this`` the visual-to-logical
    map; for the logical string it is the other way round.  When only
    ``positions_to_this`` is given, its inverse is computed internally.
    """
    length = len(chars)
    _check_length("bidi_types", bidi_types, length)
    _check_length("positions_to_this", positions_to_this, length)
    _check_length("positions_from_this", positions_from_this, length)
    _check_length("embedding_levels", embedding_levels, length)

    from_this: Optional[list[int]]
    if positions_from_this is not None:
        from_this = [int(p) for p in positions_from_this]
    elif positions_to_this is not None:
        from_this = _invert(positions_to_this, length)
    else:
        from_this = None

    kept = [
        i
        for i, (ch, bidi_type) in enumerate(zip(chars, bidi_types))
        if not _is_removable(_code_point(ch), bidi_type)
    ]

    if isinstance(chars, str):
        new_chars: Union[str, list[int]] = "".join(chars[i] for i in kept)
    else:
        new_chars = [int(chars[i]) for i in kept]

    new_levels = (
        None if embedding_levels is None else [int(embedding_levels[i]) for i in kept]
    )
    new_from = None if from_this is None else [from_this[i] for i in kept]

    new_to: Optional[list[int]] = None
    if positions_to_this is not None and new_from is not None:
        new_to = [-1] * length
        for j, original in enumerate(new_from):
            if not 0 <= original < length:
                raise ValueError(
                    f"position {original} out of range for length {length}"
                )
            new_to[original] = j

    return RemovedMarks(
        chars=new_chars,
        embedding_levels=new_levels,
        positions_to_this=new_to,
        positions_from_this=new_from if positions_from_this is not None else None,
    )