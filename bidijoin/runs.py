"""Runs of characters sharing a bidi type, and lists of such runs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .types import NO_BRACKET, BidiType, is_isolate

__all__ = ["Run", "RunList"]


@dataclass
class Run:
    """A stretch of text positions that share one bidi type."""

    pos: int
    length: int
    type: BidiType
    level: int = 0
    isolate_level: int = 0
    bracket_type: int = NO_BRACKET
    prev_isolate: Optional["Run"] = field(default=None, repr=False, compare=False)
    next_isolate: Optional["Run"] = field(default=None, repr=False, compare=False)

    @property
    def end(self) -> int:
        """Position just past the run."""
        return self.pos + self.length


class RunList:
    """An ordered list of runs."""

    def __init__(self) -> None:
        self._runs: list[Run] = []

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)

    def __len__(self) -> int:
        return len(self._runs)

    def __repr__(self) -> str:
        return f"RunList({self._runs!r})"

    def append(self, run: Run) -> None:
        """Add a run at the end of the list."""
        self._runs.append(run)

    @classmethod
    def from_bidi_types(
        cls,
        bidi_types: Sequence[BidiType],
        bracket_types: Optional[Sequence[int]] = None,
    ) -> "RunList":
        """Group consecutive equal bidi types into runs.

        Brackets and isolate codes always get runs of their own, and the
        character after a bracket always starts a new run.
        """
        if bracket_types is not None and len(bracket_types) != len(bidi_types):
            raise ValueError("bidi_types and bracket_types must have the same length")
        result = cls()
        last: Optional[Run] = None
        for i, char_type in enumerate(bidi_types):
            bracket = NO_BRACKET if bracket_types is None else bracket_types[i]
            if (
                last is None
                or char_type != last.type
                or bracket != NO_BRACKET
                or last.bracket_type != NO_BRACKET
                or is_isolate(char_type)
            ):
                if last is not None:
                    last.length = i - last.pos
                last = Run(pos=i, length=0, type=char_type, bracket_type=bracket)
                result.append(last)
        if last is not None:
            last.length = len(bidi_types) - last.pos
        result.validate()
        return result

    def shadow(self, over: "RunList", preserve_length: bool = False) -> None:
        """Overlay the runs of ``over`` onto this list, moving them here.

        Each overlaying run replaces the part of this list it covers; runs it
        cuts are trimmed or split.  With ``preserve_length`` the last covered
        run is first lengthened by the overlaying run, as when reinserting
        removed characters.  Empty runs and runs starting before the previous
        one are skipped.  ``over`` is empty afterwards.
        """
        self.validate()
        over.validate()
        runs = self._runs
        last_pos = 0
        for q in list(over):
            if not q.length or q.pos < last_pos:
                continue
            pos = q.pos
            last_pos = pos
            pos2 = pos + q.length

            p = -1
            while p + 1 < len(runs) and runs[p + 1].pos <= pos:
                p += 1
            r = p
            while r + 1 < len(runs) and runs[r + 1].pos < pos2:
                r += 1
            if preserve_length and r >= 0:
                runs[r].length += q.length

            if p == r:
                inserted = [q]
                if p >= 0 and runs[p].end > pos2:
                    base = runs[p]
                    inserted.append(
                        Run(
                            pos=pos2,
                            length=base.end - pos2,
                            type=base.type,
                            level=base.level,
                            isolate_level=base.isolate_level,
                        )
                    )
                right = p + 1
                left = self._trim_head(p, pos)
            else:
                inserted = [q]
                left = self._trim_head(p, pos)
                tail = runs[r]
                if tail.end > pos2:
                    tail.length = tail.end - pos2
                    tail.pos = pos2
                    right = r
                else:
                    right = r + 1
            runs[left:right] = inserted

        over._runs.clear()
        self.validate()

    def _trim_head(self, p: int, pos: int) -> int:
        """Cut run ``p`` at ``pos``; return the index where removal starts."""
        if p < 0:
            return 0
        head = self._runs[p]
        if head.end >= pos:
            if head.pos < pos:
                head.length = pos - head.pos
                return p + 1
            return p
        return p + 1

    def validate(self) -> None:
        """Raise ValueError if the runs are not well formed and ordered."""
        previous = 0
        for run in self._runs:
            if run.type == BidiType.SENTINEL:
                raise ValueError("run list holds a sentinel run")
            if run.pos < 0 or run.length < 0:
                raise ValueError(f"run with negative position or length: {run!r}")
            if run.pos < previous:
                raise ValueError(f"runs out of order at position {run.pos}")
            previous = run.pos