# bidijoin

Pure-Python building blocks for bidirectional text. It has no dependencies
outside the standard library.

## Modules

- `bidijoin.types` holds the core types and constants.
  - `BidiType` is the set of bidi character types. `L`, `R`, `B` and `S` are
    aliases of `LTR`, `RTL`, `BS` and `SS`.
  - `ParType` is the set of paragraph directions: `LTR`, `RTL`, `ON`, `WLTR`
    and `WRTL`.
  - `Flags` is the set of option bits. It includes the combinations
    `Flags.DEFAULT` and `Flags.ARABIC`.
  - The helpers are `is_explicit_or_bn`, `is_isolate`, `level_is_rtl` and
    `char_from_bidi_type`, which gives a one-character debug symbol.
  - The module also defines constants for the special characters, such as
    `CHAR_LRM`, `CHAR_RLM`, `CHAR_ZWJ` and `CHAR_FILL`, and limits such as
    `BIDI_MAX_EXPLICIT_LEVEL`.
- `bidijoin.joining_types` covers Arabic joining properties.
  - A property is an integer bit set made of `JoiningMask` bits.
  - `JoiningType` is the set of primary classes: `U`, `R`, `D`, `C`, `T`, `L`
    and `G`.
  - `classify(prop)` returns the class of a property, or `None`.
    `joining_type_name` returns the one-letter name, or `"?"` if the type is
    unknown. `char_from_joining_type(prop, visual)` returns a debug symbol.
  - The predicates are `joins_right`, `joins_left`, `arab_shapes`,
    `is_join_skipped`, `is_join_base_shapes`, `is_right_join_causing` and
    `is_left_join_causing`.
  - The level-aware masks are `joins_preceding_mask` and
    `joins_following_mask`. `join_shape` keeps only the joining-side bits of
    a property.
- `bidijoin.joining` provides `join_arabic(bidi_types, embedding_levels,
  ar_props)`.
  - It applies the Arabic cursive joining rules and returns a new list of
    properties.
  - Characters at different embedding levels never join. Explicit codes and
    boundary neutrals match any level.
  - Transparent characters between two joined characters receive both
    joining bits.
  - It raises `ValueError` if the three sequences differ in length.
- `bidijoin.runs` provides `Run` and `RunList`.
  - A `Run` has the fields `pos`, `length`, `type`, `level`, `isolate_level`
    and `bracket_type`.
  - `RunList.from_bidi_types(bidi_types, bracket_types=None)` groups equal
    consecutive types into runs. Brackets and isolates always get runs of
    their own.
  - `RunList.shadow(over, preserve_length=False)` overlays the runs of
    `over` onto the list, trimming or splitting the runs they cover, and
    empties `over`.
  - `RunList.validate()` raises `ValueError` if the list is malformed.
- `bidijoin.marks` provides
  `remove_bidi_marks(chars, bidi_types, positions_to_this=None,
  positions_from_this=None, embedding_levels=None)`.
  - It drops explicit codes, boundary neutrals, isolates, LRM and RLM.
  - It returns a `RemovedMarks` holding the cleaned string and the compacted
    companion lists.
  - In `positions_to_this`, removed positions are set to -1.
  - `chars` may be a `str` or a sequence of code points.

## Example

```python
from bidijoin.types import BidiType
from bidijoin.joining_types import JoiningType, joining_type_name
from bidijoin.joining import join_arabic

bidi_types = [BidiType.AL, BidiType.AL, BidiType.AL]
levels = [1, 1, 1]
props = [JoiningType.D, JoiningType.D, JoiningType.D]

joined = join_arabic(bidi_types, levels, props)
print([joining_type_name(p) for p in joined])  # ['L', 'D', 'R']
```

```python
from bidijoin.types import BidiType, CHAR_LRM
from bidijoin.marks import remove_bidi_marks

text = "a" + chr(CHAR_LRM) + "b"
types = [BidiType.LTR, BidiType.LTR, BidiType.LTR]
result = remove_bidi_marks(text, types, embedding_levels=[0, 0, 0])
print(result.chars, result.embedding_levels)  # ab [0, 0]
```

## What it does not do

The package has no table of Unicode character properties. You supply the
bidi type and the initial joining type of each character yourself.

It does not resolve embedding levels, reorder lines, mirror characters or
apply Arabic presentation-form shaping. `join_arabic` expects embedding
levels that have already been resolved.

There is no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```