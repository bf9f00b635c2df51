"""
Identifier Grammar - ECMAScript-style identifier checks.

Validates binding names and dotted property paths before they are
written into a script. The check is lexical only: reserved words such
as ``let`` or ``class`` are accepted.

General categories come from ``unicodedata``; the binary properties
below are transcribed from Unicode ``PropList.txt``.
"""

import unicodedata
from bisect import bisect_right

# Inclusive code point ranges, sorted by start.
OTHER_ID_START: tuple[tuple[int, int], ...] = (
    (0x1885, 0x1886),
    (0x2118, 0x2118),
    (0x212E, 0x212E),
    (0x309B, 0x309C),
)

OTHER_ID_CONTINUE: tuple[tuple[int, int], ...] = (
    (0x00B7, 0x00B7),
    (0x0387, 0x0387),
    (0x1369, 0x1371),
    (0x19DA, 0x19DA),
)

PATTERN_WHITE_SPACE: tuple[tuple[int, int], ...] = (
    (0x0009, 0x000D),
    (0x0020, 0x0020),
    (0x0085, 0x0085),
    (0x200E, 0x200F),
    (0x2028, 0x2029),
)

PATTERN_SYNTAX: tuple[tuple[int, int], ...] = (
    (0x0021, 0x002F),
    (0x003A, 0x0040),
    (0x005B, 0x005E),
    (0x0060, 0x0060),
    (0x007B, 0x007E),
    (0x00A1, 0x00A7),
    (0x00A9, 0x00A9),
    (0x00AB, 0x00AC),
    (0x00AE, 0x00AE),
    (0x00B0, 0x00B1),
    (0x00B6, 0x00B6),
    (0x00BB, 0x00BB),
    (0x00BF, 0x00BF),
    (0x00D7, 0x00D7),
    (0x00F7, 0x00F7),
    (0x2010, 0x2027),
    (0x2030, 0x203E),
    (0x2041, 0x2053),
    (0x2055, 0x205E),
    (0x2190, 0x245F),
    (0x2500, 0x2775),
    (0x2794, 0x2BFF),
    (0x2E00, 0x2E7F),
    (0x3001, 0x3003),
    (0x3008, 0x3020),
    (0x3030, 0x3030),
    (0xFD3E, 0xFD3F),
    (0xFE45, 0xFE46),
)

# ZERO WIDTH NON-JOINER, ZERO WIDTH JOINER, KATAKANA MIDDLE DOT,
# HALFWIDTH KATAKANA MIDDLE DOT
EXTRA_ID_CONTINUE = frozenset({0x200C, 0x200D, 0x30FB, 0xFF65})

LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"})
CONTINUE_CATEGORIES = LETTER_CATEGORIES | {"Mn", "Mc", "Nd", "Pc"}


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    idx = bisect_right(ranges, (cp, 0x10FFFF)) - 1
    return idx >= 0 and ranges[idx][0] <= cp <= ranges[idx][1]


def _is_pattern(cp: int) -> bool:
    return _in_ranges(cp, PATTERN_SYNTAX) or _in_ranges(cp, PATTERN_WHITE_SPACE)


def is_id_start(ch: str) -> bool:
    """Check whether a single character may start an identifier."""
    if ch in ("_", "$"):
        return True
    cp = ord(ch)
    allowed = unicodedata.category(ch) in LETTER_CATEGORIES or _in_ranges(cp, OTHER_ID_START)
    return allowed and not _is_pattern(cp)


def is_id_continue(ch: str) -> bool:
    """Check whether a single character may continue an identifier."""
    if ch == "$":
        return True
    cp = ord(ch)
    allowed = (
        unicodedata.category(ch) in CONTINUE_CATEGORIES
        or _in_ranges(cp, OTHER_ID_START)
        or _in_ranges(cp, OTHER_ID_CONTINUE)
        or cp in EXTRA_ID_CONTINUE
    )
    return allowed and not _is_pattern(cp)


def is_identifier(name: str) -> bool:
    """
    Check a binding name against the identifier grammar.

    Args:
        name: Proposed variable name

    Returns:
        True if the name is non-empty, starts with an ID_Start
        character and continues with ID_Continue characters
    """
    if not name:
        return False
    if not is_id_start(name[0]):
        return False
    return all(is_id_continue(ch) for ch in name[1:])


def is_property_access(path: str) -> bool:
    """Check a dotted assignment target such as ``window.app.config``."""
    return all(is_identifier(segment) for segment in path.split("."))
