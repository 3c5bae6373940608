"""
seqdist.formats — Adapt real-world data to MeasurableSequence.

Supported conversions:
    • str                      → GraphemeString (user-perceived characters)
    • list/tuple/bytes         → TokenSequence (element-wise ==)
    • MeasurableSequence       → itself
"""

import unicodedata
from typing import Any, Callable, Optional, Sequence

import regex

from .core import MeasurableSequence

_GRAPHEME = regex.compile(r"\X")


# ═══════════════════════════════════════════════════════════════════
#  TEXT  (grapheme clusters)
# ═══════════════════════════════════════════════════════════════════

def graphemes(text: str) -> list[str]:
    """
    Split text into extended grapheme clusters.

        graphemes("Coruña")          → ['C', 'o', 'r', 'u', 'ñ', 'a']
        graphemes("Coru" "n\\u0303" "a") → ['C', 'o', 'r', 'u', 'ñ', 'a']

    The second form has a combining tilde: 7 code points, 6 graphemes.
    """
    return _GRAPHEME.findall(text)


class GraphemeString(MeasurableSequence):
    """
    Text measured in grapheme clusters.

    Clusters are NFC-normalized so canonically equivalent spellings of
    the same character compare equal.  An optional `key` is applied to
    each cluster before comparison:

        GraphemeString("Hello", key=str.casefold)
    """
    __slots__ = ("text", "_clusters")

    def __init__(self, text: str, key: Optional[Callable[[str], Any]] = None):
        self.text = text
        clusters = [unicodedata.normalize("NFC", c) for c in graphemes(text)]
        if key is not None:
            clusters = [key(c) for c in clusters]
        self._clusters = clusters

    def length(self) -> int:
        return len(self._clusters)

    def elements_equal(self, other: MeasurableSequence,
                       index_in_self: int, index_in_other: int) -> bool:
        if not isinstance(other, GraphemeString):
            return False
        return self._clusters[index_in_self] == other._clusters[index_in_other]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"GraphemeString({self.text!r})"


# ═══════════════════════════════════════════════════════════════════
#  TOKENS  (any Python sequence)
# ═══════════════════════════════════════════════════════════════════

class TokenSequence(MeasurableSequence):
    """
    A plain Python sequence compared element by element.

        TokenSequence(["the", "quick", "fox"])
        TokenSequence(b"\\x00\\x01")
        TokenSequence(["The", "FOX"], key=str.lower)
    """
    __slots__ = ("items", "_keys")

    def __init__(self, items: Sequence[Any],
                 key: Optional[Callable[[Any], Any]] = None):
        self.items = tuple(items)
        if key is None:
            self._keys = self.items
        else:
            self._keys = tuple(key(item) for item in self.items)

    def length(self) -> int:
        return len(self._keys)

    def elements_equal(self, other: MeasurableSequence,
                       index_in_self: int, index_in_other: int) -> bool:
        if not isinstance(other, TokenSequence):
            return False
        return self._keys[index_in_self] == other._keys[index_in_other]

    def __repr__(self) -> str:
        if len(self.items) <= 5:
            return f"TokenSequence({list(self.items)!r})"
        return (f"TokenSequence([{self.items[0]!r}, ..., {self.items[-1]!r}] "
                f"len={len(self.items)})")


# ═══════════════════════════════════════════════════════════════════
#  ADAPTATION
# ═══════════════════════════════════════════════════════════════════

def as_measurable(obj: Any) -> MeasurableSequence:
    """
    Convert a value into a MeasurableSequence.

    Mapping:
        MeasurableSequence      → unchanged
        str                     → GraphemeString
        list/tuple/bytes        → TokenSequence

    Raises TypeError for anything else.
    """
    if isinstance(obj, MeasurableSequence):
        return obj
    if isinstance(obj, str):
        return GraphemeString(obj)
    if isinstance(obj, (list, tuple, bytes, bytearray)):
        return TokenSequence(obj)
    raise TypeError(f"Cannot measure value of type {type(obj).__name__}")
