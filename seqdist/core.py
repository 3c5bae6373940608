"""
seqdist.core — Levenshtein distance over measurable sequences
==============================================================

§1  THE PROBLEM
───────────────

The edit distance between two sequences is the minimum number of
single-element insertions, deletions and substitutions needed to turn
one into the other.  "Element" is deliberately vague: for text it is a
user-perceived character (which may span several code points), for a
token list it is a token, and a caller may want "a" and "A" to count as
the same element.

The DP below therefore never touches a concrete sequence type.  It only
asks two questions of its inputs:

    length()                              how many elements?
    elements_equal(other, i, j)           is self[i] the same as other[j]?

Anything answering those two questions is a MeasurableSequence.


§2  THE RECURRENCE
──────────────────

    D[i][0] = i
    D[0][j] = j
    D[i][j] = min(
        D[i-1][j]   + 1,                      # delete x[i-1]
        D[i][j-1]   + 1,                      # insert y[j-1]
        D[i-1][j-1] + (0 if x[i-1] == y[j-1] else 1),
    )

    distance(x, y) = D[n][m]

Row i only reads row i-1, so two rows of length m+1 are enough.  They
are swapped by reference after each outer iteration; the stale row is
fully overwritten before it is read again.

    time   O(n·m)
    space  O(m)


§3  PROPERTIES
──────────────

    d(x, x) = 0
    d(x, y) = d(y, x)
    d(x, z) ≤ d(x, y) + d(y, z)
    |n - m| ≤ d(x, y) ≤ max(n, m)

Callers are responsible for bounding input sizes: there is no timeout,
and a call on very long inputs simply runs for n·m steps.
"""

import logging

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  MEASURABLE SEQUENCES
# ═══════════════════════════════════════════════════════════════════

class MeasurableSequence:
    """
    Base class for anything the distance function can compare.

    Subclasses implement:
        length()                                  → int ≥ 0
        elements_equal(other, index_in_self, index_in_other) → bool

    Indices passed to elements_equal are always in bounds.  When `other`
    is a concrete type the subclass does not know how to compare with,
    elements_equal must return False rather than raise.
    """
    __slots__ = ()

    def length(self) -> int:
        """Number of elements in this sequence."""
        raise NotImplementedError

    def elements_equal(self, other: "MeasurableSequence",
                       index_in_self: int, index_in_other: int) -> bool:
        """True if self[index_in_self] equals other[index_in_other]."""
        raise NotImplementedError

    def __len__(self) -> int:
        return self.length()


# ═══════════════════════════════════════════════════════════════════
#  CORE DISTANCE FUNCTION
# ═══════════════════════════════════════════════════════════════════

def distance(x, y) -> int:
    """
    Levenshtein distance between two sequences.

    `x` and `y` are MeasurableSequence instances, or plain values that
    seqdist.formats.as_measurable knows how to adapt (str, list, tuple,
    bytes).  Text is measured in grapheme clusters:

        distance("dog", "dogs")     → 1
        distance("puppy", "lucky")  → 3
        distance("", "")            → 0

    Never raises for two sequences, including empty ones.
    """
    x = _adapt(x)
    y = _adapt(y)

    n = x.length()
    m = y.length()

    if n == 0:
        logger.debug("distance: empty first sequence, m=%d", m)
        return m
    if m == 0:
        logger.debug("distance: empty second sequence, n=%d", n)
        return n

    current = list(range(m + 1))
    following = [0] * (m + 1)

    for i in range(1, n + 1):
        following[0] = i
        for j in range(1, m + 1):
            cost = 0 if x.elements_equal(y, i - 1, j - 1) else 1
            following[j] = min(
                current[j] + 1,            # deletion
                following[j - 1] + 1,      # insertion
                current[j - 1] + cost,     # substitution
            )
        current, following = following, current

    result = current[m]
    logger.debug("distance: n=%d m=%d -> %d", n, m, result)
    return result


def normalized_distance(x, y) -> float:
    """
    Edit distance scaled to [0, 1] by the longer sequence.

    0.0 = identical (or both empty)
    1.0 = nothing in common; every element had to be replaced or added
    """
    x = _adapt(x)
    y = _adapt(y)
    longest = max(x.length(), y.length())
    if longest == 0:
        return 0.0
    return distance(x, y) / longest


def _adapt(value) -> MeasurableSequence:
    if isinstance(value, MeasurableSequence):
        return value
    # Imported here: formats builds its adapters on MeasurableSequence.
    from .formats import as_measurable
    return as_measurable(value)
