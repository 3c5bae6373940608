"""
seqdist — Levenshtein distance over measurable sequences
========================================================

    distance("dog", "dogs")                      → 1
    distance("puppy", "lucky")                   → 3
    distance("Coruña", "La Coruña")              → 3   (graphemes, not bytes)
    distance(["a", "b"], ["a", "c", "b"])        → 1   (token lists)

The DP runs over anything implementing MeasurableSequence, so custom
element semantics (case folding, phonetic keys) plug in without touching
the algorithm:

    distance(GraphemeString("Madrid", key=str.casefold),
             GraphemeString("MADRID", key=str.casefold))   → 0
"""

from seqdist.core import (
    MeasurableSequence,
    distance,
    normalized_distance,
)
from seqdist.formats import (
    GraphemeString, TokenSequence, as_measurable, graphemes,
)

__version__ = "0.1.0"
__all__ = [
    "MeasurableSequence",
    "distance", "normalized_distance",
    "GraphemeString", "TokenSequence", "as_measurable", "graphemes",
]
