"""
Pluggable detection policies.

Thresholds and candidate sets live here as data so each policy can be
exercised on its own, independently of sampling and file I/O.
"""
import logging

from .data_core import ColumnType
from .line_patterns import numeric_patterns, text_patterns

logger = logging.getLogger(__name__)


class DelimiterScoringPolicy:
    """Choose a delimiter from per-candidate occurrence counts.

    Candidates are ordered: the first is the primary, the last is the
    fallback and any in between are challengers.

    - the primary wins if its count strictly exceeds every other count;
    - otherwise the first challenger whose count strictly exceeds the
      primary's wins;
    - otherwise the fallback wins if it occurs at all;
    - otherwise nothing was detected and ``None`` is returned.
    """

    def __init__(self, candidates=(",", "\t", " ")):
        if not candidates:
            raise ValueError("At least one candidate delimiter is required")
        self.candidates = tuple(candidates)

    def count(self, lines):
        counts = {candidate: 0 for candidate in self.candidates}
        for line in lines:
            for candidate in self.candidates:
                counts[candidate] += line.count(candidate)
        return counts

    def choose(self, counts):
        primary = self.candidates[0]
        fallback = self.candidates[-1]
        primary_count = counts.get(primary, 0)

        others = [counts.get(c, 0) for c in self.candidates[1:]]
        if primary_count > 0 and all(primary_count > other for other in others):
            return primary

        for challenger in self.candidates[1:-1]:
            if counts.get(challenger, 0) > primary_count:
                return challenger

        if len(self.candidates) > 1 and counts.get(fallback, 0) > 0:
            return fallback

        return None


class ThresholdTypePolicy:
    """Classify a column from its sampled values.

    Numeric patterns need an absolute number of matching values
    (``min_matches``), so a sample shorter than that can never be numeric.
    Any single value matching a text pattern makes the column textual.
    """

    def __init__(self, min_matches=90, numeric=None, text=None):
        self.min_matches = min_matches
        self.numeric = numeric if numeric is not None else numeric_patterns()
        self.text = text if text is not None else text_patterns()

    def count(self, values):
        counts = {}
        for type_pattern in self.numeric + self.text:
            counts[type_pattern.name] = sum(
                1 for value in values if type_pattern.matches(value)
            )
        return counts

    def classify(self, counts) -> ColumnType:
        for type_pattern in self.numeric:
            if counts.get(type_pattern.name, 0) >= self.min_matches:
                return type_pattern.column_type

        for type_pattern in self.text:
            if counts.get(type_pattern.name, 0) > 0:
                return type_pattern.column_type

        return ColumnType.UNKNOWN
