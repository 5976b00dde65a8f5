import logging

from .base_detector import BaseDetector
from .data_core import ColumnTypeVerdict
from .policies import ThresholdTypePolicy
from .utils import split_fields

logger = logging.getLogger(__name__)

CANONICAL_SEPARATOR = ","


class ColumnTypeAnalyzer(BaseDetector):
    """Classify each column of the canonical (comma-joined) sample.

    Must run after the delimiter has been resolved and the records have
    been normalised, since it always splits on commas.
    """

    def __init__(self, config=None, policy=None):
        super().__init__(config)
        self.policy = policy or ThresholdTypePolicy(self.config.type_match_threshold)

    def detect(self, lines, column_count=None):
        sample = self.limit_sample(lines)
        if column_count is None:
            column_count = count_columns(sample[0]) if sample else 0

        return [
            self.analyze_column(sample, index)
            for index in range(1, column_count + 1)
        ]

    def analyze_column(self, lines, column_index) -> ColumnTypeVerdict:
        """Classify column ``column_index`` (1-based) of the sample."""
        if column_index < 1:
            raise ValueError(f"Column index must be 1 or greater: {column_index}")

        values = self.extract_column(self.limit_sample(lines), column_index)
        counts = self.policy.count(values)
        column_type = self.policy.classify(counts)

        logger.debug(f"Column {column_index}: {counts} -> {column_type.value}")
        return ColumnTypeVerdict(column_index, column_type, counts)

    @staticmethod
    def extract_column(lines, column_index):
        values = []
        for line in lines:
            fields = split_fields(line, CANONICAL_SEPARATOR)
            # Unlike `cut -d, -fN`, a line without a comma gives "" for column 2
            # and above instead of repeating the whole line.
            values.append(fields[column_index - 1] if column_index <= len(fields) else "")
        return values


def count_columns(line):
    """Number of fields in a canonical record, by tokenising it."""
    if line is None:
        return 0
    return len(split_fields(line, CANONICAL_SEPARATOR))
