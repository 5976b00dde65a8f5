import logging

from data_explorer.config import DEFAULT_CONFIG
from .data_core import DatasetProfile
from .sampler import Sampler
from .delimiter_detector import DelimiterDetector
from .header_detector import HeaderDetector
from .column_type_detector import ColumnTypeAnalyzer, count_columns
from .utils import CompressionHandler

logger = logging.getLogger(__name__)


class DataInferenceEngine:

    def __init__(self, config=None, delimiter_policy=None, type_policy=None):
        self.config = config or DEFAULT_CONFIG
        self.sampler = Sampler(self.config)
        self.delimiter_detector = DelimiterDetector(self.config, delimiter_policy)
        self.header_detector = HeaderDetector(self.config)
        self.column_analyzer = ColumnTypeAnalyzer(self.config, type_policy)

        logger.info(
            f"Initialized inference engine (sample size {self.config.sample_size})"
        )

    def resolve_delimiter(self, filepath, override=None):
        """Delimiter for the raw input, falling back with a warning."""
        if override:
            # The sample is not needed, but the path is still checked.
            self.sampler.validate(filepath)
            return self.delimiter_detector.detect([], override)

        lines = self.sampler.sample(filepath)
        return self.delimiter_detector.detect_with_fallback(lines)

    def profile_canonical(self, canonical_path) -> DatasetProfile:
        """Row count, column count, header flag and column types.

        Reads the whole canonical form once to count records; every
        heuristic only sees the sample.
        """
        sample = []
        row_count = 0
        for line in CompressionHandler.read_lines(canonical_path, self.config.encoding):
            if row_count < self.config.sample_size:
                sample.append(line)
            row_count += 1

        return self.profile_lines(sample, row_count)

    def profile_lines(self, lines, row_count=None) -> DatasetProfile:
        sample = lines[: self.config.sample_size]
        if row_count is None:
            row_count = len(lines)

        column_count = count_columns(sample[0]) if sample else 0
        has_header = self.header_detector.detect(sample)
        column_types = self.column_analyzer.detect(sample, column_count)

        logger.info(
            f"Profiled {row_count} rows: {column_count} columns, "
            f"header={'yes' if has_header else 'no'}"
        )

        return DatasetProfile(
            row_count=row_count,
            column_count=column_count,
            has_header=has_header,
            column_types=column_types,
        )
