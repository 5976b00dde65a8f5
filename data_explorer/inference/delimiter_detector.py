import logging

from .base_detector import BaseDetector
from .data_core import DelimiterResult, DelimiterSource
from .policies import DelimiterScoringPolicy

logger = logging.getLogger(__name__)


class DelimiterDetector(BaseDetector):

    def __init__(self, config=None, policy=None):
        super().__init__(config)
        self.policy = policy or DelimiterScoringPolicy(
            self.config.candidate_delimiters
        )

    def detect(self, lines, override=None) -> DelimiterResult:
        """Pick the field separator for the sampled lines.

        A non-empty ``override`` is returned verbatim without looking at the
        sample. Otherwise the policy decides; when it finds nothing the
        result's delimiter is ``None`` and the caller chooses what to do.
        """
        if override:
            logger.info(f"Using user-specified delimiter {override!r}")
            return DelimiterResult(override, DelimiterSource.USER)

        sample = self.limit_sample(lines)
        counts = self.policy.count(sample)
        delimiter = self.policy.choose(counts)

        logger.debug(f"Delimiter counts over {len(sample)} lines: {counts}")
        if delimiter is not None:
            logger.info(f"Detected delimiter {delimiter!r}")

        return DelimiterResult(delimiter, DelimiterSource.DETECTED, counts)

    def detect_with_fallback(self, lines, override=None) -> DelimiterResult:
        """Like ``detect`` but never returns the undetected sentinel."""
        result = self.detect(lines, override)
        if result.delimiter is not None:
            return result

        fallback = self.config.fallback_delimiter
        warning = (
            "Could not reliably detect a delimiter. "
            f"Assuming {self.describe_delimiter(fallback)}."
        )
        logger.warning(warning)
        return DelimiterResult(
            fallback, DelimiterSource.FALLBACK, result.counts, warning=warning
        )

    @staticmethod
    def describe_delimiter(delimiter):
        names = {",": "comma", "\t": "tab", " ": "space"}
        return names.get(delimiter, repr(delimiter))
