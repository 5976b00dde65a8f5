from pathlib import Path
import logging

from data_explorer.config import DEFAULT_CONFIG
from data_explorer.inference.data_core import ConfigurationError
from data_explorer.inference.utils import ENCODING_ERRORS, CompressionHandler

logger = logging.getLogger(__name__)

CANONICAL_SEPARATOR = ","


class Normalizer:
    """Rewrite input records into the comma-joined canonical form.

    Every occurrence of the delimiter is replaced by a comma. Fields are
    assumed to be unquoted: a comma already present in a field cannot be told
    apart from a separator afterwards.
    """

    def __init__(self, delimiter, skip_lines=0, config=None):
        if not delimiter:
            raise ConfigurationError("No delimiter detected. Cannot reformat.")
        if skip_lines < 0:
            raise ConfigurationError(
                f"Lines to skip must be zero or greater: {skip_lines}"
            )

        self.delimiter = delimiter
        self.skip_lines = skip_lines
        self.config = config or DEFAULT_CONFIG

    def normalize_line(self, line):
        if self.delimiter == CANONICAL_SEPARATOR:
            return line
        return line.replace(self.delimiter, CANONICAL_SEPARATOR)

    def normalize_lines(self, lines):
        for i, line in enumerate(lines):
            if i < self.skip_lines:
                continue
            yield self.normalize_line(line)

    def normalize_file(self, input_path, canonical_path):
        """Write the canonical form of ``input_path``; return the record count."""
        input_path = Path(input_path)
        records = 0

        lines = CompressionHandler.read_lines(input_path, self.config.encoding)
        with open(
            canonical_path,
            "w",
            encoding=self.config.encoding,
            errors=ENCODING_ERRORS,
            newline="",
        ) as f:
            for record in self.normalize_lines(lines):
                f.write(record + "\n")
                records += 1

        logger.info(
            f"Normalized {records} records from {input_path} "
            f"(skipped {self.skip_lines}, delimiter {self.delimiter!r})"
        )
        return records
