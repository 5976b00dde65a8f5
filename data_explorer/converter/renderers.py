from abc import ABC, abstractmethod
import re
import shutil
import logging

from data_explorer.config import DEFAULT_CONFIG
from data_explorer.inference.utils import (
    ENCODING_ERRORS,
    CompressionHandler,
    split_fields,
)

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):

    format_name = None

    def __init__(self, config=None):
        self.name = self.__class__.__name__
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def iter_chunks(self, lines):
        """Yield output text for canonical records, written verbatim."""
        pass

    def render_text(self, lines):
        return "".join(self.iter_chunks(lines))

    def render(self, canonical_path, output_path):
        lines = CompressionHandler.read_lines(canonical_path, self.config.encoding)
        with open(
            output_path,
            "w",
            encoding=self.config.encoding,
            errors=ENCODING_ERRORS,
            newline="",
        ) as f:
            for chunk in self.iter_chunks(lines):
                f.write(chunk)
        logger.info(f"{self.name} wrote {output_path}")


class CsvRenderer(BaseRenderer):
    """The canonical form already is the CSV output."""

    format_name = "csv"

    def iter_chunks(self, lines):
        for line in lines:
            yield line + "\n"

    def render(self, canonical_path, output_path):
        # Consumes the canonical file: it becomes the output.
        shutil.move(str(canonical_path), str(output_path))
        logger.info(f"{self.name} moved canonical form to {output_path}")


class JsonRenderer(BaseRenderer):
    """Array of objects keyed by the first record.

    All values stay strings and nothing is escaped, so quotes or backslashes
    in the data produce invalid JSON. Extra values in a row are keyed by the
    empty string.
    """

    format_name = "json"

    def iter_chunks(self, lines):
        yield "["
        headers = None
        first_object = True

        for line in lines:
            fields = split_fields(line) if line else []
            if headers is None:
                headers = fields
                continue

            pairs = []
            for i, value in enumerate(fields):
                key = headers[i] if i < len(headers) else ""
                pairs.append(f'"{key}":"{value}"')

            yield ("" if first_object else ",") + "{" + ",".join(pairs) + "}"
            first_object = False

        yield "]\n"


class MarkdownRenderer(BaseRenderer):
    """Pipe-wrapped rows under a dashed separator row.

    Records are wrapped as they are, commas included; the separator keeps
    the header's comma positions and dashes out everything else.
    """

    format_name = "md"

    SEPARATOR_FILL = re.compile(r"[^|,]")

    def iter_chunks(self, lines):
        header_written = False
        for line in lines:
            yield f"|{line}|\n"
            if not header_written:
                yield f"|{self.separator_row(line)}|\n"
                header_written = True

    def separator_row(self, header_line):
        return self.SEPARATOR_FILL.sub("-", header_line)
