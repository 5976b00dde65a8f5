from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import sys
import logging

from data_explorer.config import DEFAULT_CONFIG
from data_explorer.inference.data_core import ColumnTypeVerdict, DelimiterResult
from data_explorer.inference.utils import strip_line_terminator

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    input_path: str
    output_path: str
    output_format: str
    skip_lines: int
    row_count: int
    delimiter: DelimiterResult
    column_count: int
    has_header: bool
    column_types: List[ColumnTypeVerdict] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_profile(
        cls, input_path, output_path, output_format, skip_lines, delimiter, profile
    ):
        warnings = [delimiter.warning] if delimiter.warning else []
        return cls(
            input_path=str(input_path),
            output_path=str(output_path),
            output_format=output_format,
            skip_lines=skip_lines,
            row_count=profile.row_count,
            delimiter=delimiter,
            column_count=profile.column_count,
            has_header=profile.has_header,
            column_types=list(profile.column_types),
            warnings=warnings,
        )


@dataclass
class Preview:
    head: List[str]
    tail: List[str]


class Reporter:
    """Fixed-order console text for an analysed and converted file."""

    def __init__(self, config=None, stream=None):
        self.config = config or DEFAULT_CONFIG
        self.stream = stream

    def summary_lines(self, report: AnalysisReport):
        return [
            "--- Analysis Summary ---",
            f"Original File:   {report.input_path}",
            f"Output File:     {report.output_path}",
            f"Output Format:   {report.output_format}",
            f"Lines to Skip:   {report.skip_lines}",
            f"Total Rows:      {report.row_count}",
            f"Delimiter:       {report.delimiter.describe()}",
            f"Columns:         {report.column_count}",
            f"Header Detected: {'yes' if report.has_header else 'no'}",
        ]

    def warning_lines(self, report: AnalysisReport):
        return [f"Warning: {warning}" for warning in report.warnings]

    def column_type_lines(self, report: AnalysisReport):
        lines = ["--- Column Data Type Analysis ---"]
        for verdict in report.column_types:
            lines.append(f"  Column {verdict.index}: {verdict.label}")
        return lines

    def build_preview(self, output_path) -> Optional[Preview]:
        """Head and tail of the output file, or None if it was not written."""
        output_path = Path(output_path)
        if not output_path.is_file():
            logger.debug(f"No output file at {output_path}, skipping preview")
            return None

        n = self.config.preview_lines
        head = []
        tail = deque(maxlen=n)
        # Shown on the console, so undecodable bytes are replaced.
        with open(
            output_path,
            "r",
            encoding=self.config.encoding,
            errors="replace",
            newline="\n",
        ) as f:
            for line in f:
                line = strip_line_terminator(line)
                if len(head) < n:
                    head.append(line)
                tail.append(line)

        return Preview(head=head, tail=list(tail))

    def preview_lines(self, output_path):
        n = self.config.preview_lines
        preview = self.build_preview(output_path)
        unavailable = ["Preview not available for this format."]

        lines = [f"--- Structured Data Preview (First {n} lines) ---"]
        lines.extend(preview.head if preview else unavailable)
        lines.append("")
        lines.append(f"--- Structured Data Preview (Last {n} lines) ---")
        lines.extend(preview.tail if preview else unavailable)
        return lines

    def print_summary(self, report: AnalysisReport):
        self._emit(self.warning_lines(report))
        self._emit([""] + self.summary_lines(report))
        self._emit([""] + self.column_type_lines(report))

    def print_preview(self, output_path):
        self._emit([""] + self.preview_lines(output_path))

    def print_completion(self, output_path):
        self._emit(
            [
                "",
                "--- Processing Complete ---",
                f"Your structured data is ready at: {output_path}",
            ]
        )

    def _emit(self, lines):
        stream = self.stream or sys.stdout
        for line in lines:
            print(line, file=stream)
