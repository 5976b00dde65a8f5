from enum import Enum
from dataclasses import dataclass, field


class ColumnType(Enum):
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String/Mixed"
    UNKNOWN = "Unknown"


class DelimiterSource(Enum):
    USER = "user"
    DETECTED = "detected"
    FALLBACK = "fallback"


class DataExplorerError(Exception):
    """Base class for errors raised while structuring a file."""


class InputFileError(DataExplorerError, FileNotFoundError):
    """Input path is missing, not a regular file, or unreadable."""


class ConfigurationError(DataExplorerError, ValueError):
    """A run was configured in a way the conversion stage cannot honour."""


class OutputFileError(DataExplorerError, OSError):
    """The output file or its directory could not be written."""


@dataclass
class DelimiterResult:

    delimiter: str
    source: DelimiterSource
    counts: dict = field(default_factory=dict)
    warning: str = None

    @property
    def is_user_specified(self):
        return self.source == DelimiterSource.USER

    def describe(self):
        label = "User-specified" if self.is_user_specified else "Detected"
        return f"{label}: '{self.delimiter}'"


@dataclass
class ColumnTypeVerdict:

    index: int
    column_type: ColumnType
    counts: dict = field(default_factory=dict)

    @property
    def label(self):
        return self.column_type.value


@dataclass
class DatasetProfile:
    """What the detectors learned from the canonical form."""

    row_count: int
    column_count: int
    has_header: bool
    column_types: list = field(default_factory=list)
