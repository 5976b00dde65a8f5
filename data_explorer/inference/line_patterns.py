import re
from typing import List
from dataclasses import dataclass

from .data_core import ColumnType


@dataclass
class TypePattern:
    """A value pattern and the column type it votes for."""

    pattern: re.Pattern
    column_type: ColumnType
    name: str

    def matches(self, value):
        return bool(self.pattern.search(value))


patterns = {
    # Checked in order; each must reach the match threshold on its own.
    "NumericTypes": [
        TypePattern(
            pattern=re.compile(r"^[0-9]+$"),
            column_type=ColumnType.INTEGER,
            name="integer",
        ),
        TypePattern(
            pattern=re.compile(r"^[0-9]+\.[0-9]+$"),
            column_type=ColumnType.FLOAT,
            name="float",
        ),
    ],
    # A single match anywhere in the column is enough.
    "TextTypes": [
        TypePattern(
            pattern=re.compile(r"[a-zA-Z]"),
            column_type=ColumnType.STRING,
            name="alpha",
        ),
    ],
}

ALPHA_PATTERN = patterns["TextTypes"][0].pattern


def contains_alpha(line) -> bool:
    return bool(ALPHA_PATTERN.search(line))


def numeric_patterns() -> List[TypePattern]:
    return list(patterns["NumericTypes"])


def text_patterns() -> List[TypePattern]:
    return list(patterns["TextTypes"])
