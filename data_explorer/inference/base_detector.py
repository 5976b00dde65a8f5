from abc import ABC, abstractmethod

from data_explorer.config import DEFAULT_CONFIG
from .utils import strip_line_terminator


class BaseDetector(ABC):

    def __init__(self, config=None):
        self.name = self.__class__.__name__
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def detect(self, lines):
        """Run the heuristic over sampled lines."""
        pass

    def limit_sample(self, lines, max_lines=None):
        """Bound the lines a heuristic may look at.

        Blank lines are kept: they are records in the canonical form and
        count towards the sample like any other line.
        """
        if max_lines is None:
            max_lines = self.config.sample_size
        limited = []
        for i, line in enumerate(lines):
            if i >= max_lines:
                break
            limited.append(strip_line_terminator(line))
        return limited
