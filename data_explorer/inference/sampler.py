from pathlib import Path
import logging

from data_explorer.config import DEFAULT_CONFIG
from .data_core import InputFileError
from .utils import CompressionHandler

logger = logging.getLogger(__name__)


class Sampler:
    """Reads a bounded prefix of a file for the detectors."""

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG

    @staticmethod
    def validate(filepath):
        filepath = Path(filepath)

        if not filepath.exists():
            raise InputFileError(f"File not found or not readable: {filepath}")

        if not filepath.is_file():
            raise InputFileError(f"Path is not a file: {filepath}")

        return filepath

    def sample(self, filepath, size=None):
        """Return up to ``size`` lines; shorter files simply yield fewer."""
        filepath = self.validate(filepath)
        size = self.config.sample_size if size is None else size

        lines = []
        for line in CompressionHandler.read_lines(filepath, self.config.encoding):
            if len(lines) >= size:
                break
            lines.append(line)

        logger.info(f"Sampled {len(lines)} lines from {filepath}")
        return lines
