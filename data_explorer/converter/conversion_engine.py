from contextlib import contextmanager
from pathlib import Path
import os
import tempfile
import logging

from data_explorer.config import DEFAULT_CONFIG
from data_explorer.inference.data_core import (
    ConfigurationError,
    DataExplorerError,
    OutputFileError,
)
from .normalizer import Normalizer
from .renderers import CsvRenderer, JsonRenderer, MarkdownRenderer

logger = logging.getLogger(__name__)


class ConversionEngine:
    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG
        self.renderer_classes = {
            renderer_class.format_name: renderer_class
            for renderer_class in (CsvRenderer, JsonRenderer, MarkdownRenderer)
        }
        logger.info(
            f"Initialized conversion engine with {len(self.renderer_classes)} formats"
        )

    def get_supported_formats(self):
        return list(self.renderer_classes.keys())

    def create_renderer(self, output_format):
        if output_format not in self.renderer_classes:
            raise ConfigurationError(f"Unsupported output format: {output_format}")

        renderer_class = self.renderer_classes[output_format]
        return renderer_class(self.config)

    def default_output_path(self, input_path, output_format):
        input_path = Path(input_path)
        name = f"{input_path.stem}{self.config.output_suffix}.{output_format}"
        return Path(self.config.output_dir) / name

    @contextmanager
    def normalized(self, input_path, delimiter, skip_lines=0):
        """Yield the path of a temporary canonical form of ``input_path``.

        The file is removed on exit whatever happens, unless a renderer has
        already moved it into place.
        """
        normalizer = Normalizer(delimiter, skip_lines, self.config)

        fd, temp_name = tempfile.mkstemp(prefix="data_explorer_", suffix=".csv")
        os.close(fd)
        canonical_path = Path(temp_name)

        try:
            normalizer.normalize_file(input_path, canonical_path)
            yield canonical_path
        finally:
            if canonical_path.exists():
                canonical_path.unlink()
                logger.debug(f"Removed temporary canonical form {canonical_path}")

    def render(self, canonical_path, output_format, output_path):
        # Resolve the renderer first so an unknown format writes nothing.
        renderer = self.create_renderer(output_format)

        output_path = Path(output_path)
        if output_path.is_dir():
            raise OutputFileError(f"Output path is a directory: {output_path}")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            renderer.render(canonical_path, output_path)
        except DataExplorerError:
            raise
        except OSError as e:
            logger.error(f"Error writing {output_path}: {e}")
            raise OutputFileError(
                f"Could not write output file {output_path}: {e.strerror or e}"
            ) from e

        return output_path

    def render_lines(self, lines, output_format):
        return self.create_renderer(output_format).render_text(lines)
