import gzip
import bz2
import lzma
import zlib

from .data_core import InputFileError

import logging

logger = logging.getLogger(__name__)

# Undecodable bytes survive a read/write round trip unchanged.
ENCODING_ERRORS = "surrogateescape"

# Only "\n" ends a line; a lone "\r" stays inside the record.
LINE_TERMINATOR = "\n"

DECOMPRESSION_ERRORS = (gzip.BadGzipFile, lzma.LZMAError, zlib.error, EOFError)


class CompressionHandler:

    COMPRESSION_MAP = {".gz": "gzip", ".bz2": "bz2", ".xz": "xz", ".lzma": "lzma"}

    @classmethod
    def detect_compression(cls, filepath):
        suffix = filepath.suffix.lower()
        return cls.COMPRESSION_MAP.get(suffix)

    @classmethod
    def open_file(cls, filepath, encoding="utf-8"):
        compression = cls.detect_compression(filepath)
        text_options = {
            "encoding": encoding,
            "errors": ENCODING_ERRORS,
            "newline": LINE_TERMINATOR,
        }

        try:
            if compression == "gzip":
                with gzip.open(filepath, "rt", **text_options) as f:
                    yield from f
            elif compression == "bz2":
                with bz2.open(filepath, "rt", **text_options) as f:
                    yield from f
            elif compression in ("xz", "lzma"):
                with lzma.open(filepath, "rt", **text_options) as f:
                    yield from f
            else:
                with open(filepath, "r", **text_options) as f:
                    yield from f
        except DECOMPRESSION_ERRORS as e:
            raise cls._decompression_error(filepath, compression, e) from e
        except OSError as e:
            if compression and not isinstance(e, (FileNotFoundError, PermissionError)):
                raise cls._decompression_error(filepath, compression, e) from e
            logger.error(f"Error opening file {filepath}: {e}")
            raise InputFileError(f"File not found or not readable: {filepath}") from e

    @staticmethod
    def _decompression_error(filepath, compression, error):
        logger.error(f"Error decompressing file {filepath}: {error!r}")
        return InputFileError(
            f"Could not decompress {filepath} as {compression}: {error}"
        )

    @classmethod
    def read_lines(cls, filepath, encoding="utf-8"):
        """Yield lines without their trailing "\\n" or "\\r\\n"."""
        for line in cls.open_file(filepath, encoding=encoding):
            yield strip_line_terminator(line)


def strip_line_terminator(line):
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_fields(line, separator=","):
    """Tokenise a canonical record; an empty line is a single empty field."""
    return line.split(separator)
