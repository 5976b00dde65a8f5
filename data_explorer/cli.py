#!/usr/bin/env python3

"""
cli.py

Entry point for the Data Explorer command line tool.

Analyses a delimited text file, prints a summary of its shape and writes
it out as CSV, JSON or a Markdown table.
"""

import argparse
import logging
import sys

from .config import ProcessorConfig
from .inference.data_core import DataExplorerError, InputFileError
from .inference.inference_engine import DataInferenceEngine
from .converter.conversion_engine import ConversionEngine
from .report.reporter import AnalysisReport, Reporter

USAGE = """\
Usage: data-explorer <file> [-d <delimiter>] [-o <output_file>] [-s <skip_lines>] [-f <format>] [-v] [-h]

  <file>            Path to the raw data file.
  -d <delimiter>    Specify the input file delimiter (e.g., ',').
  -o <output_file>  Specify the output file path. The extension is determined by the format.
  -s <skip_lines>   Number of lines to skip from the beginning of the file (e.g., header lines).
  -f <format>       Output format: 'csv', 'json', or 'md' (Markdown). Default is csv.
  -v                Log detection details to stderr.
  -h                Display this help message.
"""

ESCAPED_DELIMITERS = {"\\t": "\t", "\\s": " "}


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = ArgumentParser(prog="data-explorer", add_help=False)
    parser.add_argument("file", nargs="?")
    parser.add_argument("-d", dest="delimiter", default="")
    parser.add_argument("-o", dest="output", default="")
    parser.add_argument("-s", dest="skip_lines", type=int, default=0)
    parser.add_argument("-f", dest="format", default="csv")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-h", dest="help", action="store_true")
    return parser


def decode_delimiter(value):
    return ESCAPED_DELIMITERS.get(value, value)


def usage(out=None):
    print(USAGE, file=out or sys.stdout)
    return 1


def run(args, config=None):
    config = config or ProcessorConfig()
    inference = DataInferenceEngine(config)
    converter = ConversionEngine(config)
    reporter = Reporter(config)

    try:
        inference.sampler.validate(args.file)
    except InputFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("--- Data Analysis Started ---")
    print(f"Input file: {args.file}")

    override = decode_delimiter(args.delimiter)
    if not override:
        print("Attempting to detect delimiter...")

    try:
        delimiter = inference.resolve_delimiter(args.file, override)
        output_path = args.output or converter.default_output_path(
            args.file, args.format
        )

        with converter.normalized(
            args.file, delimiter.delimiter, args.skip_lines
        ) as canonical:
            profile = inference.profile_canonical(canonical)
            report = AnalysisReport.from_profile(
                args.file, output_path, args.format, args.skip_lines, delimiter, profile
            )
            # The summary is printed before conversion, so it stays visible
            # when conversion fails.
            reporter.print_summary(report)
            converter.render(canonical, args.format, output_path)

    except DataExplorerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    reporter.print_preview(output_path)
    reporter.print_completion(output_path)
    return 0


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return usage()

    if args.help:
        return usage()

    if not args.file:
        print("Error: No file specified.", file=sys.stderr)
        return usage()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
