"""
Data Explorer

Infers the shape of a delimited text file (delimiter, header, column types)
and re-emits it as CSV, JSON or a Markdown table.

Basic usage:
    from data_explorer.inference.inference_engine import DataInferenceEngine
    from data_explorer.converter.conversion_engine import ConversionEngine

    engine = DataInferenceEngine()
    delimiter = engine.resolve_delimiter("data.txt")

    converter = ConversionEngine()
    with converter.normalized("data.txt", delimiter.delimiter, 0) as canonical:
        profile = engine.profile_canonical(canonical)
        converter.render(canonical, "json", "data.json")
"""

__version__ = "0.1.0"
