"""
Delimited Data Inference

Sample-based detection of the shape of a delimited text file.

This package provides:
- Bounded sampling of the first lines of a file (plain or compressed)
- Delimiter detection over a configurable candidate set
- A coarse header-row heuristic
- Per-column type classification (Integer, Float, String/Mixed, Unknown)

Basic usage:
    from data_explorer.inference.inference_engine import DataInferenceEngine

    engine = DataInferenceEngine()
    result = engine.resolve_delimiter("path/to/data.txt")

    print(f"Delimiter: {result.delimiter!r} ({result.source.value})")

Detection is probabilistic: every heuristic only looks at the sample, never
at the whole file.
"""
