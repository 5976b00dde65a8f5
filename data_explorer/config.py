from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessorConfig:
    """Run-wide settings handed to every component at construction.

    sample_size: lines read from the top of a file for all heuristics.
    preview_lines: lines shown from the head and the tail of the output.
    type_match_threshold: absolute number of sampled values that must match
        a numeric pattern before a column is classified as that type.
    candidate_delimiters: ordered as primary, challengers..., fallback.
    fallback_delimiter: used when no candidate is found in the sample.
    output_dir: where default output paths are placed.
    """

    sample_size: int = 100
    preview_lines: int = 10
    type_match_threshold: int = 90
    candidate_delimiters: tuple = (",", "\t", " ")
    fallback_delimiter: str = " "
    output_dir: str = "./structured_data"
    output_suffix: str = "_structured"
    encoding: str = "utf-8"


DEFAULT_CONFIG = ProcessorConfig()
