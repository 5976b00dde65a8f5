from .base_detector import BaseDetector
from .line_patterns import contains_alpha


class HeaderDetector(BaseDetector):
    """Guess whether the first record is a row of labels.

    True when line 1 has a letter and line 2 has none. The verdict is only
    reported; it never changes how records are parsed or rendered.
    """

    def detect(self, lines) -> bool:
        sample = self.limit_sample(lines, max_lines=2)
        if not sample:
            return False

        first_line = sample[0]
        # A single line is compared with itself.
        second_line = sample[1] if len(sample) > 1 else first_line

        return contains_alpha(first_line) and not contains_alpha(second_line)
