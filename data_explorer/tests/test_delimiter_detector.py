import pytest

from data_explorer.config import ProcessorConfig
from data_explorer.inference.delimiter_detector import DelimiterDetector
from data_explorer.inference.policies import DelimiterScoringPolicy
from data_explorer.inference.data_core import DelimiterResult, DelimiterSource


@pytest.fixture
def detector():
    return DelimiterDetector()


@pytest.mark.parametrize(
    "lines,expected",
    [
        (["name,age,city", "Alice,30,New York"], ","),
        (["name\tage\tcity", "Alice\t30\tNew York"], "\t"),
        (["name age city", "Alice 30 Sydney"], " "),
        # comma ties with space: comma loses, tab has nothing, space wins
        (["a,b c,d e"], " "),
        # tab only needs to beat comma
        (["a b\tc d e"], "\t"),
    ],
)
def test_detects_delimiter(detector, lines, expected):
    result = detector.detect(lines)

    assert isinstance(result, DelimiterResult)
    assert result.delimiter == expected
    assert result.source == DelimiterSource.DETECTED


def test_override_short_circuits_detection(detector):
    result = detector.detect(["a,b,c", "1,2,3"], override=";")

    assert result.delimiter == ";"
    assert result.source == DelimiterSource.USER
    assert result.counts == {}
    assert result.describe() == "User-specified: ';'"


def test_no_candidate_returns_sentinel(detector):
    result = detector.detect(["abc", "def"])

    assert result.delimiter is None
    assert result.counts == {",": 0, "\t": 0, " ": 0}


def test_fallback_to_space_with_warning(detector):
    result = detector.detect_with_fallback(["abc", "def"])

    assert result.delimiter == " "
    assert result.source == DelimiterSource.FALLBACK
    assert "Assuming space" in result.warning


def test_detected_result_has_no_warning(detector):
    result = detector.detect_with_fallback(["a,b", "1,2"])

    assert result.delimiter == ","
    assert result.warning is None


def test_only_the_sample_is_counted():
    lines = ["a b"] * 100 + ["a,b,c,d,e,f"] * 500
    detector = DelimiterDetector(ProcessorConfig(sample_size=100))

    assert detector.detect(lines).delimiter == " "


def test_policy_with_custom_candidates():
    policy = DelimiterScoringPolicy((";", "|", ":"))

    assert policy.choose({";": 4, "|": 1, ":": 2}) == ";"
    assert policy.choose({";": 1, "|": 2, ":": 0}) == "|"
    assert policy.choose({";": 0, "|": 0, ":": 3}) == ":"
    assert policy.choose({";": 0, "|": 0, ":": 0}) is None


def test_policy_counts_every_occurrence():
    policy = DelimiterScoringPolicy()
    counts = policy.count(["a,b,,c", "d\te f"])

    assert counts == {",": 3, "\t": 1, " ": 1}


def test_policy_requires_candidates():
    with pytest.raises(ValueError):
        DelimiterScoringPolicy(())
