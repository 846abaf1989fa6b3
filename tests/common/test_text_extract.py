import pytest

from ffscope.common.text.extract import ExtractionPattern, NoMatch, first_match, last_match

STAMP = ExtractionPattern.compile("stamp", r"t=(\d+)", arity=1)
PAIR = ExtractionPattern.compile("pair", r"(\d+)x(\d+)", arity=2)


def test_first_match_returns_groups_of_first_occurrence():
    assert first_match(STAMP, "t=1 t=2 t=3") == ("1",)


def test_last_match_returns_groups_of_last_occurrence():
    assert last_match(STAMP, "t=1\nt=2\nt=3\n") == ("3",)


def test_multiple_groups():
    assert first_match(PAIR, "size 640x480 then 320x240") == ("640", "480")
    assert last_match(PAIR, "size 640x480 then 320x240") == ("320", "240")


@pytest.mark.parametrize("fn", [first_match, last_match])
def test_no_match_raises_instead_of_returning_empty(fn):
    with pytest.raises(NoMatch) as ei:
        fn(STAMP, "nothing useful here")
    assert ei.value.pattern is STAMP
    assert "stamp" in str(ei.value)


def test_arity_larger_than_groups_is_no_match():
    wide = ExtractionPattern.compile("wide", r"t=(\d+)", arity=2)
    with pytest.raises(NoMatch):
        first_match(wide, "t=5")


def test_unmatched_optional_group_is_no_match():
    opt = ExtractionPattern.compile("opt", r"a(\d+)?", arity=1)
    with pytest.raises(NoMatch):
        first_match(opt, "a")


def test_no_match_is_lookup_error():
    assert issubclass(NoMatch, LookupError)
