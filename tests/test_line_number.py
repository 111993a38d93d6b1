import pytest

from codesort.line_number import LineNumber, LineNumberRange


def test_first_line_has_index_zero():
    assert LineNumber.parse("1").to_index() == 0
    assert LineNumber.from_index(0) == LineNumber(1)


@pytest.mark.parametrize("n", [1, 2, 17, 1000])
def test_index_round_trip(n):
    line = LineNumber(n)
    assert LineNumber.from_index(line.to_index()) == line
    assert LineNumber.parse(str(line)) == line


@pytest.mark.parametrize("text", ["0", "", "abc", "-3", "1.5"])
def test_parse_invalid_line_number(text):
    with pytest.raises(ValueError):
        LineNumber.parse(text)


def test_zero_line_number_is_rejected():
    with pytest.raises(ValueError):
        LineNumber(0)


def test_line_numbers_are_ordered():
    assert LineNumber(3) < LineNumber(4)
    assert sorted([LineNumber(9), LineNumber(2)]) == [LineNumber(2), LineNumber(9)]


def test_parse_range():
    parsed = LineNumberRange.parse("9:15")
    assert parsed == LineNumberRange(LineNumber(9), LineNumber(15))
    assert str(parsed) == "9:15"


def test_parse_range_accepts_any_separator():
    assert LineNumberRange.parse("3 - 7") == LineNumberRange.parse("3:7")


@pytest.mark.parametrize("text", ["5:5", "7:3", "a:b", "12", "1:2:3", "0:4"])
def test_parse_invalid_range(text):
    with pytest.raises(ValueError):
        LineNumberRange.parse(text)


def test_iterating_a_range_includes_both_ends():
    lines = list(LineNumberRange.parse("3:5"))
    assert lines == [LineNumber(n) for n in range(3, 6)]


def test_of_line_spans_one_line():
    line = LineNumber(8)
    single = LineNumberRange.of_line(line)
    assert list(single) == [line]
    assert single.contains(line)


def test_contains():
    span = LineNumberRange.parse("16:23")
    assert span.contains(LineNumber(16))
    assert span.contains(LineNumber(23))
    assert not span.contains(LineNumber(15))
    assert not span.contains(LineNumber(24))