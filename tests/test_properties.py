import pytest
from hypothesis import given

import ltsvio

from .generators.ltsv_contents import ltsv_lines, quoted_ltsv_lines, token_soup

strict_parser = ltsvio.builder().strict().build()
lenient_parser = ltsvio.builder().lenient().build()


@pytest.mark.parametrize("parser", [strict_parser, lenient_parser])
@given(line_and_record=ltsv_lines())
def test_well_formed_lines(parser, line_and_record):
    line, record = line_and_record
    assert list(parser.parse(line)) == [record]
    assert list(parser.parse(line + "\n")) == [record]


@given(ltsv_lines(), ltsv_lines())
def test_one_record_per_line(first, second):
    contents = first[0] + "\n" + second[0] + "\n"
    assert list(strict_parser.parse(contents)) == [first[1], second[1]]


@given(quoted_ltsv_lines())
def test_quoting_keeps_delimiters(line_and_record):
    line, record = line_and_record
    assert list(strict_parser.parse(line)) == [record]


@given(token_soup)
def test_identical_configuration_gives_identical_records(contents):
    first = ltsvio.builder().lenient().trim_values().build()
    second = ltsvio.builder().lenient().trim_values().build()
    assert list(first.parse(contents)) == list(second.parse(contents))


@given(token_soup)
def test_lenient_accepts_what_strict_accepts(contents):
    lenient_records = list(lenient_parser.parse(contents))
    try:
        strict_records = list(strict_parser.parse(contents))
    except ltsvio.ParseLtsvError:
        return
    assert strict_records == lenient_records


@given(token_soup)
def test_parser_is_reusable(contents):
    assert list(lenient_parser.parse(contents)) == list(
        lenient_parser.parse(contents)
    )
