import pytest

from _ltsvio.config import ParserConfig
from _ltsvio.tokenizer import LineTokenizer, Mode
from _ltsvio.tokenizer.errors import EmptyKeyError, KeyWithoutValueError


@pytest.fixture
def tokenizer():
    return LineTokenizer(ParserConfig())


def test_stops_at_line_ending(tokenizer):
    chars = iter("abc:1\ndef:2")
    assert tokenizer.tokenize_line(chars) == {"abc": "1"}
    assert "".join(chars) == "def:2"


def test_line_ending_in_quotes_does_not_end_line(tokenizer):
    chars = iter('abc:"1\n2"\ndef:2')
    assert tokenizer.tokenize_line(chars) == {"abc": "1\n2"}
    assert "".join(chars) == "def:2"


def test_escaped_line_ending(tokenizer):
    chars = iter("abc:1\\\n2\ndef:2")
    assert tokenizer.tokenize_line(chars) == {"abc": "1\n2"}
    assert "".join(chars) == "def:2"


def test_blank_line(tokenizer):
    chars = iter("\n\n")
    assert tokenizer.tokenize_line(chars) == {}
    assert "".join(chars) == "\n"


def test_exhausted_chars_end_line(tokenizer):
    assert tokenizer.tokenize_line(iter("")) == {}
    assert tokenizer.tokenize_line(iter("abc:1")) == {"abc": "1"}


def test_records_are_not_shared(tokenizer):
    first = tokenizer.tokenize_line(iter("abc:1"))
    second = tokenizer.tokenize_line(iter("def:2"))
    assert first == {"abc": "1"}
    assert second == {"def": "2"}


def test_state_is_reset_after_error(tokenizer):
    with pytest.raises(KeyWithoutValueError):
        tokenizer.tokenize_line(iter('abc:"1"\tdef\t'))
    assert tokenizer.mode == Mode.KEY
    assert tokenizer.key == []
    assert tokenizer.value == []
    assert tokenizer.record == {}
    assert tokenizer.tokenize_line(iter("ghi:3")) == {"ghi": "3"}


def test_error_position_counts_from_start_of_line(tokenizer):
    tokenizer.tokenize_line(iter("abc:1"), line=1)
    with pytest.raises(EmptyKeyError) as excinfo:
        tokenizer.tokenize_line(iter("a:1\t:"), line=2)
    assert (excinfo.value.line, excinfo.value.position) == (2, 5)


@pytest.mark.parametrize(
    "contents, mode",
    [
        ("abc", Mode.KEY),
        ("abc:", Mode.VALUE),
        ('abc:"', Mode.QUOTED),
        ("abc:\\", Mode.ESCAPED),
        ('abc:"\\', Mode.ESCAPED),
        ("abc:1\t", Mode.ENTRY_DELIMITER),
        ("abc:1\n", Mode.EOL),
    ],
)
def test_modes(tokenizer, contents, mode):
    for char in contents:
        tokenizer.handlers[tokenizer.mode](char)
    assert tokenizer.mode == mode


def test_escape_inside_quotes_resumes_quote(tokenizer):
    for char in 'abc:"\\"':
        tokenizer.handlers[tokenizer.mode](char)
    assert tokenizer.mode == Mode.QUOTED
    assert tokenizer.value == ['"']


def test_put_entry_clears_buffers(tokenizer):
    tokenizer.key.extend("abc")
    tokenizer.value.extend("1")
    tokenizer.put_entry()
    assert tokenizer.record == {"abc": "1"}
    assert tokenizer.key == []
    assert tokenizer.value == []


def test_put_entry_without_key_and_value_is_noop(tokenizer):
    tokenizer.put_entry()
    assert tokenizer.record == {}
