from itertools import chain

from _ltsvio.tokenizer.errors import StreamReadError


class StreamChars:
    """
    Iterator over the characters of a stream. A failing read does not
    exhaust the iterator, the next call reads from the stream again.
    """

    def __init__(self, stream):
        self.stream = stream
        self.line = 0

    def __iter__(self):
        return self

    def __next__(self):
        try:
            read_char = self.stream.read(1)
        except OSError as err:
            raise StreamReadError(
                f"Error reading data source after line {self.line}"
            ) from err
        if not read_char:
            raise StopIteration
        return read_char


class RecordIterator:
    """
    A lazy iterator of records, reading one line of the given
    stream for each record:

    >>> import io
    >>> from _ltsvio.config import ParserConfig
    >>> from _ltsvio.tokenizer import LineTokenizer
    >>> records = RecordIterator(io.StringIO("a:1\\n\\nb:2"), LineTokenizer(ParserConfig()))
    >>> list(records)
    [{'a': '1'}, {}, {'b': '2'}]

    The iterator shares its position with the stream and can not be
    restarted. A trailing line ending does not give an extra empty record.
    After a StreamReadError, iteration may continue from wherever the
    stream is left.
    """

    def __init__(self, stream, tokenizer):
        """
        :param stream: A text stream, read one character at a time.
        :param tokenizer: The LineTokenizer used for each line.
        """
        self.stream = stream
        self.tokenizer = tokenizer
        self.line = 0
        self._lookahead = None
        self._chars = StreamChars(stream)

    def has_next(self):
        """
        :returns: Whether there is unread data left in the stream.
        """
        if self._lookahead is None:
            self._chars.line = self.line
            self._lookahead = next(self._chars, "")
        return self._lookahead != ""

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        first_char = self._lookahead
        self._lookahead = None
        self.line += 1
        return self.tokenizer.tokenize_line(
            chain(first_char, self._chars), self.line
        )
