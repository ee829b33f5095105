"""
The parser ties a ParserConfig to streams of ltsv data: LtsvParser.parse
accepts text, bytes or a stream and gives a RecordIterator which lazily
tokenizes the data one line at a time.
"""

import codecs
import io

from _ltsvio.config import ParserBuilder
from _ltsvio.record_iterator import RecordIterator
from _ltsvio.tokenizer import LineTokenizer


def is_binary_stream(stream):
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class DecodedStream:
    """
    Text stream decoding a byte stream one byte at a time. At the end of
    the byte stream the decoder is flushed, so a truncated character
    raises UnicodeDecodeError instead of being dropped.

    The byte stream is not closed by DecodedStream.
    """

    def __init__(self, stream, encoding="utf-8"):
        self.stream = stream
        self.decoder = codecs.getincrementaldecoder(encoding)()
        self.pending = ""
        self.finished = False

    @property
    def closed(self):
        return self.stream.closed

    def read(self, size=-1):
        while (size < 0 or len(self.pending) < size) and not self.finished:
            data = self.stream.read(1)
            if data:
                self.pending += self.decoder.decode(data)
            else:
                # Raises on leftover bytes, and again on later reads
                self.pending += self.decoder.decode(b"", final=True)
                self.finished = True
        if size < 0:
            size = len(self.pending)
        result, self.pending = self.pending[:size], self.pending[size:]
        return result


def as_text_stream(source, encoding="utf-8"):
    """
    :param source: Either a string, a byte string, a text stream or
        a byte stream of ltsv data.
    :param encoding: The encoding used to decode bytes.
    :returns: A text stream with the contents of source. Byte streams
        are decoded incrementally.
    """
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.StringIO(bytes(source).decode(encoding))
    if is_binary_stream(source):
        return DecodedStream(source, encoding)
    return source


class LtsvParser:
    """
    Parser for ltsv data, ie.

    >>> parser = LtsvParser.builder().build()
    >>> list(parser.parse("abc:1\\tdef:2"))
    [{'abc': '1', 'def': '2'}]

    A parser may be reused for several inputs, but each iterator returned
    by parse should only be consumed from one thread.
    """

    def __init__(self, config):
        """
        :param config: The ParserConfig to parse with.
        """
        self.config = config

    @staticmethod
    def builder():
        return ParserBuilder()

    def parse(self, source, encoding="utf-8"):
        """
        :param source: String, byte string, text stream or byte stream
            containing ltsv data.
        :param encoding: Encoding of source if given as bytes.
        :returns: Iterator of records, one for each line.
        """
        return RecordIterator(
            as_text_stream(source, encoding), LineTokenizer(self.config)
        )

    def __repr__(self):
        return f"LtsvParser({self.config!r})"
