import pathlib
from contextlib import contextmanager

from _ltsvio.config import ParserBuilder


def read(filelike, parser=None, encoding="utf-8"):
    """
    Reads a ltsv file and returns a list of records,
    ie. records = read("/my/file.ltsv")

    Each record is a dictionary from key to value, with one record for
    each line in the file. Blank lines give empty records.

    :param filelike: Path to a file or stream of ltsv data.
    :param parser: The LtsvParser to use, defaults to a strict parser
        with the default delimiters.
    :param encoding: Encoding of the file.
    """
    with lazy_read(filelike, parser, encoding) as records:
        return list(records)


@contextmanager
def lazy_read(filelike, parser=None, encoding="utf-8"):
    """
    Context manager for lazily reading the records of a ltsv file:

        with lazy_read("/my/file.ltsv") as records:
            for record in records:
                ...

    If given a path, the file is opened and closed on exit.
    """
    if parser is None:
        parser = ParserBuilder().build()

    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        yield parser.parse(file_stream, encoding)
    finally:
        if did_open:
            file_stream.close()
