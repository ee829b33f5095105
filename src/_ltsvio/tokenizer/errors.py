class ParseLtsvError(Exception):
    """
    Base class for every error raised while parsing ltsv data. Carries the
    1-based line and column where parsing stopped, and the offending
    character when there is one.
    """

    def __init__(self, message, line=None, position=None, char=None):
        self.line = line
        self.position = position
        self.char = char
        if line is not None:
            message = f"{message} at line [{line}] position [{position}]"
        super().__init__(message)


class KeyWithoutValueError(ParseLtsvError):
    """
    Raised in strict mode when an entry delimiter is found while still
    reading a key.
    """

    pass


class EmptyKeyError(ParseLtsvError):
    """
    Raised in strict mode when a value is given without a key.
    """

    pass


class UnexpectedTokenError(ParseLtsvError):
    """
    Raised in strict mode when a quote or escape character is found in
    key position.
    """

    pass


class UnexpectedQuoteInValueError(ParseLtsvError):
    """
    Raised in strict mode when a closing quote is followed by anything
    other than an entry delimiter or line ending.
    """

    pass


class StreamReadError(ParseLtsvError):
    """
    Thrown when the underlying stream fails to tell whether there is more
    data or to read it.
    """

    pass
