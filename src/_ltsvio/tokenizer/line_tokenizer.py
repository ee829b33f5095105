from functools import cached_property

from _ltsvio.tokenizer.errors import (
    EmptyKeyError,
    KeyWithoutValueError,
    UnexpectedQuoteInValueError,
    UnexpectedTokenError,
)
from _ltsvio.tokenizer.mode import Mode


class LineTokenizer:
    """
    Turns the characters of one ltsv line into a record, that is, a
    dictionary of keys to values. In the examples below the defaults are
    used: entry delimiter is tab (written _), kv delimiter is :, escape
    character is \\, quote character is " and line ending is newline.

    The tokenizer is in one Mode at a time. Characters are accumulated
    into either the key or the value buffer (self.active tells which).
    ESCAPED and QUOTED suspend the active mode, which is resumed once
    the escaped character or closing quote has been read.

    The same tokenizer is used for every line of a stream, all state
    is reset before and after each line.
    """

    def __init__(self, config):
        """
        :param config: A ParserConfig.
        """
        self.config = config
        self.line = 0
        self.reset()

    def reset(self):
        self.mode = Mode.KEY
        self.active = Mode.KEY
        self.resume = None
        self.after_quote = False
        self.key = []
        self.value = []
        self.record = {}
        self.position = 0

    @cached_property
    def handlers(self):
        return {
            Mode.KEY: self.tokenize_key,
            Mode.VALUE: self.tokenize_value,
            Mode.QUOTED: self.tokenize_quoted,
            Mode.ESCAPED: self.tokenize_escaped,
            Mode.ENTRY_DELIMITER: self.tokenize_entry_delimiter,
        }

    @property
    def buffer(self):
        if self.active == Mode.KEY:
            return self.key
        return self.value

    def tokenize_line(self, chars, line=1):
        """
        Consume characters until the line ending (which is consumed but
        not stored) or until chars is exhausted.

        :param chars: Iterator of single characters, is left positioned
            right after the line ending.
        :param line: The 1-based line number, used in error messages.
        :returns: The record for the line, empty for a blank line.
        """
        self.reset()
        self.line = line
        try:
            for char in chars:
                self.position += 1
                self.handlers[self.mode](char)
                if self.mode == Mode.EOL:
                    break
            self.put_entry()
            return self.record
        finally:
            self.reset()

    def error(self, error_type, message, char=None):
        return error_type(message, self.line, self.position, char)

    def escape(self):
        if self.mode == Mode.QUOTED:
            self.resume = Mode.QUOTED
        else:
            self.resume = self.active
        self.mode = Mode.ESCAPED

    def quote(self):
        self.mode = Mode.QUOTED

    def tokenize_key(self, char):
        config = self.config
        # kkk:vvvn
        #        ^
        if char == config.line_ending:
            self.mode = Mode.EOL
        # kkk_kkk:vvv
        #    ^
        elif char == config.entry_delimiter:
            if config.strict:
                raise self.error(KeyWithoutValueError, "Key without a value", char)
            self.key.append(char)
        # k"kk:vvv
        #  ^
        elif char == config.quote_char:
            if config.strict:
                raise self.error(
                    UnexpectedTokenError, f"Unexpected quote token [{char}]", char
                )
            self.key.append(char)
        # k\kk:vvv
        #  ^
        elif char == config.escape_char:
            if config.strict:
                raise self.error(
                    UnexpectedTokenError, f"Unexpected escape token [{char}]", char
                )
            self.escape()
        # kkk:vvv
        #    ^
        elif char == config.kv_delimiter:
            if not self.key and config.strict:
                raise self.error(EmptyKeyError, "Empty key detected", char)
            self.mode = self.active = Mode.VALUE
        else:
            self.key.append(char)

    def tokenize_value(self, char):
        config = self.config
        if char == config.line_ending:
            self.mode = Mode.EOL
        # kkk:"vvv"v
        #          ^
        elif (
            self.after_quote
            and config.strict
            and char != config.entry_delimiter
        ):
            raise self.error(
                UnexpectedQuoteInValueError,
                f"Unexpected character [{char}] after closing quote",
                char,
            )
        # kkk:"vvv"
        #     ^
        elif char == config.quote_char and not self.value:
            self.quote()
        # kkk:v\vv
        #      ^
        elif char == config.escape_char:
            self.escape()
        # kkk:vvv_kkk:vvv
        #        ^
        elif char == config.entry_delimiter:
            self.put_entry()
            self.mode = Mode.ENTRY_DELIMITER
            self.active = Mode.KEY
        else:
            self.value.append(char)

    def tokenize_entry_delimiter(self, char):
        """
        Handle the first character following an entry delimiter, the
        previous pair has already been committed.
        """
        config = self.config
        # kkk:vvv__kkk:vvv
        #         ^
        if char == config.entry_delimiter:
            pass
        # kkk:vvv_n
        #         ^
        elif char == config.line_ending:
            self.mode = Mode.EOL
        # kkk:vvv_"kkk":vvv
        #         ^
        elif char == config.quote_char:
            if config.strict:
                raise self.error(
                    UnexpectedTokenError, f"Unexpected quote token [{char}]", char
                )
            self.quote()
        # kkk:vvv_\kkk:vvv
        #         ^
        elif char == config.escape_char:
            if config.strict:
                raise self.error(
                    UnexpectedTokenError, f"Unexpected escape token [{char}]", char
                )
            self.escape()
        # kkk:vvv_:vvv
        #         ^
        elif char == config.kv_delimiter:
            if config.strict:
                raise self.error(EmptyKeyError, "Empty key detected", char)
            self.mode = self.active = Mode.VALUE
        else:
            self.key.append(char)
            self.mode = Mode.KEY

    def tokenize_escaped(self, char):
        self.buffer.append(char)
        self.mode = self.resume
        self.resume = None

    def tokenize_quoted(self, char):
        config = self.config
        if char == config.escape_char:
            self.escape()
        elif char == config.quote_char:
            self.mode = self.active
            self.after_quote = self.active == Mode.VALUE
        else:
            self.buffer.append(char)

    def put_entry(self):
        """
        Commit the key and value buffers into the record and clear them.
        """
        config = self.config
        key = "".join(self.key)
        value = "".join(self.value)
        if key:
            if config.trim_keys:
                key = key.strip()
            if value:
                self.record[key] = value.strip() if config.trim_values else value
            elif not config.skip_null_values:
                self.record[key] = None
        elif value:
            if config.strict:
                raise self.error(EmptyKeyError, "Empty key detected")
            self.record[None] = value.strip() if config.trim_values else value
        self.key.clear()
        self.value.clear()
        self.after_quote = False
