import warnings
from dataclasses import dataclass, fields, replace
from itertools import combinations

TOKEN_FIELDS = (
    "entry_delimiter",
    "kv_delimiter",
    "escape_char",
    "quote_char",
    "line_ending",
)


@dataclass(frozen=True)
class ParserConfig:
    """
    The tokens and flags used when parsing ltsv data. The defaults parse
    regular ltsv, ie.

        abc:1    def:2       jhi:3\\"
        klm:4    nop:"5 6"   qrs:7

    Each token has to be a single character, ValueError is raised
    otherwise. The five tokens are expected to be distinct, which is not
    enforced.
    """

    entry_delimiter: str = "\t"
    kv_delimiter: str = ":"
    escape_char: str = "\\"
    quote_char: str = '"'
    line_ending: str = "\n"
    strict: bool = True
    skip_null_values: bool = False
    trim_keys: bool = False
    trim_values: bool = False

    def __post_init__(self):
        for name in TOKEN_FIELDS:
            single_character(name, getattr(self, name))

    def overlapping_tokens(self):
        """
        :returns: List of pairs of token names that are set to the
            same character.
        """
        return [
            (a, b)
            for a, b in combinations(TOKEN_FIELDS, 2)
            if getattr(self, a) == getattr(self, b)
        ]


def single_character(name, value):
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} has to be a single character, got {value!r}")
    return value


class ParserBuilder:
    """
    Fluent builder for ltsv parsers, ie.

    >>> parser = ParserBuilder().lenient().with_quote_char("`").build()
    >>> parser.config.strict
    False

    Each method returns the builder itself so calls can be chained.
    """

    def __init__(self):
        self._config = ParserConfig()

    def _set(self, **changes):
        self._config = replace(self._config, **changes)
        return self

    def strict(self):
        """
        Do not tolerate recoverable errors, this is the default.
        """
        return self._set(strict=True)

    def lenient(self):
        """
        Recover from errors such as a key without a value.
        """
        return self._set(strict=False)

    def with_entry_delimiter(self, delim):
        return self._set(entry_delimiter=delim)

    def with_kv_delimiter(self, delim):
        return self._set(kv_delimiter=delim)

    def with_escape_char(self, escape):
        return self._set(escape_char=escape)

    def with_quote_char(self, quote):
        return self._set(quote_char=quote)

    def with_line_ending(self, eol):
        return self._set(line_ending=eol)

    def skip_null_values(self):
        """
        Keys without a value are left out of the record instead of
        being mapped to None.
        """
        return self._set(skip_null_values=True)

    def trim_keys(self):
        """
        Strip leading and trailing whitespace from keys.
        """
        return self._set(trim_keys=True)

    def trim_values(self):
        """
        Strip leading and trailing whitespace from values.
        """
        return self._set(trim_values=True)

    def config(self):
        return self._config

    def build(self):
        """
        :returns: A new LtsvParser with the configuration of the builder.
        """
        # Imported here as the parser module uses the builder
        from _ltsvio.parser import LtsvParser

        overlapping = self._config.overlapping_tokens()
        if overlapping:
            warnings.warn(
                "Parser tokens are not distinct, parsing is undefined for "
                + ", ".join(f"{a} == {b}" for a, b in overlapping)
            )
        return LtsvParser(self._config)

    def __repr__(self):
        settings = ", ".join(
            f"{f.name}={getattr(self._config, f.name)!r}"
            for f in fields(self._config)
        )
        return f"ParserBuilder({settings})"
