"""
The tokenizer reads ltsv data one character at a time and turns each line
into a record: a dictionary from key to value. Keys and values are
separated by the kv delimiter, pairs by the entry delimiter and records by
the line ending.

A value (or in lenient mode a key following an entry delimiter) may be
quoted, in which case delimiters and line endings inside the quotes are
kept verbatim. The escape character makes the character following it
literal, both inside and outside of quotes.

In strict mode any ambiguous input raises a ParseLtsvError. In lenient
mode the tokenizer instead recovers, see LineTokenizer for the rules.
"""

from .line_tokenizer import LineTokenizer
from .mode import Mode

__all__ = ["LineTokenizer", "Mode"]
