"""
  edn Reader

- Pull-based: every `read()` call returns the next top-level form,
  or `EOF` once the input is exhausted (and on every call after that).
- Malformed input raises `EdnParseError` with a half-open `[lo, hi)` span of
  code point offsets into the text. The reader stays usable afterwards:
  reading resumes at the end of the reported span.
- Emits edn Values:

    - nil / true / false -> Nil / Boolean
    - 42, -7, +3         -> Integer (64-bit, overflow is an error)
    - 1.5, .5, 2.        -> Float (no exponent notation)
    - "text"             -> String
    - \\a, \\newline       -> Char
    - foo, +, ns/name    -> Symbol
    - :foo               -> Keyword
    - (...) [...] {...}  -> List / Vector / Map
    - #{...}             -> Set
    - #tag form          -> Tagged
"""

from __future__ import annotations

import logging
import math
import re
from contextlib import contextmanager
from typing import Iterator, Optional

from edn import config
from edn.errors import EdnParseError
from edn.types.value import Value
from edn.types.nil import Nil
from edn.types.scalars import Boolean, String, Char, Integer, Float, INT64_MIN, INT64_MAX
from edn.types.symbol import Symbol, Keyword
from edn.types.containers import List, Vector, Map
from edn.reader.reader_macros import dispatch_macros, read_tagged, CLOSERS

logger = logging.getLogger(__name__)


WHITESPACE_RE = re.compile(r"[\s,]+")  # commas are whitespace
DIGITS_RE = re.compile(r"[0-9]*")
SYMBOL_RE = re.compile(r"[\w.*+!\-?$%&=<>/:#]*")
TOKEN_REST_RE = re.compile(r'[^\s,()\[\]{}"]*')
STRING_RUN_RE = re.compile(r'[^"\\]*')

DIGITS = frozenset("0123456789")
SYMBOL_HEAD_CHARS = frozenset(".*+!-_?$%&=<>/:")
DELIMITERS = frozenset(',()[]{}"')

NAMED_CHARS: dict[str, str] = {
    "newline": "\n",
    "return": "\r",
    "space": " ",
    "tab": "\t",
}

STRING_ESCAPES: dict[str, str] = {
    "t": "\t",
    "r": "\r",
    "n": "\n",
    "\\": "\\",
    '"': '"',
}

LITERALS: dict[str, Value] = {
    "nil": Nil,
    "true": Boolean(True),
    "false": Boolean(False),
}

COLLECTIONS: dict[str, tuple[str, type]] = {
    "(": (")", List),
    "[": ("]", Vector),
    "{": ("}", Map),
}


def is_symbol_head(ch: str) -> bool:
    return ch.isalpha() or ch in SYMBOL_HEAD_CHARS


def is_delimiter(ch: str) -> bool:
    return ch.isspace() or ch in DELIMITERS


class EOFType:
    """Returned by `Reader.read()` once the input is exhausted."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "EOF"
    def __bool__(self): return False


EOF = EOFType()


dispatch_macros.define_fallback(is_symbol_head, read_tagged)


class Reader:
    def __init__(self, text: str, max_depth: Optional[int] = None):
        if not isinstance(text, str):
            raise TypeError(f"Reader expects str, got {type(text).__name__}")
        self.text = text
        self.pos = 0
        self.max_depth = max_depth if max_depth is not None else config.get_max_depth()
        self.depth = 0

    # ------------------------
    # Public API
    # ------------------------
    @property
    def position(self) -> int:
        return self.pos

    def read(self) -> Value | EOFType:
        """Read the next top-level form."""
        self.skip_whitespace()
        start = self.pos
        self.depth = 0
        try:
            return self.read_form()
        except EdnParseError as err:
            logger.debug("parse error: %s", err)
            self.pos = max(err.hi, start + 1)
            raise

    def results(self) -> Iterator[Value | EdnParseError]:
        """Yield every remaining form, errors included, until EOF."""
        while True:
            try:
                form = self.read()
            except EdnParseError as err:
                yield err
                continue
            if form is EOF:
                return
            yield form

    def __iter__(self) -> Iterator[Value]:
        while True:
            form = self.read()
            if form is EOF:
                return
            yield form

    # ------------------------
    # Cursor helpers
    # ------------------------
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character at `pos + offset`, or "" past the end."""
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def advance(self, count: int = 1) -> None:
        self.pos += count

    def skip_whitespace(self) -> None:
        m = WHITESPACE_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def scan(self, pattern: re.Pattern) -> str:
        m = pattern.match(self.text, self.pos)
        self.pos = m.end()
        return m.group()

    def scan_symbol(self) -> str:
        return self.scan(SYMBOL_RE)

    def error(self, lo: int, hi: int, message: str) -> EdnParseError:
        return EdnParseError(lo, hi, message)

    @contextmanager
    def nested(self, start: int, opener: str):
        """Track nesting so deep input fails cleanly instead of exhausting the stack."""
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise self.error(start, start + len(opener),
                                 f"nesting depth limit ({self.max_depth}) exceeded")
            yield
        finally:
            self.depth -= 1

    # ------------------------
    # Forms
    # ------------------------
    def read_form(self) -> Value | EOFType:
        self.skip_whitespace()
        if self.at_end():
            return EOF

        start = self.pos
        ch = self.text[start]

        if ch in DIGITS:
            return self.read_number(start)

        if ch in "+-":
            nxt = self.peek(1)
            if nxt in DIGITS or (nxt == "." and self.peek(2) in DIGITS):
                return self.read_number(start)
            return self.read_symbol(start)

        if ch == ".":
            if self.peek(1) in DIGITS:
                return self.read_number(start)
            return self.read_symbol(start)

        if ch == "\\":
            return self.read_char(start)

        if ch == '"':
            return self.read_string(start)

        if ch == ":":
            return self.read_keyword(start)

        if ch in COLLECTIONS:
            closer, kind = COLLECTIONS[ch]
            self.advance()
            items = self.read_delimited(ch, closer, start)
            if kind is Map:
                if len(items) % 2:
                    raise self.error(start, self.pos, "odd number of items in a Map")
                return Map(zip(items[::2], items[1::2]))
            return kind(items)

        if ch == "#" and dispatch_macros.is_macro(self.peek(1)):
            return dispatch_macros.dispatch(self.peek(1), self, start)

        if is_symbol_head(ch):
            return self.read_symbol(start)

        self.advance()
        if ch in CLOSERS:
            raise self.error(start, self.pos, f"unexpected `{ch}`")
        raise self.error(start, self.pos, f"unrecognized token `{ch}`")

    def read_delimited(self, opener: str, closer: str, start: int) -> list[Value]:
        """Read forms up to `closer`; the cursor is already past `opener`."""
        items: list[Value] = []
        with self.nested(start, opener):
            while True:
                self.skip_whitespace()
                if self.at_end():
                    raise self.error(start, self.pos, f"unclosed `{opener}`")
                if self.peek() == closer:
                    self.advance()
                    return items
                items.append(self.read_form())

    def read_number(self, start: int) -> Value:
        if self.peek() in "+-":
            self.advance()
        self.scan(DIGITS_RE)
        is_float = self.peek() == "."
        if is_float:
            self.advance()
            self.scan(DIGITS_RE)

        if not self.at_end() and not is_delimiter(self.peek()):
            self.scan(TOKEN_REST_RE)
            token = self.text[start:self.pos]
            raise self.error(start, self.pos, f"invalid number literal `{token}`")

        token = self.text[start:self.pos]
        if is_float:
            value = float(token)
            if math.isinf(value):
                raise self.error(start, self.pos, f"float literal out of range `{token}`")
            return Float(value)
        # int64 has at most 19 digits; longer literals never reach int(), which caps digit counts
        if len(token.lstrip("+-").lstrip("0")) > 19:
            raise self.error(start, self.pos, f"integer literal out of range `{token}`")
        value = int(token)
        if not INT64_MIN <= value <= INT64_MAX:
            raise self.error(start, self.pos, f"integer literal out of range `{token}`")
        return Integer(value)

    def read_symbol(self, start: int) -> Value:
        token = self.scan_symbol()
        if token in LITERALS:
            return LITERALS[token]
        return Symbol(token)

    def read_keyword(self, start: int) -> Value:
        self.advance()
        name = self.scan_symbol()
        if not name:
            raise self.error(start, self.pos, "invalid keyword `:`")
        return Keyword(name)

    def read_char(self, start: int) -> Value:
        self.advance()
        if self.at_end():
            raise self.error(start, self.pos, "invalid char literal `\\`")
        # the first character is always part of the literal, so `\(` and `\ ` work
        self.advance()
        self.scan(TOKEN_REST_RE)
        name = self.text[start + 1:self.pos]
        if len(name) == 1:
            return Char(name)
        if name in NAMED_CHARS:
            return Char(NAMED_CHARS[name])
        raise self.error(start, self.pos, f"invalid char literal `{self.text[start:self.pos]}`")

    def read_string(self, start: int) -> Value:
        self.advance()
        chunks: list[str] = []
        while True:
            chunks.append(self.scan(STRING_RUN_RE))
            ch = self.peek()
            if ch == '"':
                self.advance()
                return String("".join(chunks))
            if ch == "\\" and self.peek(1):
                esc = self.peek(1)
                self.advance(2)
                if esc not in STRING_ESCAPES:
                    raise self.error(self.pos - 2, self.pos, f"invalid string escape `\\{esc}`")
                chunks.append(STRING_ESCAPES[esc])
                continue
            # EOF, possibly right after a backslash
            self.pos = len(self.text)
            raise self.error(start, self.pos, 'expected closing `"`, found EOF')


def read_string(text: str, max_depth: Optional[int] = None) -> Value | EOFType:
    """Read the first form of `text` (EOF if there is none)."""
    return Reader(text, max_depth).read()


def read_all(text: str, max_depth: Optional[int] = None) -> list[Value]:
    """Read every form of `text`, raising on the first malformed one."""
    return list(Reader(text, max_depth))
