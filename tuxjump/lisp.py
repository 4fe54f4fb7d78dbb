"""Reader and printer for the small Lisp dialect used by level and sprite data.

Lisp values map onto Python values:

* nil            -> ``None``
* symbol         -> :class:`Symbol`
* string         -> ``str``
* integer        -> ``int``
* real           -> ``float``
* boolean        -> ``bool``
* cons cell      -> :class:`Cons`
* pattern list   -> :class:`PatternCons` (first cell of a ``#?( ... )`` form)
"""

from __future__ import annotations

import gzip
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional, Protocol, TextIO, Tuple

__all__ = [
    "Symbol",
    "Cons",
    "PatternCons",
    "LispParseError",
    "CharStream",
    "read",
    "read_from_string",
    "read_from_file",
    "read_from_gzfile",
    "make_list",
    "iterate",
    "cxr",
    "list_length",
    "list_nth_cdr",
    "list_nth",
    "dumps",
    "dump",
]

MAX_TOKEN_LENGTH = 1024

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_DELIMS = "\"();"


class LispParseError(ValueError):
    """Raised when the input is not well-formed Lisp."""


class Symbol(str):
    """A Lisp symbol; distinct from a Lisp string of the same text."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


@dataclass
class Cons:
    """A cons cell."""

    car: Any
    cdr: Any = None


@dataclass
class PatternCons(Cons):
    """The head cell of a ``#?( ... )`` pattern form."""


class Stream(Protocol):
    def next_char(self) -> Optional[str]: ...

    def unget_char(self, c: str) -> None: ...


class CharStream:
    """A character stream over a string; a NUL character ends the input."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next_char(self) -> Optional[str]:
        """Return the next character, or ``None`` at the end of input."""
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        if c == "\0":
            return None
        self._pos += 1
        return c

    def unget_char(self, c: str) -> None:
        """Step back one character."""
        if self._pos > 0:
            self._pos -= 1


class _Tok(Enum):
    EOF = auto()
    OPEN = auto()
    CLOSE = auto()
    SYMBOL = auto()
    STRING = auto()
    INTEGER = auto()
    REAL = auto()
    PATTERN_OPEN = auto()
    DOT = auto()
    TRUE = auto()
    FALSE = auto()


class _Token:
    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, c: str) -> None:
        if len(self._chars) >= MAX_TOKEN_LENGTH:
            raise LispParseError(f"token longer than {MAX_TOKEN_LENGTH} characters")
        self._chars.append(c)

    def text(self) -> str:
        return "".join(self._chars)


def _ends_token(c: Optional[str]) -> bool:
    return c is None or c in _SPACE or c in _DELIMS


def _scan(stream: Stream) -> Tuple[_Tok, str]:
    token = _Token()

    c = stream.next_char()
    while True:
        if c is None:
            return _Tok.EOF, ""
        if c == ";":
            while True:
                c = stream.next_char()
                if c is None:
                    return _Tok.EOF, ""
                if c == "\n":
                    break
        if c not in _SPACE:
            break
        c = stream.next_char()

    if c == "(":
        return _Tok.OPEN, ""
    if c == ")":
        return _Tok.CLOSE, ""

    if c == '"':
        while True:
            c = stream.next_char()
            if c is None:
                raise LispParseError("unterminated string")
            if c == '"':
                break
            if c == "\\":
                c = stream.next_char()
                if c is None:
                    raise LispParseError("unterminated escape in string")
                if c == "n":
                    c = "\n"
                elif c == "t":
                    c = "\t"
            token.append(c)
        return _Tok.STRING, token.text()

    if c == "#":
        c = stream.next_char()
        if c == "t":
            return _Tok.TRUE, ""
        if c == "f":
            return _Tok.FALSE, ""
        if c == "?" and stream.next_char() == "(":
            return _Tok.PATTERN_OPEN, ""
        raise LispParseError("invalid '#' syntax")

    if c in _DIGITS or c == "-":
        have_nondigits = False
        have_digits = False
        points = 0
        while True:
            if c in _DIGITS:
                have_digits = True
            elif c == ".":
                points += 1
            token.append(c)
            c = stream.next_char()
            if not _ends_token(c) and c not in _DIGITS and c != ".":
                have_nondigits = True
            if _ends_token(c):
                break
        if c is not None:
            stream.unget_char(c)
        if have_nondigits or not have_digits or points > 1:
            return _Tok.SYMBOL, token.text()
        if points == 1:
            return _Tok.REAL, token.text()
        return _Tok.INTEGER, token.text()

    if c == ".":
        c = stream.next_char()
        if _ends_token(c):
            if c is not None:
                stream.unget_char(c)
            return _Tok.DOT, ""
        token.append(".")
    while True:
        token.append(c)
        c = stream.next_char()
        if _ends_token(c):
            break
    if c is not None:
        stream.unget_char(c)
    return _Tok.SYMBOL, token.text()


_END = object()
_CLOSE = object()
_DOT = object()


def _read_list(stream: Stream, pattern: bool) -> Any:
    head: Optional[Cons] = None
    last: Optional[Cons] = None
    while True:
        item = _read(stream)
        if item is _END:
            raise LispParseError("unexpected end of input inside a list")
        if item is _CLOSE:
            return head
        if item is _DOT:
            if last is None:
                raise LispParseError("dot at the start of a list")
            tail = _read(stream)
            if tail is _END:
                raise EOFError("end of input after a dot")
            if tail is _CLOSE or tail is _DOT:
                raise LispParseError("missing value after a dot")
            last.cdr = tail
            if _scan(stream)[0] is not _Tok.CLOSE:
                raise LispParseError("expected ')' after dotted tail")
            return head
        if last is None:
            head = last = (PatternCons if pattern else Cons)(item, None)
        else:
            cell = Cons(item, None)
            last.cdr = cell
            last = cell


def _read(stream: Stream) -> Any:
    tok, text = _scan(stream)
    if tok is _Tok.EOF:
        return _END
    if tok is _Tok.OPEN or tok is _Tok.PATTERN_OPEN:
        return _read_list(stream, tok is _Tok.PATTERN_OPEN)
    if tok is _Tok.CLOSE:
        return _CLOSE
    if tok is _Tok.DOT:
        return _DOT
    if tok is _Tok.SYMBOL:
        return Symbol(text)
    if tok is _Tok.STRING:
        return text
    if tok is _Tok.INTEGER:
        return int(text)
    if tok is _Tok.REAL:
        return float(text)
    if tok is _Tok.TRUE:
        return True
    return False


def read(stream: Stream) -> Any:
    """Read one expression from ``stream``.

    Raises :class:`EOFError` when the input is exhausted and
    :class:`LispParseError` on malformed input.
    """
    obj = _read(stream)
    if obj is _END:
        raise EOFError("end of input")
    if obj is _CLOSE:
        raise LispParseError("unexpected ')'")
    if obj is _DOT:
        raise LispParseError("unexpected '.'")
    return obj


def read_from_string(text: str) -> Any:
    """Read the first expression in ``text``."""
    return read(CharStream(text))


def read_from_file(path) -> Any:
    """Read the first expression in the text file at ``path``."""
    with open(path, encoding="utf-8") as fh:
        return read_from_string(fh.read())


def read_from_gzfile(path) -> Any:
    """Read the first expression in the gzip-compressed file at ``path``."""
    with gzip.open(path, "rt", encoding="utf-8") as fh:
        return read_from_string(fh.read())


def make_list(*args: Any) -> Optional[Cons]:
    """Build a proper list holding ``args``."""
    result: Optional[Cons] = None
    for item in reversed(args):
        result = Cons(item, result)
    return result


def _check_cons(obj: Any) -> Cons:
    if not isinstance(obj, Cons):
        raise TypeError(f"expected a cons cell, got {obj!r}")
    return obj


def iterate(obj: Any) -> Iterator[Any]:
    """Yield the elements of a proper list."""
    while obj is not None:
        cell = _check_cons(obj)
        yield cell.car
        obj = cell.cdr


def cxr(obj: Any, path: str) -> Any:
    """Apply car/cdr steps named by ``path`` ('a' or 'd'), right to left."""
    for step in reversed(path):
        if step == "a":
            obj = _check_cons(obj).car
        elif step == "d":
            obj = _check_cons(obj).cdr
        else:
            raise ValueError(f"invalid cxr step {step!r}")
    return obj


def list_length(obj: Any) -> int:
    """Return the number of cells in a proper list."""
    return sum(1 for _ in iterate(obj))


def list_nth_cdr(obj: Any, index: int) -> Any:
    """Return the list after dropping ``index`` cells."""
    while index > 0:
        if obj is None:
            raise IndexError("list index out of range")
        obj = _check_cons(obj).cdr
        index -= 1
    return obj


def list_nth(obj: Any, index: int) -> Any:
    """Return the element at ``index``."""
    obj = list_nth_cdr(obj, index)
    if obj is None:
        raise IndexError("list index out of range")
    return _check_cons(obj).car


def _dump_string(text: str) -> str:
    escaped = "".join("\\" + ch if ch in '"\\' else ch for ch in text)
    return f'"{escaped}"'


def dumps(obj: Any) -> str:
    """Return the printed representation of ``obj``."""
    if obj is None:
        return "()"
    if isinstance(obj, bool):
        return "#t" if obj else "#f"
    if isinstance(obj, int):
        return "%d" % obj
    if isinstance(obj, float):
        return "%f" % obj
    if isinstance(obj, Symbol):
        return str.__str__(obj)
    if isinstance(obj, str):
        return _dump_string(obj)
    if isinstance(obj, Cons):
        parts = ["#?(" if isinstance(obj, PatternCons) else "("]
        while obj is not None:
            parts.append(dumps(obj.car))
            obj = obj.cdr
            if obj is not None:
                if not isinstance(obj, Cons):
                    parts.append(" . ")
                    parts.append(dumps(obj))
                    break
                parts.append(" ")
        parts.append(")")
        return "".join(parts)
    raise TypeError(f"cannot print {obj!r} as Lisp")


def dump(obj: Any, out: TextIO) -> None:
    """Write the printed representation of ``obj`` to ``out``."""
    out.write(dumps(obj))