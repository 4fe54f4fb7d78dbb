"""Keyed access to Lisp property lists such as ``((name "x") (fps 10))``."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from tuxjump.lisp import Cons, Symbol, dumps, iterate, make_list

__all__ = ["LispTypeError", "LispReader", "LispWriter"]

logger = logging.getLogger(__name__)


class LispTypeError(TypeError):
    """Raised when a property holds a value of the wrong type."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string(value: Any) -> bool:
    return isinstance(value, str) and not isinstance(value, Symbol)


class LispReader:
    """Looks up properties in a list of ``(name value ...)`` entries."""

    def __init__(self, lst: Any) -> None:
        self._list = lst

    def _search(self, name: str) -> Any:
        for entry in iterate(self._list):
            if not isinstance(entry, Cons) or isinstance(entry.car, bool) or not isinstance(
                entry.car, Symbol
            ):
                logger.warning("malformed property entry skipped: %s", dumps(entry))
                continue
            if str(entry.car) == name:
                return entry.cdr
        return None

    def _values(self, name: str, check, label: str) -> Optional[List[Any]]:
        tail = self._search(name)
        if tail is None:
            return None
        values = list(iterate(tail))
        for value in values:
            if not check(value):
                raise LispTypeError(f"expected type {label} at token: {name}")
        return values

    def read_int(self, name: str) -> Optional[int]:
        """Return the integer under ``name``, or ``None`` if absent or not an integer."""
        tail = self._search(name)
        if tail is None or not _is_int(tail.car):
            return None
        return tail.car

    def read_float(self, name: str) -> Optional[float]:
        """Return the number under ``name`` as a float, or ``None`` if absent."""
        tail = self._search(name)
        if tail is None:
            return None
        value = tail.car
        if not (_is_int(value) or isinstance(value, float)):
            raise LispTypeError(f"expected type real at token: {name}")
        return float(value)

    def read_string(self, name: str) -> Optional[str]:
        """Return the string under ``name``, or ``None`` if absent."""
        tail = self._search(name)
        if tail is None:
            return None
        if not _is_string(tail.car):
            raise LispTypeError(f"expected type string at token: {name}")
        return str(tail.car)

    def read_bool(self, name: str) -> Optional[bool]:
        """Return the boolean under ``name``, or ``None`` if absent."""
        tail = self._search(name)
        if tail is None:
            return None
        if not isinstance(tail.car, bool):
            raise LispTypeError(f"expected type bool at token: {name}")
        return tail.car

    def read_lisp(self, name: str) -> Any:
        """Return the raw value list following ``name``, or ``None`` if absent."""
        return self._search(name)

    def read_int_vector(self, name: str) -> Optional[List[int]]:
        """Return all integers under ``name``, or ``None`` if absent."""
        return self._values(name, _is_int, "integer")

    def read_string_vector(self, name: str) -> Optional[List[str]]:
        """Return all strings under ``name``, or ``None`` if absent."""
        values = self._values(name, _is_string, "string")
        return None if values is None else [str(v) for v in values]

    def read_char_vector(self, name: str) -> Optional[List[str]]:
        """Return the first character of each string under ``name``.

        An empty string yields ``"\\0"``.
        """
        values = self._values(name, _is_string, "string")
        if values is None:
            return None
        return [v[0] if v else "\0" for v in values]


class LispWriter:
    """Builds a list ``(name (key value) ...)``."""

    def __init__(self, name: str) -> None:
        self._objs: List[Any] = [Symbol(name)]

    def _append(self, name: str, value: Any) -> None:
        self._objs.append(make_list(Symbol(name), value))

    def write_float(self, name: str, value: float) -> None:
        self._append(name, float(value))

    def write_int(self, name: str, value: int) -> None:
        self._append(name, int(value))

    def write_boolean(self, name: str, value: bool) -> None:
        self._append(name, bool(value))

    def write_string(self, name: str, value: str) -> None:
        self._append(name, str(value))

    def write_symbol(self, name: str, symname: str) -> None:
        self._append(name, Symbol(symname))

    def write_lisp_obj(self, name: str, obj: Any) -> None:
        self._append(name, obj)

    def create_lisp(self) -> Optional[Cons]:
        """Return the built list and empty the writer, name included."""
        result = make_list(*self._objs)
        self._objs.clear()
        return result