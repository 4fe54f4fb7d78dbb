"""Compile and match structural patterns over Lisp data.

A pattern is ordinary Lisp data in which ``#?(type)`` forms stand for
variables. The recognised types are ``any``, ``symbol``, ``string``,
``integer``, ``real``, ``boolean``, ``list`` and ``or``; an ``or`` form
holds alternative sub-patterns, as in ``#?(or #?(symbol) #?(string))``.
Each variable gets an index in depth-first order, and a successful match
captures the matched value at that index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Optional, Tuple

from tuxjump.lisp import (
    Cons,
    LispParseError,
    PatternCons,
    Symbol,
    iterate,
    read_from_string,
)

__all__ = [
    "PatternType",
    "PatternVar",
    "PatternError",
    "compile_pattern",
    "match_pattern",
    "match_string",
]


class PatternError(ValueError):
    """Raised for a pattern that cannot be read or compiled."""


class PatternType(IntEnum):
    ANY = 1
    SYMBOL = 2
    STRING = 3
    INTEGER = 4
    REAL = 5
    BOOLEAN = 6
    LIST = 7
    OR = 8


_TYPE_NAMES = {
    "any": PatternType.ANY,
    "symbol": PatternType.SYMBOL,
    "string": PatternType.STRING,
    "integer": PatternType.INTEGER,
    "real": PatternType.REAL,
    "boolean": PatternType.BOOLEAN,
    "list": PatternType.LIST,
    "or": PatternType.OR,
}


@dataclass
class PatternVar:
    """A compiled pattern variable."""

    type: PatternType
    index: int
    sub: Tuple[Any, ...] = field(default_factory=tuple)


def _kind(obj: Any) -> str:
    if obj is None:
        return "nil"
    if isinstance(obj, bool):
        return "boolean"
    if isinstance(obj, int):
        return "integer"
    if isinstance(obj, float):
        return "real"
    if isinstance(obj, Symbol):
        return "symbol"
    if isinstance(obj, str):
        return "string"
    if isinstance(obj, PatternCons):
        return "pattern_cons"
    if isinstance(obj, Cons):
        return "cons"
    if isinstance(obj, PatternVar):
        return "var"
    return "other"


_REQUIRED_KIND = {
    PatternType.SYMBOL: "symbol",
    PatternType.STRING: "string",
    PatternType.INTEGER: "integer",
    PatternType.REAL: "real",
    PatternType.BOOLEAN: "boolean",
    PatternType.LIST: "cons",
}


class _Compiler:
    def __init__(self) -> None:
        self.count = 0

    def compile(self, obj: Any) -> Any:
        if isinstance(obj, PatternCons):
            return self._compile_var(obj)
        if isinstance(obj, Cons):
            car = self.compile(obj.car)
            cdr = self.compile(obj.cdr)
            return Cons(car, cdr)
        return obj

    def _compile_var(self, form: PatternCons) -> PatternVar:
        head = form.car
        if not isinstance(head, Symbol):
            raise PatternError(f"pattern type must be a symbol, got {head!r}")
        ptype = _TYPE_NAMES.get(str(head))
        if ptype is None:
            raise PatternError(f"unknown pattern type {str(head)!r}")
        if ptype is not PatternType.OR and form.cdr is not None:
            raise PatternError(f"pattern type {str(head)!r} takes no arguments")
        var = PatternVar(ptype, self.count)
        self.count += 1
        if ptype is PatternType.OR:
            try:
                alternatives = list(iterate(form.cdr))
            except TypeError as exc:
                raise PatternError("'or' alternatives must form a proper list") from exc
            var.sub = tuple(self.compile(alt) for alt in alternatives)
        return var


def compile_pattern(obj: Any) -> Tuple[Any, int]:
    """Compile ``obj`` into a pattern.

    Returns the compiled pattern and the number of variables in it. The
    input is left unchanged.
    """
    compiler = _Compiler()
    compiled = compiler.compile(obj)
    return compiled, compiler.count


def _match_var(pattern: PatternVar, obj: Any, captures: List[Any]) -> bool:
    if pattern.type is PatternType.OR:
        # Every alternative is tried so that all of them get a chance to capture.
        results = [_match(alt, obj, captures) for alt in pattern.sub]
        if not any(results):
            return False
    elif pattern.type is not PatternType.ANY:
        if _kind(obj) != _REQUIRED_KIND[pattern.type]:
            return False
    captures[pattern.index] = obj
    return True


def _match(pattern: Any, obj: Any, captures: List[Any]) -> bool:
    if pattern is None:
        return obj is None
    if obj is None:
        return False
    if isinstance(pattern, PatternVar):
        return _match_var(pattern, obj, captures)
    kind = _kind(pattern)
    if kind != _kind(obj):
        return False
    if kind == "cons":
        car_ok = _match(pattern.car, obj.car, captures)
        cdr_ok = _match(pattern.cdr, obj.cdr, captures)
        return car_ok and cdr_ok
    if kind in ("symbol", "string", "integer", "real", "boolean"):
        return pattern == obj
    raise PatternError(f"cannot match against {pattern!r}")


def match_pattern(pattern: Any, obj: Any, num_subs: int) -> Tuple[bool, List[Optional[Any]]]:
    """Match ``obj`` against a compiled pattern.

    Returns whether it matched and the list of ``num_subs`` captured values;
    variables that captured nothing hold ``None``.
    """
    captures: List[Optional[Any]] = [None] * num_subs
    matched = _match(pattern, obj, captures)
    return matched, captures


def match_string(pattern_string: str, obj: Any) -> Tuple[bool, List[Optional[Any]]]:
    """Read, compile and match a pattern given as text."""
    try:
        pattern = read_from_string(pattern_string)
    except (LispParseError, EOFError) as exc:
        raise PatternError(f"cannot read pattern: {exc}") from exc
    compiled, num_subs = compile_pattern(pattern)
    return match_pattern(compiled, obj, num_subs)