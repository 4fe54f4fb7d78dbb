import gzip
import io

import pytest

from tuxjump.lisp import (
    CharStream,
    Cons,
    LispParseError,
    PatternCons,
    Symbol,
    cxr,
    dump,
    dumps,
    iterate,
    list_length,
    list_nth,
    list_nth_cdr,
    make_list,
    read,
    read_from_file,
    read_from_gzfile,
    read_from_string,
)


def test_read_integer():
    value = read_from_string("42")
    assert value == 42
    assert type(value) is int


def test_read_negative_integer():
    assert read_from_string("-7") == -7


def test_read_real():
    value = read_from_string("3.5")
    assert value == 3.5
    assert type(value) is float


@pytest.mark.parametrize("text", ["1.2.3", "-", "12abc", "1-2", "foo", ".abc"])
def test_numberlike_symbols(text):
    value = read_from_string(text)
    assert isinstance(value, Symbol)
    assert value == Symbol(text)


def test_booleans():
    assert read_from_string("#t") is True
    assert read_from_string("#f") is False


def test_string_escapes():
    assert read_from_string('"a\\nb\\tc"') == "a\nb\tc"
    assert read_from_string('"x\\qy"') == "xqy"


def test_symbol_and_string_differ():
    assert Symbol("a") != "a"
    assert "a" != Symbol("a")
    assert Symbol("a") == Symbol("a")
    assert read_from_string('"a"') != read_from_string("a")


def test_read_list():
    value = read_from_string("(a b c)")
    assert value == make_list(Symbol("a"), Symbol("b"), Symbol("c"))
    assert type(value) is Cons


def test_read_dotted_pair():
    assert read_from_string("(a . b)") == Cons(Symbol("a"), Symbol("b"))


def test_empty_list_is_nil():
    assert read_from_string("()") is None


def test_pattern_list_head_only():
    value = read_from_string("#?(any x)")
    assert type(value) is PatternCons
    assert type(value.cdr) is Cons
    assert value.car == Symbol("any")


def test_comments_and_whitespace_skipped():
    assert read_from_string("; a comment\n   \t 5") == 5


def test_delimiter_ends_token():
    assert read_from_string('(a"b")') == make_list(Symbol("a"), "b")


@pytest.mark.parametrize(
    "text",
    ["(a", ")", ".", "#x", '"abc', "(. a)", "(a . b c)", "#?x", "#", '"a\\'],
)
def test_parse_errors(text):
    with pytest.raises(LispParseError):
        read_from_string(text)


@pytest.mark.parametrize("text", ["", "   ", "; only a comment"])
def test_eof(text):
    with pytest.raises(EOFError):
        read_from_string(text)


def test_eof_after_dot():
    with pytest.raises(EOFError):
        read_from_string("(a .")


def test_token_too_long():
    with pytest.raises(LispParseError):
        read_from_string("x" * 2000)


def test_stream_reads_successive_expressions():
    stream = CharStream("1 (b) c")
    assert read(stream) == 1
    assert read(stream) == make_list(Symbol("b"))
    assert read(stream) == Symbol("c")
    with pytest.raises(EOFError):
        read(stream)


def test_nul_ends_string_stream():
    stream = CharStream("ab\x00cd")
    assert read(stream) == Symbol("ab")
    with pytest.raises(EOFError):
        read(stream)


def test_dumps_nil_and_real():
    assert dumps(None) == "()"
    assert dumps(1.5) == "1.500000"


@pytest.mark.parametrize(
    "text",
    [
        "(a (b c) . d)",
        '("q\\"x" #t #f 5 -3)',
        "#?(any (b))",
        "((a . b) (c . d))",
        '"back\\\\slash"',
    ],
)
def test_dumps_round_trip_text(text):
    assert dumps(read_from_string(text)) == text


@pytest.mark.parametrize(
    "obj",
    [
        make_list(Symbol("x"), 1, 2.25, "s", True, None),
        Cons(1, Cons(2, 3)),
        'quote"and\\back',
        make_list(make_list(Symbol("a")), make_list()),
    ],
)
def test_read_dumps_round_trip(obj):
    assert read_from_string(dumps(obj)) == obj


def test_dumps_rejects_unknown():
    with pytest.raises(TypeError):
        dumps(object())


def test_dump_writes_to_file():
    obj = read_from_string("(name \"tux\" (x 1))")
    out = io.StringIO()
    dump(obj, out)
    assert out.getvalue() == dumps(obj)


def test_cxr():
    lst = read_from_string("(a (b c) d)")
    assert cxr(lst, "a") == Symbol("a")
    assert cxr(lst, "ad") == make_list(Symbol("b"), Symbol("c"))
    assert cxr(lst, "aad") == Symbol("b")
    assert cxr(lst, "") is lst
    with pytest.raises(ValueError):
        cxr(lst, "x")
    with pytest.raises(TypeError):
        cxr(lst, "aa")


def test_list_helpers():
    lst = read_from_string("(a b c)")
    assert list_length(lst) == 3
    assert list_length(None) == 0
    assert list_nth(lst, 2) == Symbol("c")
    assert list_nth_cdr(lst, 1) == make_list(Symbol("b"), Symbol("c"))
    assert list_nth_cdr(lst, 3) is None
    with pytest.raises(IndexError):
        list_nth(lst, 3)
    with pytest.raises(IndexError):
        list_nth_cdr(lst, 4)


def test_iterate():
    lst = read_from_string("(1 2 3)")
    assert list(iterate(lst)) == [1, 2, 3]
    with pytest.raises(TypeError):
        list(iterate(Cons(1, 2)))


def test_make_list_length_matches():
    args = (1, 2, 3, 4)
    assert list_length(make_list(*args)) == len(args)
    assert make_list() is None


def test_read_from_file(tmp_path):
    path = tmp_path / "level.stl"
    path.write_text("(level (name \"one\"))", encoding="utf-8")
    assert read_from_file(path) == read_from_string("(level (name \"one\"))")


def test_read_from_gzfile(tmp_path):
    path = tmp_path / "level.stl.gz"
    text = "(level (width 100) (gravity 10.0))"
    with gzip.open(path, "wt", encoding="utf-8") as fh:
        fh.write(text)
    assert read_from_gzfile(path) == read_from_string(text)