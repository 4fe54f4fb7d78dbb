import pytest

from tuxjump.lisp import Cons, Symbol, dumps, read_from_string
from tuxjump.pattern import (
    PatternError,
    PatternType,
    PatternVar,
    compile_pattern,
    match_pattern,
    match_string,
)


def test_compile_single_variable():
    compiled, n = compile_pattern(read_from_string("#?(integer)"))
    assert compiled == PatternVar(PatternType.INTEGER, 0)
    assert n == 1


def test_compile_numbers_variables_in_order():
    compiled, n = compile_pattern(read_from_string("(pos #?(integer) #?(real))"))
    assert n == 2
    assert compiled.car == Symbol("pos")
    assert compiled.cdr.car.index == 0
    assert compiled.cdr.car.type is PatternType.INTEGER
    assert compiled.cdr.cdr.car.index == 1
    assert compiled.cdr.cdr.car.type is PatternType.REAL


def test_compile_or_gets_index_before_alternatives():
    compiled, n = compile_pattern(read_from_string("#?(or #?(symbol) #?(string))"))
    assert n == 3
    assert compiled.type is PatternType.OR
    assert compiled.index == 0
    assert [alt.index for alt in compiled.sub] == [1, 2]
    assert [alt.type for alt in compiled.sub] == [PatternType.SYMBOL, PatternType.STRING]


def test_compile_leaves_input_unchanged():
    source = read_from_string("(a #?(any) (b #?(list)))")
    before = dumps(source)
    compile_pattern(source)
    assert dumps(source) == before


def test_compile_without_variables():
    compiled, n = compile_pattern(read_from_string("(a b 1)"))
    assert n == 0
    assert dumps(compiled) == "(a b 1)"


@pytest.mark.parametrize(
    "text",
    ["#?(bogus)", "#?(\"any\")", "#?(integer foo)", "(x #?(nope))"],
)
def test_compile_rejects_bad_patterns(text):
    with pytest.raises(PatternError):
        compile_pattern(read_from_string(text))


def test_match_captures_values():
    matched, captures = match_string(
        "(pos #?(integer) #?(integer))", read_from_string("(pos 3 4)")
    )
    assert matched is True
    assert captures == [3, 4]


def test_match_fails_on_type_mismatch():
    matched, _ = match_string("(pos #?(integer))", read_from_string('(pos "3")'))
    assert matched is False


def test_match_fails_on_literal_mismatch():
    matched, _ = match_string("(pos #?(any))", read_from_string("(size 1)"))
    assert matched is False


def test_real_does_not_match_integer():
    assert match_string("#?(real)", 2)[0] is False
    assert match_string("#?(real)", 2.5) == (True, [2.5])


def test_any_does_not_match_missing_element():
    assert match_string("(a #?(any))", read_from_string("(a)"))[0] is False


def test_nil_pattern_matches_only_nil():
    assert match_string("()", None) == (True, [])
    assert match_string("()", Symbol("a"))[0] is False


def test_list_variable_matches_cons_only():
    obj = read_from_string("(1 2)")
    assert match_string("#?(list)", obj) == (True, [obj])
    assert match_string("#?(list)", Symbol("x"))[0] is False


def test_boolean_variable():
    assert match_string("#?(boolean)", False) == (True, [False])
    assert match_string("#?(boolean)", 0)[0] is False


def test_symbol_is_not_string():
    assert match_string("#?(symbol)", "text")[0] is False
    assert match_string("#?(string)", "text") == (True, ["text"])


def test_or_captures_outer_and_matching_alternative():
    matched, captures = match_string("#?(or #?(symbol) #?(string))", Symbol("x"))
    assert matched is True
    assert captures == [Symbol("x"), Symbol("x"), None]


def test_or_fails_when_no_alternative_matches():
    assert match_string("#?(or #?(symbol) #?(string))", 7)[0] is False


def test_match_pattern_with_compiled_pattern():
    compiled, n = compile_pattern(read_from_string("(name #?(string))"))
    obj = Cons(Symbol("name"), Cons("tux", None))
    assert match_pattern(compiled, obj, n) == (True, ["tux"])


@pytest.mark.parametrize("text", ["", "(a b", ")", "#?(unknown)"])
def test_match_string_rejects_bad_pattern_text(text):
    with pytest.raises(PatternError):
        match_string(text, None)