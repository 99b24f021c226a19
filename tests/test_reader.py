import pytest
from hypothesis import given, strategies as st

from stepl.errors import LispSyntaxError
from stepl.reader.parser import lex, read, TokenStream
from stepl.types.symbol import Symbol


# Convert nested list to Lisp source string
def _to_lisp_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_lisp_source(e) for e in expr)})"
    if isinstance(expr, bool):
        return "#t" if expr else "#f"
    if isinstance(expr, Symbol):
        return expr.name
    if isinstance(expr, str):
        return '"' + expr.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return str(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(f 'x)", [("lparen", "("), ("symbol", "f"), ("quote", "'"), ("symbol", "x"), ("rparen", ")")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("#t", True),
        ("true", True),
        ("#f", False),
        ("false", False),
        ('"hi there"', "hi there"),
        ('"line\\n"', "line\n"),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("&rest", Symbol("&rest")),
        ("inf", Symbol("inf")),
        ("()", []),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("'(1 2)", [Symbol("quote"), [1, 2]]),
        ("(a (b c) d)", [Symbol("a"), [Symbol("b"), Symbol("c")], Symbol("d")]),
    ],
)
def test_parse_single_form(source, expected):
    assert read(source) == [expected]


def test_parse_all_forms():
    assert read("(def x 1) x ; trailing comment") == [
        [Symbol("def"), Symbol("x"), 1],
        Symbol("x"),
    ]


def test_booleans_are_not_numbers():
    value = read("#t")[0]
    assert value is True


@pytest.mark.parametrize("source", ["(a b", ")", "'", '"unterminated', "(a))"])
def test_syntax_errors(source):
    with pytest.raises(LispSyntaxError):
        read(source)


def test_token_stream_is_lazy():
    def tokens():
        yield "lparen", "("
        yield "symbol", "a"
        yield "rparen", ")"
        raise AssertionError("read past the first form")

    stream = TokenStream(tokens())
    assert stream.parse_expr() == [Symbol("a")]

# -------------------------------
# Hypothesis tests
# -------------------------------

atoms = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.booleans(),
    st.text(alphabet="abc xyz\"\\", max_size=5),
    st.sampled_from([Symbol(n) for n in ("a", "foo", "+", "&rest", "null?")]),
)
sexprs = st.recursive(atoms, lambda children: st.lists(children, max_size=4), max_leaves=15)


@given(sexprs)
def test_printed_forms_read_back(sexpr):
    assert read(_to_lisp_source(sexpr)) == [sexpr]
