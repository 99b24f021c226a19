import pytest

from stepl.errors import ArityError, EvalError, LispTypeError, SpecialFormError
from stepl.types.function import Closure
from stepl.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(- 5)", -5),
        ("(- 10 1 2)", 7),
        ("(* 2 3 4)", 24),
        ("(/ 12 4)", 3),
        ("(/ 7 2)", 3.5),
        ("(= 1 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(= (list 1 2) '(1 2))", True),
        ("(= true 1)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(>= 3 3 1)", True),
        ("(not false)", True),
        ("(not 0)", False),
        ("(list 1 \"a\" 'b)", [1, "a", Symbol("b")]),
        ("(list)", []),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(car '(1 2 3))", 1),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(null? '())", True),
        ("(null? '(1))", False),
        ("(symbol? 'a)", True),
        ("(symbol? \"a\")", False),
        ("(eq? 'a 'a)", True),
    ],
)
def test_primitives(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source, error",
    [
        ("(+ 1 \"a\")", LispTypeError),
        ("(+ 1 true)", LispTypeError),
        ("(-)", ArityError),
        ("(/ 1)", ArityError),
        ("(/ 1 0)", EvalError),
        ("(< 1 \"b\")", LispTypeError),
        ("(car '())", LispTypeError),
        ("(cdr 5)", LispTypeError),
        ("(cons 1 2)", LispTypeError),
        ("(not 1 2)", ArityError),
    ],
)
def test_primitive_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_print(interp, capsys):
    assert interp.eval('(print "hello" 42)') is True
    assert capsys.readouterr().out == "hello 42\n"


def test_gensym(interp):
    s1 = interp.eval("(gensym)")
    s2 = interp.eval("(gensym)")
    assert isinstance(s1, Symbol) and isinstance(s2, Symbol)
    assert s1 != s2
    assert interp.eval("(gensym 'tmp)").name.startswith("tmp")
    assert interp.eval('(gensym "t")').name.startswith("t")


def test_gensym_errors(interp):
    with pytest.raises(ArityError):
        interp.eval('(gensym "a" "b")')
    with pytest.raises(LispTypeError):
        interp.eval("(gensym 42)")


def test_undef(interp):
    interp.eval("(def x 1)")
    assert interp.eval("(undef 'x)") is True
    assert interp.eval("(undef 'x)") is False
    assert not interp.context.is_defined("x")

# -------------------------
# Builtin macros
# -------------------------

def test_let(interp):
    assert interp.eval("(let ((a 1) (b 2)) (+ a b))") == 3
    assert interp.macroexpand("(let ((a 1)) a)") == [
        [Symbol("lambda"), [Symbol("a")], Symbol("a")], 1
    ]


def test_let_with_several_body_forms(interp):
    assert interp.eval("(let ((a 1)) (def seen a) (+ a 1))") == 2
    assert interp.eval("seen") == 1


def test_let_star_sees_earlier_bindings(interp):
    assert interp.eval("(let* ((a 1) (b (+ a 1))) (* a b))") == 2


def test_let_errors(interp):
    with pytest.raises(ArityError):
        interp.eval("(let ((a 1)))")
    with pytest.raises(LispTypeError):
        interp.eval("(let (a 1) a)")


def test_defun(interp):
    assert interp.eval("(defun sq (x) (* x x))") is True
    assert isinstance(interp.context.lookup("sq"), Closure)
    assert interp.eval("(sq 7)") == 49


def test_defun_recursion(interp):
    interp.eval("""
        (defun fact (n)
          (if (= n 0) 1 (* n (fact (- n 1)))))
    """)
    assert interp.eval("(fact 10)") == 3628800


def test_defmacro_from_a_program(interp):
    interp.eval("(defmacro 'unless (lambda (c a b) (list 'if c b a)))")
    assert interp.context.macros.is_macro("unless")
    assert interp.eval("(unless false 1 2)") == 1
    assert interp.macroexpand("(unless x 1 2)") == [
        Symbol("if"), Symbol("x"), 2, 1
    ]


def test_defmacro_rest_parameters(interp):
    interp.eval("(defmacro 'my-do (lambda (&body) (cons 'do body)))")
    assert interp.eval("(my-do (def a 1) (def b 2) (+ a b))") == 3


def test_defmacro_requires_a_function(interp):
    with pytest.raises(LispTypeError):
        interp.eval("(defmacro 'm 1)")
    with pytest.raises(LispTypeError):
        interp.eval('(defmacro "m" (lambda (x) x))')


def test_special_form_errors_are_eval_errors(interp):
    with pytest.raises(SpecialFormError):
        interp.eval("(if 1 2)")
