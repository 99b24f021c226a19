import pytest

from stepl.errors import LispSyntaxError, UnresolvedSymbol
from stepl.interpreter import Interpreter
from stepl.types.symbol import Symbol


def test_empty_input(interp):
    assert interp.eval("") is None
    assert interp.eval("   ; nothing here\n") is None


def test_single_form(interp):
    assert interp.eval("(+ 1 2)") == 3


def test_several_forms_return_every_value(interp):
    assert interp.eval("(def x 2) (* x x) 'done") == [True, 4, Symbol("done")]


def test_factorial(interp):
    interp.eval("""
    (def fact
      (lambda (n)
        (if (<= n 1)
            1
            (* n (fact (- n 1))))))
    """)
    assert interp.eval("(fact 5)") == 120


def test_macro_defined_earlier_in_the_same_source(interp):
    code = """
    (defmacro 'twice (lambda (x) (list 'do x x)))
    (def n 0)
    (twice (def n (+ n 1)))
    n
    """
    assert interp.eval(code)[-1] == 2


def test_prelude():
    interp = Interpreter(prelude="(def one 1) (defun inc (x) (+ x one))")
    assert interp.eval("(inc 41)") == 42


def test_interpreters_are_isolated():
    a = Interpreter()
    b = Interpreter()
    a.eval("(def shared 1)")
    with pytest.raises(UnresolvedSymbol):
        b.eval("shared")


def test_macroexpand(interp):
    assert interp.macroexpand("(defun f (x) x)") == [
        Symbol("def"), Symbol("f"), [Symbol("lambda"), Symbol("f"), [Symbol("x")], Symbol("x")]
    ]


@pytest.mark.parametrize("code", ["", "1 2"])
def test_single_form_entry_points_reject_other_counts(interp, code):
    with pytest.raises(LispSyntaxError):
        interp.macroexpand(code)
    with pytest.raises(LispSyntaxError):
        interp.start(code)


def test_start_returns_a_resumable_evaluation(interp):
    evaluation = interp.start("(let ((a 2) (b 3)) (* a b))")
    assert not evaluation.done
    evaluation.step()
    evaluation.step()
    assert evaluation.step_count == 2
    assert evaluation.run() == 6
    assert evaluation.done


def test_errors_leave_the_session_usable(interp):
    with pytest.raises(UnresolvedSymbol):
        interp.eval("(+ 1 missing)")
    assert interp.eval("(+ 1 1)") == 2
