import math

import pytest

from kappa.errors import (
    KappaArityError,
    KappaDivisionByZero,
    KappaEvalError,
    KappaTypeError,
    KappaUnboundFunction,
    KappaUnknownSymbol,
)
from kappa.types.lisp_list import LispList
from kappa.types.numbers import BigInt, INT_MAX

FACT = "(def fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))"
FIB = "(def fib (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2)))))"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(print (+ 1 2))", ["3"]),
        ('(print "hello world")', ["hello world"]),
        ("(print (< 1 2))", ["true"]),
        ("(print (> 1 2))", ["false"]),
        ("(print ())", ["()"]),
        ('(print (1 "a" (2 3)))', ['(1 a (2 3))']),
        ("((var x 5) (print x))", ["5"]),
        ("(def add (a b) (+ a b)) (print (add 3 4))", ["7"]),
        ('(if (< 1 2) (print "yes") (print "no"))', ["yes"]),
        ('(if (>= 1 2) (print "yes") (print "no"))', ["no"]),
        ("(print (/ 7 2))", ["3"]),
        ("(print (/ (- 0 7) 2))", ["-3"]),
        ("((var x 1) (var x (+ x 1)) (print x))", ["2"]),
        (FIB + " (print (fib 15))", ["610"]),
    ]
)
def test_programs(interp, output, source, expected):
    interp.run(source)
    assert output == expected


def test_forms_are_evaluated_left_to_right(interp, output):
    interp.run("((print 1) (print 2) (print 3))")
    interp.run("(def second (a b) b) (second (print 4) (print 5))")
    assert output == ["1", "2", "3", "4", "5"]


def test_each_top_level_form_has_its_own_scope(interp, output):
    with pytest.raises(KappaUnknownSymbol, match="unknown local symbol x"):
        interp.run("(var x 5) (print x)")
    assert output == []


def test_print_and_def_return_empty_list(interp, output):
    assert interp.eval("(print 1)") is LispList.empty()
    assert interp.eval("(def f () 1)") is LispList.empty()
    assert interp.eval("(var x 1)") is LispList.empty()


def test_condition_must_be_boolean(interp, output):
    with pytest.raises(KappaTypeError, match="condition value is not a boolean 1"):
        interp.run("(if 1 (print 1) (print 2))")
    assert output == []


def test_local_in_head_position_builds_a_list(interp, output):
    interp.run("(print ((var x 5) (x 1 2)))")
    assert output == ["(() (5 1 2))"]


def test_unbound_function(interp):
    with pytest.raises(KappaUnboundFunction, match="unknown function x"):
        interp.run("(x 1 2)")


def test_call_arity_checked_at_call_time(interp):
    interp.run("(def f (a) a)")
    with pytest.raises(KappaArityError) as info:
        interp.run("(f 1 2)")
    assert "expected 1, got 2" in str(info.value)
    assert interp.eval("(f 9)") == 9


def test_arguments_evaluated_before_lookup(interp, output):
    with pytest.raises(KappaUnboundFunction):
        interp.run("(missing (print 1))")
    assert output == ["1"]


def test_factorial_overflows_into_bigint(interp, output):
    interp.run(FACT + " (print (fact 25))")
    assert output == [str(math.factorial(25))]
    assert type(interp.eval("(fact 25)")) is BigInt
    assert type(interp.eval("(fact 5)")) is int


def test_overflow_in_source(interp, output):
    interp.run(f"(print (+ {INT_MAX} 1))")
    assert output == [str(INT_MAX + 1)]


def test_parsed_bigint_stays_wide(interp):
    value = interp.eval(f"(- {INT_MAX + 1} 1)")
    assert value == INT_MAX
    assert type(value) is BigInt


def test_division_by_zero(interp):
    with pytest.raises(KappaDivisionByZero):
        interp.run("(/ 1 0)")
    with pytest.raises(KappaDivisionByZero):
        interp.run(f"(/ {INT_MAX + 1} 0)")


def test_arithmetic_on_non_integers(interp):
    with pytest.raises(KappaTypeError):
        interp.run('(+ 1 "two")')
    with pytest.raises(KappaTypeError):
        interp.run("(+ (< 1 2) 1)")


def test_uninitialized_local(interp):
    with pytest.raises(KappaTypeError, match="uninitialized local y"):
        interp.run("((if (< 2 1) (var y 1) 0) y)")


def test_callee_frames_are_isolated(interp, output):
    interp.run(
        "(def f (a) ((var b (+ a 1)) b))"
        " ((var b 100) (print (f 1)) (print b))"
    )
    assert output == ["(() 2)", "100"]


def test_function_bodies_cannot_see_caller_locals(interp):
    with pytest.raises(KappaUnknownSymbol):
        interp.run("(def f () y)")
    assert "f" not in [s.name for s in interp.functions]


def test_redefinition_replaces(interp):
    interp.run("(def f () 1)")
    interp.run("(def f () 2)")
    assert interp.eval("(f)") == 2


def test_runaway_recursion(interp):
    interp.run("(def down (n) (if (<= n 0) 0 (down (- n 1))))")
    with pytest.raises(KappaEvalError, match="maximum call depth exceeded"):
        interp.run("(down 100000)")
    # the interpreter stays usable
    assert interp.eval("(down 10)") == 0


def test_huge_numeral_in_source(interp, output):
    interp.run("(print (+ " + "9" * 5000 + " 1))")
    assert output == ["1" + "0" * 5000]


def test_printing_huge_computed_result(interp, output):
    googol = "1" + "0" * 100
    interp.run(f"(def p (n) (if (< n 1) 1 (* {googol} (p (- n 1))))) (print (p 50))")
    assert output == ["1" + "0" * 5000]
