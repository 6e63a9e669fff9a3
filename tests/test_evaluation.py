import pytest

from fatlisp.errors import (
    FatlispApplicationError,
    FatlispArithmeticError,
    FatlispArityError,
    FatlispRecursionError,
    FatlispResolutionError,
    FatlispTypeError,
)
from fatlisp.evaluation.evaluator import evaluate, evaluate_all
from fatlisp.reader.parser import parse
from fatlisp.types.callables import Function, SpecialForm
from fatlisp.types.environment import Environment
from fatlisp.types.value import Bool, Float, Identifier, Int, List, Nil, String

# -----------------------------------------------------
# Tests
# -----------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [Int(1), Float(3.14), String("hello"), Bool(True), Bool(False), Nil()],
)
def test_self_evaluating_literals(value):
    assert evaluate(value, Environment()) == value


def test_callables_are_self_evaluating(env):
    plus = env.get("+")
    assert evaluate(plus, env) is plus
    assert isinstance(env.get("if"), SpecialForm)
    assert evaluate(env.get("if"), env) is env.get("if")


def test_identifier_lookup(env):
    env.set("x", Int(42))
    assert evaluate(Identifier("x"), env) == Int(42)


def test_unresolved_identifier_is_positioned(env):
    with pytest.raises(FatlispResolutionError) as excinfo:
        evaluate_all(parse("(foo 1)").items, env)
    assert str(excinfo.value) == "<string>:1:2 unable to resolve 'foo'"


def test_simple_expression(run_last):
    assert run_last("(+ 1 2)") == Int(3)
    assert run_last("(+ (* 2 3) (- 10 4))") == Int(12)


def test_head_may_be_any_expression(run_last):
    assert run_last("((fn (x) (* x x)) 4)") == Int(16)
    assert run_last("(def sq (fn (x) (* x x))) ((if true sq +) 5)") == Int(25)


def test_arguments_evaluated_left_to_right(interp, out):
    interp.eval("((fn (a b c) nil) (puts 1) (puts 2) (puts 3))")
    assert out.getvalue() == "1 \n2 \n3 \n"


def test_arguments_evaluated_in_caller_env(run_last):
    source = """
    (def x 1)
    (def f (fn (x) x))
    (def g (fn (x) (f (+ x 100))))
    (g 5)
    """
    assert run_last(source) == Int(105)


def test_not_a_function(env):
    with pytest.raises(FatlispApplicationError) as excinfo:
        evaluate_all(parse("(1 2)").items, env)
    assert str(excinfo.value) == "<string>:1:2 not a function: 1"


def test_not_a_function_for_computed_head(env):
    with pytest.raises(FatlispApplicationError, match='not a function: hi'):
        evaluate_all(parse('(def s "hi") (s)').items, env)


def test_empty_list_cannot_be_called(env):
    with pytest.raises(FatlispApplicationError) as excinfo:
        evaluate_all(parse("  ()").items, env)
    assert str(excinfo.value) == "<string>:1:3 cannot call an empty list"


def test_builtin_arity_error_at_call_site(env):
    with pytest.raises(FatlispArityError) as excinfo:
        evaluate_all(parse("(+ 1)").items, env)
    assert str(excinfo.value) == "<string>:1:2 + expects 2 arguments. Got 1."


def test_builtin_type_error_at_argument(env):
    with pytest.raises(FatlispTypeError) as excinfo:
        evaluate_all(parse('(+ 1 "a")').items, env)
    assert str(excinfo.value) == (
        "<string>:1:6 argument 2 of + should be of type Int or Float. Got String."
    )


def test_error_on_computed_value_reported_at_call_site(env):
    with pytest.raises(FatlispArithmeticError) as excinfo:
        evaluate_all(parse("(+ (+ 9223372036854775807 0) 1)").items, env)
    assert str(excinfo.value) == "<string>:1:2 integer overflow"


def test_errors_inside_function_body_keep_inner_position(env):
    source = "(def f (fn (x) (+ x y)))\n(f 1)"
    with pytest.raises(FatlispResolutionError) as excinfo:
        evaluate_all(parse(source).items, env)
    assert str(excinfo.value) == "<string>:1:21 unable to resolve 'y'"


def test_special_forms_can_be_shadowed(env):
    with pytest.raises(FatlispApplicationError, match="not a function: 1"):
        evaluate_all(parse("(def if 1) (if true 2 3)").items, env)


def test_evaluate_all_returns_every_result(env):
    results = evaluate_all(parse("1 (def a 2) a 'b").items, env)
    assert results == [Int(1), Identifier("a"), Int(2), Identifier("b")]


def test_evaluate_all_halts_and_keeps_partial_results(env):
    with pytest.raises(FatlispResolutionError) as excinfo:
        evaluate_all(parse("(def a 1) (boom) (def b 2)").items, env)
    assert excinfo.value.results == [Identifier("a")]
    assert env.find("a") is env
    assert env.find("b") is None


def test_runaway_recursion_is_a_fatlisp_error(env):
    source = "(def loop (fn (x) (loop x)))\n(loop 1)"
    with pytest.raises(FatlispRecursionError) as excinfo:
        evaluate_all(parse(source).items, env)
    assert str(excinfo.value) == "<string>:2:1 maximum recursion depth exceeded"
    assert excinfo.value.results == [Identifier("loop")]


def test_quoted_list_is_data(run_last):
    assert run_last("'(undefined 1)") == List([Identifier("undefined"), Int(1)])


def test_function_values_have_names(env, run_last):
    run_last("(def double (fn (x) (+ x x)))")
    fn = env.get("double")
    assert isinstance(fn, Function)
    assert fn.name == "double"
    assert fn.env is env
    assert str(fn) == "<fn double>"
