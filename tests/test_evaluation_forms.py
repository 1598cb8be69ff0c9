import pytest

from slisp.errors import (
    SlispArityError,
    SlispInvalidSymbol,
    SlispRuntimeError,
    SlispSyntaxError,
    SlispUnboundSymbol,
    SlispValueError,
)
from slisp.evaluation.evaluator import evaluate
from slisp.reader.parser import read
from slisp.types.cons import Cons
from slisp.types.lambda_fn import Lambda
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def run(env, source):
    result = Nil
    for expr in read(source):
        result = evaluate(expr, env)
    return result


def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(Nil, env) is Nil


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(SlispUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_empty_expression_is_syntax_error(env):
    with pytest.raises(SlispSyntaxError):
        evaluate([], env)


def test_quote_turns_lists_into_data(env):
    assert run(env, "(quote (1 2 3))") == Cons.from_iterable([1, 2, 3])
    assert run(env, "'(a (b))") == Cons(Symbol("a"), Cons(Cons(Symbol("b"))))
    assert run(env, "'x") == Symbol("x")
    assert run(env, "'()") is Nil
    assert run(env, "(car '(1 2))") == 1


def test_define_returns_nil_and_binds(env):
    assert run(env, "(define pi 3.141592653)") is Nil
    assert run(env, "pi") == 3.141592653


def test_define_function_shorthand(env):
    run(env, "(define (square x) (* x x))")
    assert run(env, "(square 7)") == 49
    assert run(env, "square").name == "square"


def test_define_requires_symbol(env):
    with pytest.raises(SlispInvalidSymbol):
        run(env, "(define 1 2)")
    with pytest.raises(SlispArityError):
        run(env, "(define x)")


def test_circle_area(env):
    run(env, "(define pi 3.141592653)")
    run(env, "(define circle-area (lambda (r) (* pi (* r r))))")
    assert run(env, "(circle-area 3)") == pytest.approx(28.274333877)


def test_lambda_closure_and_application(env):
    lam = run(env, "(lambda (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert evaluate([lam, 2, 3], env) == 5
    assert run(env, "((lambda (a b) (- a b)) 10 4)") == 6


def test_lambda_multiple_body_forms_return_last(env):
    assert run(env, "((lambda (x) (define y (* x 2)) (+ y 1)) 5)") == 11
    # body defines stay inside the call frame
    with pytest.raises(SlispUnboundSymbol):
        run(env, "y")


def test_lambda_empty_body_returns_nil(env):
    assert run(env, "((lambda ()))") is Nil


def test_lambda_arity_mismatch(env):
    run(env, "(define (f a b) a)")
    with pytest.raises(SlispArityError, match="f expects 2"):
        run(env, "(f 1)")
    with pytest.raises(SlispArityError):
        run(env, "(f 1 2 3)")


@pytest.mark.parametrize(
    "source", ["(lambda x x)", "(lambda (1) 1)", "(lambda (a a) a)"]
)
def test_lambda_bad_parameter_lists(env, source):
    with pytest.raises(SlispSyntaxError):
        run(env, source)


def test_closures_capture_defining_scope(env):
    run(env, "(define (adder n) (lambda (x) (+ x n)))")
    run(env, "(define add5 (adder 5))")
    run(env, "(define n 100)")
    assert run(env, "(add5 1)") == 6


def test_if(env):
    assert run(env, "(if #t 1 2)") == 1
    assert run(env, "(if #f 1 2)") == 2
    assert run(env, "(if (< 1 2) 'yes 'no)") == Symbol("yes")
    assert run(env, "(if #f 1)") is Nil


def test_if_only_evaluates_chosen_branch(env):
    assert run(env, "(if #t 1 (undefined-fn))") == 1


def test_if_requires_boolean_predicate(env):
    with pytest.raises(SlispValueError, match="boolean"):
        run(env, "(if 0 1 2)")
    with pytest.raises(SlispValueError):
        run(env, "(if #nil 1 2)")


def test_if_arity(env):
    with pytest.raises(SlispArityError):
        run(env, "(if #t)")
    with pytest.raises(SlispArityError):
        run(env, "(if #t 1 2 3)")


def test_cond(env):
    src = "(cond ((< x 0) 'neg) ((= x 0) 'zero) (#t 'pos))"
    env.define(Symbol("x"), -3)
    assert run(env, src) == Symbol("neg")
    env.set(Symbol("x"), 0)
    assert run(env, src) == Symbol("zero")
    env.set(Symbol("x"), 9)
    assert run(env, src) == Symbol("pos")


def test_cond_else_and_multi_form_body(env):
    assert run(env, "(cond (#f 1) (else (define z 3) (* z 2)))") == 6


def test_cond_without_match_raises(env):
    with pytest.raises(SlispRuntimeError, match="all predicates false"):
        run(env, "(cond ((< 2 1) 1))")


def test_cond_requires_boolean_predicates(env):
    with pytest.raises(SlispValueError):
        run(env, "(cond (1 1))")
    with pytest.raises(SlispSyntaxError):
        run(env, "(cond 5)")


def test_set_updates_nearest_binding(env):
    run(env, "(define counter 0)")
    assert run(env, "(set! counter (+ counter 1))") is Nil
    assert run(env, "counter") == 1
    run(env, "(define (bump) (set! counter (+ counter 10)))")
    run(env, "(bump)")
    assert run(env, "counter") == 11


def test_set_unbound_raises(env):
    with pytest.raises(SlispUnboundSymbol):
        run(env, "(set! nope 1)")
    with pytest.raises(SlispInvalidSymbol):
        run(env, "(set! 1 1)")


def test_let_bindings_are_sequential(env):
    assert run(env, "(let ((a 5) (b (+ a 1))) (+ a b))") == 11
    with pytest.raises(SlispUnboundSymbol):
        run(env, "a")


def test_let_shadows_and_restores(env):
    run(env, "(define a 1)")
    assert run(env, "(let ((a 2)) a)") == 2
    assert run(env, "a") == 1


def test_let_allows_local_recursion(env):
    src = """
    (let ((count (lambda (n) (if (= n 0) 0 (+ 1 (count (- n 1)))))))
      (count 5))
    """
    assert run(env, src) == 5


@pytest.mark.parametrize("source", ["(let)", "(let x 1)", "(let ((1 2)) 1)", "(let ((a)) a)"])
def test_let_malformed(env, source):
    with pytest.raises((SlispSyntaxError, SlispArityError)):
        run(env, source)


def test_begin_opens_a_scope(env):
    assert run(env, "(begin (define t 1) (+ t 1))") == 2
    with pytest.raises(SlispUnboundSymbol):
        run(env, "t")
    assert run(env, "(begin)") is Nil


def test_module_evaluates_in_current_scope(env):
    assert run(env, "(module (define m 1) (define k (+ m 1)))") is Nil
    assert run(env, "k") == 2


def test_special_form_names_win_over_bindings(env):
    env.define(Symbol("if"), 1)
    assert run(env, "(if #t 'a 'b)") == Symbol("a")


def test_primitives_can_be_redefined(env):
    run(env, "(define (+ a b) (* a b))")
    assert run(env, "(+ 3 4)") == 12


def test_applying_non_function(env):
    with pytest.raises(SlispSyntaxError, match="invalid first argument"):
        run(env, "(1 2 3)")
    with pytest.raises(SlispSyntaxError):
        run(env, '("f")')


def test_arguments_evaluated_left_to_right(env):
    run(env, "(define trace #nil)")
    run(env, "(define (note x) (set! trace (cons x trace)) x)")
    run(env, "(list (note 1) (note 2) (note 3))")
    assert run(env, "trace") == Cons.from_iterable([3, 2, 1])


def test_quoted_dotted_list(env):
    assert run(env, "'(1 . 2)") == Cons(1, 2)
    assert run(env, "'(1 2 . (3))") == Cons.from_iterable([1, 2, 3])


def test_evaluating_dotted_list_is_syntax_error(env):
    with pytest.raises(SlispSyntaxError):
        run(env, "(+ 1 . 2)")
