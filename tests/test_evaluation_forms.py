import pytest

from minilisp.errors import (
    MiniLispArityError,
    MiniLispInvalidSymbol,
    MiniLispTypeError,
    MiniLispUnboundSymbol,
)
from minilisp.evaluation.evaluator import evaluate as evaluate_expr
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol

# ------------------ Self-evaluating values and symbols ------------------

def test_self_evaluating_literals(env):
    assert evaluate_expr(1, env) == 1
    assert evaluate_expr(True, env) is True
    assert evaluate_expr(Nil, env) is Nil
    assert evaluate_expr([], env) is Nil


def test_lambda_value_evaluates_to_itself(env):
    lam = Lambda([Symbol("x")], [Symbol("+"), Symbol("x"), 1], env)
    assert evaluate_expr(lam, env) is lam


@pytest.mark.parametrize("name,expected", [("NIL", Nil), ("T", True), ("F", False)])
def test_reserved_symbols(run, name, expected):
    assert run(f"(progn {name})") is expected


def test_reserved_symbols_ignore_bindings(env):
    env.define(Symbol("T"), 42)
    assert evaluate_expr(Symbol("T"), env) is True


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate_expr(Symbol("x"), env) == 42
    with pytest.raises(MiniLispUnboundSymbol, match="z"):
        evaluate_expr(Symbol("z"), env)


def test_data_list_evaluates_elements_and_drops_nil(run):
    assert run("(1 (+ 1 1) NIL 3)") == [1, 2, 3]
    assert run("()") is Nil
    assert run("((quote x) (if F 1 NIL))") == [Symbol("x")]

# ------------------ define ------------------

def test_define_binds_and_returns_nil(run, env):
    assert run("(define x 5)") is Nil
    assert env.lookup(Symbol("x")) == 5


def test_define_evaluates_value(run, env):
    run("(define x (* 6 7))")
    assert env.lookup(Symbol("x")) == 42


def test_define_overwrites(run):
    assert run("(progn (define x 1) (define x 2) x)") == 2


@pytest.mark.parametrize("source", ["(define x)", "(define x 1 2)", "(define)"])
def test_define_arity(run, source):
    with pytest.raises(MiniLispArityError):
        run(source)


def test_define_requires_symbol(run):
    with pytest.raises(MiniLispInvalidSymbol):
        run("(define 5 6)")

# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if T 1 2)", 1),
        ("(if F 1 2)", 2),
        ("(if (< 1 2) 10 20)", 10),
        ("(if (atom (quote (1))) 10 20)", 20),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_does_not_evaluate_untaken_branch(run, env):
    assert run("(if T 1 (define x 5))") == 1
    assert Symbol("x") not in env
    assert run("(if F (/ 1 0) 2)") == 2


@pytest.mark.parametrize("source", ["(if 1 2 3)", "(if NIL 1 2)", "(if (quote (T)) 1 2)"])
def test_if_condition_must_be_boolean(run, source):
    with pytest.raises(MiniLispTypeError, match="Condition must be a boolean"):
        run(source)


@pytest.mark.parametrize("source", ["(if T 1)", "(if T 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(MiniLispArityError):
        run(source)

# ------------------ lambda ------------------

def test_lambda_builds_function_value(run, env):
    lam = run("(lambda (x y) (+ x y))")
    assert isinstance(lam, Lambda)
    assert lam.formals == [Symbol("x"), Symbol("y")]
    assert lam.body == [Symbol("+"), Symbol("x"), Symbol("y")]
    assert lam.env is env


def test_lambda_body_is_not_evaluated(run):
    lam = run("(lambda () (undefined-function 1))")
    assert lam.arity == 0


@pytest.mark.parametrize(
    "source,message",
    [
        ("(lambda (x 1) (x))", "not a symbol"),
        ("(lambda x (x))", "parameter list is not a list"),
        ("(lambda (x) x)", "body is not a list"),
        ("(lambda (x) 5)", "body is not a list"),
    ]
)
def test_malformed_lambda(run, source, message):
    with pytest.raises(MiniLispTypeError, match=message):
        run(source)


@pytest.mark.parametrize("source", ["(lambda (x))", "(lambda)", "(lambda (x) (x) (x))"])
def test_lambda_arity(run, source):
    with pytest.raises(MiniLispArityError):
        run(source)

# ------------------ atom ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(atom NIL)", True),
        ("(atom 1)", True),
        ("(atom T)", True),
        ("(atom F)", True),
        ("(atom (quote x))", True),
        ("(atom (quote (1 2)))", False),
        ("(atom (quote ()))", False),
        ("(atom (lambda (x) (+ x 1)))", False),
    ]
)
def test_atom(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("source", ["(atom)", "(atom 1 2)"])
def test_atom_arity(run, source):
    with pytest.raises(MiniLispArityError):
        run(source)

# ------------------ cons / car / cdr ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 (quote (2 3)))", [1, 2, 3]),
        ("(cons 1 NIL)", [1]),
        ("(cons 1 (quote ()))", [1]),
        ("(cons (quote (1)) (quote (2)))", [[1], 2]),
        ("(cons (quote a) (cons 2 NIL))", [Symbol("a"), 2]),
    ]
)
def test_cons(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(cons 1 2)", "(cons 1 T)", "(cons 1 (quote x))"])
def test_cons_requires_list_or_nil(run, source):
    with pytest.raises(MiniLispTypeError, match="list or NIL"):
        run(source)


def test_cons_does_not_mutate_its_argument(run, env):
    run("(define xs (quote (2 3)))")
    assert run("(cons 1 xs)") == [1, 2, 3]
    assert env.lookup(Symbol("xs")) == [2, 3]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (quote (1 2 3)))", 1),
        ("(car (quote ((1) 2)))", [1]),
        ("(car (cons 5 NIL))", 5),
    ]
)
def test_car(run, source, expected):
    assert run(source) == expected


def test_car_returns_element_without_evaluating_it(run):
    # x is unbound: evaluating the element again would fail
    assert run("(car (quote (x y)))") == Symbol("x")


@pytest.mark.parametrize("source", ["(car 5)", "(car NIL)", "(car (quote ()))"])
def test_car_requires_non_empty_list(run, source):
    with pytest.raises(MiniLispTypeError, match="Invalid car"):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cdr (quote (1 2 3)))", [2, 3]),
        ("(cdr (quote (1)))", Nil),
        ("(cdr (quote ()))", Nil),
    ]
)
def test_cdr(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(cdr 1)", "(cdr NIL)"])
def test_cdr_requires_list(run, source):
    with pytest.raises(MiniLispTypeError, match="Invalid cdr"):
        run(source)


@pytest.mark.parametrize("source", ["(car)", "(cdr 1 2)", "(cons 1)"])
def test_list_form_arity(run, source):
    with pytest.raises(MiniLispArityError):
        run(source)

# ------------------ progn ------------------

def test_progn_returns_last_value(run):
    assert run("(progn (define a 1) (define b 2) (+ a b))") == 3


def test_empty_progn_is_nil(run):
    assert run("(progn)") is Nil


def test_progn_stops_at_first_error_without_rollback(run, env):
    with pytest.raises(MiniLispTypeError):
        run("(progn (define a 1) (car 5) (define b 2))")
    assert env.lookup(Symbol("a")) == 1
    assert Symbol("b") not in env


def test_lambda_equality_includes_closed_over_frame(run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    one = run("(make-adder 1)")
    five = run("(make-adder 5)")
    assert one != five
    assert one == one
    lam = run("(lambda (x) (+ x 1))")
    assert lam == run("(lambda (x) (+ x 1))")
