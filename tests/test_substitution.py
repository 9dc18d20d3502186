from sublisp.evaluation.substitute import substitute, as_literal
from sublisp.printer import render
from sublisp.reader.parser import parse
from sublisp.types.atom import Atom


def subst(source, defs, **mapping):
    values = {name: parse(text) for name, text in mapping.items()}
    return render(substitute(parse(source), values, defs))


def test_replaces_free_occurrences(defs):
    assert subst("(+ x (* x y))", defs, x="3") == "(+ 3 (* 3 y))"


def test_leaves_quoted_data_alone(defs):
    assert subst("(cons x (quote (x y)))", defs, x="1") == "(cons 1 (quote (x y)))"


def test_inner_lambda_shadows_parameter(defs):
    assert subst("(f x (lambda (x) x))", defs, x="1") == "(f 1 (lambda (x) x))"


def test_inner_lambda_sees_other_parameters(defs):
    assert subst("(lambda (y) (+ x y))", defs, x="1", y="2") == "(lambda (y) (+ 1 y))"


def test_list_values_are_quoted(defs):
    assert subst("(head xs)", defs, xs="(a b)") == "(head (quote (a b)))"


def test_lambda_and_empty_values_inserted_bare(defs):
    assert subst("(f 1)", defs, f="(lambda (n) n)") == "((lambda (n) n) 1)"
    assert subst("(g e)", defs, e="()") == "(g ())"


def test_bound_atom_values_are_quoted(defs):
    defs.define(Atom("y"), Atom("7"))
    assert subst("(f v)", defs, v="y") == "(f (quote y))"
    assert subst("(f v)", defs, v="z") == "(f z)"


def test_inserted_values_are_not_rewritten_again(defs):
    assert subst("(f x y)", defs, x="y", y="x") == "(f y x)"


def test_empty_mapping_returns_body_unchanged(defs):
    body = parse("(a b)")
    assert substitute(body, {}, defs) is body


def test_as_literal_round_trips_through_evaluation(interp):
    value = parse("(nosuch 1)")
    assert interp.evaluate(as_literal(value, interp.defs)) == value


def test_shadowing_during_application(run):
    assert run("((lambda (x) ((lambda (x) x) 2)) 1)") == "2"


def test_quoted_parameter_name_stays_literal(run):
    assert run("((lambda (x) (quote x)) 5)") == "x"


def test_list_arguments_are_not_evaluated_twice(run):
    assert run("((lambda (xs) (head xs)) (quote (a b)))") == "a"


def test_bound_atom_argument_is_not_looked_up_twice(run):
    assert run("(def y 7)", "((lambda (v) v) (quote y))") == "y"


def test_def_inside_lambda_writes_global_table(run):
    assert run("((lambda (v) (def g v)) 4)", "g") == "4"
