import io
import sys

import pytest

from sublisp.__main__ import main
from sublisp.errors import ExitRequested
from sublisp.interpreter import Interpreter
from sublisp.printer import render
from sublisp.repl import ReadLoop, Shell, run_lines
from sublisp.types.atom import Atom


@pytest.fixture
def loop(interp):
    return ReadLoop(interp)


def test_continuation_until_balanced(loop):
    assert loop.feed("(+ 1") is None
    assert loop.pending
    assert loop.feed("   2") is None
    assert loop.feed("3)") == Atom("6")
    assert not loop.pending


def test_blank_line_outside_form_is_ignored(loop):
    assert loop.feed("") is None
    assert not loop.pending


def test_semantic_errors_are_results_not_continuations(loop):
    assert render(loop.feed("(nosuch)")) == "(badexpr unknown-operator-nosuch)"
    assert render(loop.feed("a)")) == "(badexpr failed-at-pos:3)"
    assert not loop.pending


@pytest.mark.parametrize("line", ["exit", "  exit ", "(exit)", "( exit )"])
def test_exit(loop, line):
    with pytest.raises(ExitRequested):
        loop.feed(line)


def test_exit_inside_pending_form_is_plain_text(loop):
    assert loop.feed("(quote (") is None
    assert render(loop.feed("exit))")) == "(exit)"


def test_reset_drops_pending_form(loop):
    loop.feed("(a")
    loop.reset()
    assert not loop.pending
    assert loop.feed("b") == Atom("b")


def _shell(source, color=False):
    out = io.StringIO()
    shell = Shell(Interpreter(), color=color, stdin=io.StringIO(source), stdout=out)
    shell.use_rawinput = False
    shell.cmdloop(intro="")
    return out.getvalue()


def test_shell_session():
    output = _shell("(+ 1 2)\n(def x 4)\n(* x\n x)\nexit\n(+ 5 5)\n")
    assert "> 3\n" in output
    assert "> ()\n" in output
    assert "> . 16\n" in output
    assert "10" not in output


def test_shell_stops_at_eof():
    output = _shell("(quote (a b))\n")
    assert output == "> (a b)\n> \n"


def test_shell_colors_errors():
    output = _shell("(nosuch)\n", color=True)
    assert "\033[91m(badexpr unknown-operator-nosuch)\033[0m" in output


def test_shell_prompts_from_environment(monkeypatch):
    monkeypatch.setenv("SUBLISP_PROMPT", "sub> ")
    output = _shell("a\n")
    assert "sub> a\n" in output


def test_run_lines():
    out = io.StringIO()
    lines = ["(def sq (lambda (n)\n", "  (* n n)))\n", "(sq 7)\n", "\n", "exit\n", "(sq 2)\n"]
    assert run_lines(Interpreter(), lines, out) == 0
    assert out.getvalue() == "()\n49\n"


def test_run_lines_reports_unterminated_form():
    out = io.StringIO()
    assert run_lines(Interpreter(), ["(+ 1"], out) == 1
    assert out.getvalue() == "(badexpr extra-brackets?)\n"


def test_main_eval(capsys):
    assert main(["-e", "(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_file(tmp_path, capsys):
    path = tmp_path / "prog.sl"
    path.write_text("(def double (lambda (x) (+ x x)))\n(double 21)\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "()\n42\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.sl")]) == 2
    assert "cannot open" in capsys.readouterr().err


def test_typed_eof_is_an_atom_not_end_of_input():
    output = _shell("EOF\n(+ 1 2)\n")
    assert "> EOF\n" in output
    assert "> 3\n" in output
    assert output.endswith("> \n")


def test_deeply_nested_result_does_not_end_session():
    depth = sys.getrecursionlimit() * 3
    deep = "(" * depth + ")" * depth
    out = io.StringIO()
    assert run_lines(Interpreter(), ["(quote " + deep + ")", "(+ 1 2)"], out) == 0
    assert out.getvalue() == deep + "\n3\n"


def test_shell_prints_deeply_nested_result_in_color():
    depth = sys.getrecursionlimit() * 3
    deep = "(" * depth + "#t" + ")" * depth
    output = _shell("(quote " + deep + ")\n(+ 1 2)\n", color=True)
    assert "(" * depth + "\033[96m#t\033[0m" + ")" * depth + "\n" in output
    assert "> 3\n" in output
