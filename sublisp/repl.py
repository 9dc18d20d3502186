"""Read loop and interactive shell.

ReadLoop turns lines into results. A line that leaves brackets open is kept
and the next line is appended, until the accumulated text reads as a whole
expression. Shell drives a ReadLoop from a terminal using cmd as backend.
"""

from __future__ import annotations

import cmd
import logging
from typing import IO, Iterable

from sublisp import Value, config
from sublisp.errors import ExitRequested
from sublisp.interpreter import Interpreter
from sublisp.printer import render, colorize
from sublisp.reader.parser import parse, bad_expr, needs_more_input, EXTRA_BRACKETS
from sublisp.types.atom import Atom
from sublisp.types.bad_expr import is_error
from sublisp.types.equality import equal

logger = logging.getLogger(__name__)

EXIT_LINE = "exit"
EXIT_FORM = [Atom("exit")]


class ReadLoop:
    """Feeds lines to an Interpreter, handling multi-line forms and exit."""

    def __init__(self, interp: Interpreter):
        self.interp = interp
        self.lines: list[str] = []

    @property
    def pending(self) -> bool:
        """True while an unbalanced form is waiting for more lines."""
        return bool(self.lines)

    def reset(self) -> None:
        self.lines.clear()

    def feed(self, line: str) -> Value | None:
        """Add one line of input.

        Returns the evaluated result, an error value, or None when there is
        nothing to print yet (blank line, or a form still waiting for its
        closing brackets). Raises ExitRequested on `exit` or `(exit)`.
        """
        if not self.lines:
            if line.strip() == EXIT_LINE:
                raise ExitRequested()
            if not line.strip():
                return None

        self.lines.append(line)
        expr = parse("\n".join(self.lines))
        if needs_more_input(expr):
            logger.debug("continuation, %d line(s) pending", len(self.lines))
            return None
        self.lines.clear()

        if equal(expr, EXIT_FORM):
            raise ExitRequested()
        if is_error(expr):
            return expr
        return self.interp.evaluate(expr)


class Shell(cmd.Cmd):
    """sublisp interactive shell."""
    intro = "sublisp :: substitution lisp\nType 'exit' or press Ctrl-D to leave."

    def __init__(self, interp: Interpreter | None = None, color: bool | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.loop = ReadLoop(interp if interp is not None else Interpreter())
        self.color = config.use_color() if color is None else color
        self.primary_prompt = config.get_prompt()
        self.continuation_prompt = config.get_continuation_prompt()
        self.prompt = self.primary_prompt

    def cmdloop(self, intro=None):
        """Like cmd.Cmd.cmdloop, but end of input is reported out of band
        rather than as the line 'EOF', which is a valid atom here."""
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.onecmd(line)
        self.postloop()

    def read_line(self) -> str | None:
        """Next input line without its newline, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line):
        # Every line is source text; no cmd-style commands
        return self.default(line)

    def default(self, line):
        try:
            result = self.loop.feed(line)
        except ExitRequested:
            return True

        self.prompt = self.continuation_prompt if self.loop.pending else self.primary_prompt
        if result is not None:
            text = colorize(result) if self.color else render(result)
            self.stdout.write(text + "\n")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def run(self) -> None:
        """cmdloop that survives Ctrl-C by dropping the pending form."""
        while True:
            try:
                self.cmdloop()
                return
            except KeyboardInterrupt:
                self.stdout.write("\n")
                self.loop.reset()
                self.prompt = self.primary_prompt
                self.intro = None


def run_lines(interp: Interpreter, lines: Iterable[str], out: IO[str], color: bool = False) -> int:
    """Feed `lines` through a ReadLoop, writing each result to `out`.

    Returns 1 if input ended inside an unterminated form, else 0.
    """
    loop = ReadLoop(interp)
    show = colorize if color else render
    for line in lines:
        try:
            result = loop.feed(line.rstrip("\r\n"))
        except ExitRequested:
            return 0
        if result is not None:
            out.write(show(result) + "\n")
    if loop.pending:
        out.write(show(bad_expr(EXTRA_BRACKETS)) + "\n")
        return 1
    return 0
