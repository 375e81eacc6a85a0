from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from lis import LispValue
from lis.builtins import register
from lis.errors import LisError
from lis.evaluation.evaluator import evaluate
from lis.printer import render
from lis.reader.parser import parse_all
from lis.types.environment import Environment
from lis.types.nil import Empty

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lis code against one persistent environment,
    seeded with the primitive library, so definitions survive across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of lis code as prelude, discarding the results."""
        for expr in parse_all(code):
            evaluate(expr, self.env)
        logger.debug("prelude evaluated, environment depth %d", self.env.depth)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last result (Empty if none)."""
        result: LispValue = Empty
        for expr in parse_all(code):
            logger.debug("evaluating %s", expr)
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.debug("loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))

    def eval_line(self, line: str, out: TextIO) -> None:
        """Evaluate one line of input, echoing `<input> -> <result>` per expression.

        Errors are reported on `out` and do not propagate, so a bad line never
        ends the session.
        """
        try:
            for expr in parse_all(line):
                result = evaluate(expr, self.env)
                out.write(f"{render(expr)} -> {render(result)}\n")
        except LisError as err:
            logger.debug("error evaluating %r: %s", line, type(err).__name__)
            out.write(f"error: {err.kind}: {err}\n")

    def repl(
        self,
        prompt: str = "lis> ",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout

        stdout.write(prompt)
        stdout.flush()
        for line in stdin:
            if line.strip():
                self.eval_line(line, stdout)
            stdout.write(prompt)
            stdout.flush()
        stdout.write("\n")
