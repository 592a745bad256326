"""Read-eval-print loop. Evaluation is the identity at this stage."""

import logging
import sys
from typing import Callable, TextIO

from . import printer, reader
from .config import ReplConfig
from .errors import EmptyInput, ReadError
from .types import AST

try:
    import readline
except ImportError:  # not built on every platform
    readline = None

log = logging.getLogger(__name__)

LineSource = Callable[[str], str | None]


def READ(line: str) -> AST:
    return reader.read(line)


def EVAL(ast: AST, env: dict | None = None) -> AST:
    return ast


def PRINT(ast: AST) -> str:
    return printer.pr_str(ast, print_readably=True)


def rep(line: str) -> str:
    return PRINT(EVAL(READ(line)))


def echo(line: str) -> str:
    return line


STEPS: dict[int, Callable[[str], str]] = {0: echo, 1: rep}


class Prompt:
    """Line source backed by input(), with history when readline is present."""

    def __init__(self, history_file: str | None = None):
        self.history_file = history_file
        if readline is not None and history_file:
            try:
                readline.read_history_file(history_file)
            except OSError as e:
                log.debug("no history loaded from %s: %s", history_file, e)

    def __call__(self, prompt: str) -> str | None:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None
        except OSError as e:
            log.warning("unexpected readline error: %s", e)
            return None
        self._remember(line)
        return line

    def _remember(self, line: str) -> None:
        if readline is None or not self.history_file:
            return
        # input() already adds the line to readline's in-memory history
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            log.debug("could not save history to %s: %s", self.history_file, e)


def main_loop(
    config: ReplConfig,
    line_source: LineSource | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    step = STEPS[config.step]
    if line_source is None:
        line_source = Prompt(config.history_file)

    while True:
        line = line_source(config.prompt)
        if line is None:
            break
        try:
            result = step(line)
        except EmptyInput:
            continue
        except ReadError as e:
            print(f"Error: {e}", file=err)
            continue
        print(result, file=out)
