"""Read-eval-print loop over pluggable input and output callables."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from slisp.errors import SlispError, SlispIncompleteInput
from slisp.interpreter import Interpreter
from slisp.printer import to_string
from slisp.reader.parser import read

PROMPT = "repl> "
CONTINUATION_PROMPT = "...> "
EXIT_COMMAND = "exit"


def run_repl(
    interp: Interpreter,
    read_line: Callable[[str], str],
    write: Callable[[str], None],
    write_error: Callable[[str], None] | None = None,
) -> None:
    """
    Prompt with `read_line`, evaluate complete input, report through `write`.

    Lines are buffered while parentheses are open. `exit` on a fresh prompt or
    EOF (EOFError from `read_line`) ends the loop. Evaluation errors are
    reported and the loop continues with the environment intact.
    """
    write_error = write_error or write
    buffer = ""
    while True:
        try:
            line = read_line(CONTINUATION_PROMPT if buffer else PROMPT)
        except EOFError:
            return
        if not buffer and line.strip() == EXIT_COMMAND:
            return
        buffer = f"{buffer}\n{line}" if buffer else line
        if not buffer.strip():
            buffer = ""
            continue
        try:
            read(buffer)
        except SlispIncompleteInput:
            continue
        except SlispError as ex:
            write_error(f"{type(ex).__name__}: {ex}")
            buffer = ""
            continue

        source, buffer = buffer, ""
        try:
            rendered = to_string(interp.eval(source))
        except SlispError as ex:
            logger.debug("evaluation failed: {}", ex)
            write_error(f"{type(ex).__name__}: {ex}")
            continue
        write(f"out: {rendered}")
