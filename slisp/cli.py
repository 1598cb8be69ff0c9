from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from slisp.errors import SlispError
from slisp.interpreter import Interpreter
from slisp.logging_config import setup_logging
from slisp.printer import to_string
from slisp.repl import run_repl

app = typer.Typer(help="slisp: a small Lisp interpreter", no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def global_options(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level for diagnostics on stderr (also via SLISP_LOG_LEVEL)",
    ),
):
    """
    Evaluate Lisp source from files, the command line, or an interactive REPL.
    """
    setup_logging(log_level)


def _make_interpreter(no_prelude: bool) -> Interpreter:
    try:
        return Interpreter(prelude=None if no_prelude else 'auto')
    except (SlispError, FileNotFoundError) as ex:
        err_console.print(f"[red]Error loading prelude:[/red] {ex}", markup=True)
        raise typer.Exit(code=1)


def _print_result(fn, *args) -> None:
    try:
        result = fn(*args)
    except SlispError as ex:
        err_console.print(f"{type(ex).__name__}: {ex}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)
    console.print(to_string(result), markup=False, highlight=False, soft_wrap=True)


@app.command()
def run(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Source file to evaluate"),
    no_prelude: bool = typer.Option(False, "--no-prelude", help="Start without the standard prelude"),
):
    """Evaluate FILE and print the value of its last form."""
    interp = _make_interpreter(no_prelude)
    _print_result(interp.eval_file, file)


@app.command("eval")
def eval_command(
    code: str = typer.Argument(..., help="Source text to evaluate"),
    no_prelude: bool = typer.Option(False, "--no-prelude", help="Start without the standard prelude"),
):
    """Evaluate CODE and print the value of its last form."""
    interp = _make_interpreter(no_prelude)
    _print_result(interp.eval, code)


@app.command()
def repl(
    load: Optional[Path] = typer.Option(None, "--load", exists=True, dir_okay=False, help="File to evaluate before the first prompt"),
    no_prelude: bool = typer.Option(False, "--no-prelude", help="Start without the standard prelude"),
):
    """Start an interactive read-eval-print loop. Type `exit` to leave."""
    interp = _make_interpreter(no_prelude)
    if load is not None:
        try:
            interp.eval_file(load)
        except SlispError as ex:
            err_console.print(f"{type(ex).__name__}: {ex}", markup=False, highlight=False, soft_wrap=True)
            raise typer.Exit(code=1)

    run_repl(
        interp,
        read_line=lambda prompt: console.input(prompt, markup=False),
        write=lambda text: console.print(text, markup=False, highlight=False, soft_wrap=True),
        write_error=lambda text: err_console.print(text, markup=False, highlight=False, soft_wrap=True),
    )
