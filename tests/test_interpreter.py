import sys

import pytest

from slisp.config import get_log_level, get_recursion_limit
from slisp.errors import SlispRuntimeError, SlispSyntaxError, SlispUnboundSymbol
from slisp.interpreter import Interpreter
from slisp.printer import to_string
from slisp.reader.parser import read
from slisp.types.nil import Nil


def test_eval_returns_last_form(bare_interp):
    assert bare_interp.eval("(define x 2) (define y 3) (* x y)") == 6


def test_eval_empty_source_is_nil(bare_interp):
    assert bare_interp.eval("") is Nil
    assert bare_interp.eval("; nothing here") is Nil


def test_definitions_persist_between_calls(bare_interp):
    bare_interp.eval("(define greeting \"hi\")")
    assert bare_interp.eval("greeting") == "hi"


def test_error_leaves_earlier_definitions_in_place(bare_interp):
    with pytest.raises(SlispUnboundSymbol):
        bare_interp.eval("(define kept 1) (undefined)")
    assert bare_interp.eval("kept") == 1


def test_syntax_error_surfaces(bare_interp):
    with pytest.raises(SlispSyntaxError):
        bare_interp.eval(")")


def test_custom_eval_fn():
    seen = []

    def fake_eval(expr, env):
        seen.append(expr)
        return "ok"

    itp = Interpreter(eval_fn=fake_eval, prelude=None)
    assert itp.eval("1 2") == "ok"
    assert seen == [1, 2]


def test_eval_file(bare_interp, tmp_path):
    src = tmp_path / "prog.lisp"
    src.write_text("(define (twice x) (* 2 x))\n(twice 21)\n", encoding="utf-8")
    assert bare_interp.eval_file(src) == 42
    assert bare_interp.eval_file(str(src)) == 42


def test_runaway_recursion_is_a_runtime_error(bare_interp):
    bare_interp.eval("(define (forever n) (+ 1 (forever n)))")
    with pytest.raises(SlispRuntimeError, match="recursion"):
        bare_interp.eval("(forever 1)")


def test_interpreter_raises_recursion_limit(monkeypatch):
    monkeypatch.setenv("SLISP_RECURSION_LIMIT", "54321")
    original = sys.getrecursionlimit()
    try:
        Interpreter(prelude=None)
        assert sys.getrecursionlimit() >= 54321
    finally:
        sys.setrecursionlimit(original)


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 20000), ("", 20000), ("50000", 50000), ("10", 1000), ("lots", 20000)],
)
def test_recursion_limit_config(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("SLISP_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("SLISP_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == expected


def test_log_level_config(monkeypatch):
    monkeypatch.delenv("SLISP_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"
    monkeypatch.setenv("SLISP_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_long_integers_read_and_print(bare_interp):
    digits = "1" + "0" * 5000
    assert bare_interp.eval(digits) == 10 ** 5000
    assert to_string(bare_interp.eval("(pow 10 5000)")) == digits


def test_integer_digit_limit_surfaces_as_slisp_errors(bare_interp):
    big = bare_interp.eval("(pow 10 5000)")
    original = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        with pytest.raises(SlispSyntaxError):
            read("1" + "0" * 5000)
        with pytest.raises(SlispRuntimeError):
            to_string(big)
    finally:
        sys.set_int_max_str_digits(original)
