import logging

import pytest

import fatlisp
from fatlisp import FatlispError, Interpreter, run
from fatlisp.config import get_default_source_name, get_log_level
from fatlisp.errors import (
    FatlispLexError,
    FatlispParseError,
    FatlispRecursionError,
    FatlispResolutionError,
    FatlispSyntaxError,
)
from fatlisp.types.callables import Function
from fatlisp.types.value import Identifier, Int, List, Nil, String


def test_public_api():
    assert set(fatlisp.__all__) >= {"FatlispError", "Interpreter", "run", "parse"}


def test_run_returns_all_results():
    assert run("(def double (fn (x) (+ x x))) (double 21)") == [
        Identifier("double"),
        Int(42),
    ]


def test_empty_program():
    assert run("") == []
    assert run("   \n\t ") == []


def test_definitions_persist_across_eval(interp):
    interp.eval("(def counter 1)")
    assert interp.eval("(+ counter 1)") == [Int(2)]


def test_interpreters_are_independent():
    first, second = Interpreter(), Interpreter()
    first.eval("(def + 1)")
    assert second.eval("(+ 1 2)") == [Int(3)]
    assert first.eval("+") == [Int(1)]


def test_redefining_builtin_does_not_leak_into_new_interpreter():
    run("(def puts 0)")
    assert isinstance(run("puts")[0], Function)


def test_parse_only(interp):
    root = interp.parse("(a 'b) 1")
    assert root.items == [
        List([Identifier("a"), List([Identifier("quote"), Identifier("b")])]),
        Int(1),
    ]


def test_errors_use_source_name(interp):
    with pytest.raises(FatlispResolutionError) as excinfo:
        interp.eval("\n  (missing)", "script.fl")
    assert str(excinfo.value) == "script.fl:2:4 unable to resolve 'missing'"


def test_syntax_errors_evaluate_nothing(interp, out):
    with pytest.raises(FatlispSyntaxError) as excinfo:
        interp.eval('(puts "side effect") (')
    assert isinstance(excinfo.value, FatlispLexError)
    assert out.getvalue() == ""
    with pytest.raises(FatlispParseError):
        interp.eval("(def x 1) 1.2.3")
    assert interp.env.find("x") is None


def test_halt_on_first_error_keeps_results(interp):
    with pytest.raises(FatlispError) as excinfo:
        interp.eval('(def a 1) "ok" (a) (def b 2)')
    assert excinfo.value.results == [Identifier("a"), String("ok")]
    assert interp.env.find("b") is None
    assert interp.eval("a") == [Int(1)]


def test_error_carries_origin(interp):
    with pytest.raises(FatlispError) as excinfo:
        interp.eval("(+ 1 nope)")
    err = excinfo.value
    assert err.message == "unable to resolve 'nope'"
    assert err.origin.text == "nope"
    assert err.origin.where() == "<string>:1:6"


def test_deep_recursion_reported(interp):
    with pytest.raises(FatlispRecursionError, match="maximum recursion depth exceeded"):
        interp.eval("(def down (fn (n) (down (+ n 1)))) (down 0)")
    assert interp.eval("(+ 1 2)") == [Int(3)]


def test_nil_results(interp):
    assert interp.eval("nil (if false 1)") == [Nil(), Nil()]


# -------------------------------
# Configuration and logging
# -------------------------------
def test_source_name_from_environment(monkeypatch):
    monkeypatch.setenv("FATLISP_SOURCE_NAME", "repl")
    assert get_default_source_name() == "repl"
    with pytest.raises(FatlispError) as excinfo:
        run("(nope)")
    assert str(excinfo.value) == "repl:1:2 unable to resolve 'nope'"


def test_source_name_default(monkeypatch):
    monkeypatch.delenv("FATLISP_SOURCE_NAME", raising=False)
    assert get_default_source_name() == "<string>"
    monkeypatch.setenv("FATLISP_SOURCE_NAME", "   ")
    assert get_default_source_name() == "<string>"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("bogus", logging.WARNING),
    ],
)
def test_log_level_from_environment(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("FATLISP_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("FATLISP_LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_log_level_applied_to_package_logger(monkeypatch):
    logger = logging.getLogger("fatlisp")
    previous = logger.level
    monkeypatch.setenv("FATLISP_LOG_LEVEL", "ERROR")
    try:
        Interpreter()
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(previous)


def test_debug_logging_of_evaluation(caplog):
    with caplog.at_level(logging.DEBUG, logger="fatlisp"):
        run("(+ 1 2)")
    messages = [r.getMessage() for r in caplog.records]
    assert "evaluating top-level form 0: (+ 1 2)" in messages


def test_error_columns_count_bytes(interp):
    with pytest.raises(FatlispResolutionError) as excinfo:
        interp.eval('(puts "ü" nope)')
    assert str(excinfo.value) == "<string>:1:12 unable to resolve 'nope'"
