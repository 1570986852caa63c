"""Regression tests for the runner API, request models and CLI."""

from __future__ import annotations

import io
import json
import logging

import pytest
from pydantic import ValidationError

from syntax_quoter import QuoteRequest, build_report, quote_source, rebuild_source
from syntax_quoter.logging_utils import configure_logging
from syntax_quoter.runner import main

CLASS_INTERCHANGE = (
    '{"f:CompilationUnit":null,"b":[{"w:Members":['
    '{"f:SingletonList<MemberDeclarationSyntax>":[{"f:ClassDeclaration":["C"]}]}]}]}'
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _write(tmp_path, name: str, text: str) -> str:
    """Write ``text`` under ``tmp_path`` and return the path as a string."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# Programmatic API
# ---------------------------------------------------------------------------


def test_quote_source_compact() -> None:
    assert quote_source("class C { }") == CLASS_INTERCHANGE


def test_quote_source_indented_decodes_to_same_call() -> None:
    pretty = quote_source("class C { }", indent=4)
    assert "\n    " in pretty
    assert json.loads(pretty) == json.loads(CLASS_INTERCHANGE)


def test_rebuild_source_normalizes_by_default() -> None:
    assert rebuild_source(CLASS_INTERCHANGE) == "class C\n{\n}"
    assert rebuild_source(CLASS_INTERCHANGE, normalize=False) == "classC{}"


def test_keep_formatting_round_trip() -> None:
    source = "int  F( int a )\n{\n  return a ;  // done\n}\n"
    interchange = quote_source(source, use_default_formatting=False)
    assert rebuild_source(interchange, normalize=False) == source


def test_build_report_counts_calls() -> None:
    report = build_report(QuoteRequest(source="class C { }"))
    assert report.root_type == "CompilationUnit"
    assert report.interchange == CLASS_INTERCHANGE
    assert report.call_count == 3
    assert report.depth == 3
    assert report.modifier_count == 1
    assert report.round_trip


def test_build_report_keep_formatting_round_trip() -> None:
    request = QuoteRequest(
        source="x = a +  b; /* c */\n",
        use_default_formatting=False,
        remove_redundant_modifying_calls=False,
    )
    report = build_report(request)
    assert report.round_trip
    assert report.modifier_count > 0


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------


def test_request_symbols_are_stripped_and_deduplicated() -> None:
    request = QuoteRequest(source="", preprocessor_symbols=[" DEBUG", "TRACE", "DEBUG "])
    assert request.preprocessor_symbols == ["DEBUG", "TRACE"]
    assert request.to_config().preprocessor_symbols == ["DEBUG", "TRACE"]


def test_request_rejects_bad_symbol() -> None:
    with pytest.raises(ValidationError, match="Invalid preprocessor symbol"):
        QuoteRequest(source="", preprocessor_symbols=["1x"])


def test_request_rejects_large_indent() -> None:
    with pytest.raises(ValidationError):
        QuoteRequest(source="", indent=17)


def test_request_config_defaults() -> None:
    config = QuoteRequest(source="x = 1;").to_config()
    assert config.use_default_formatting
    assert config.remove_redundant_modifying_calls
    assert config.indent is None


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def test_main_quote(tmp_path, capsys) -> None:
    path = _write(tmp_path, "c.curly", "class C { }")
    assert main(["quote", path]) == 0
    assert capsys.readouterr().out.strip() == CLASS_INTERCHANGE


def test_main_quote_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("class C { }"))
    assert main(["quote", "-"]) == 0
    assert capsys.readouterr().out.strip() == CLASS_INTERCHANGE


def test_main_quote_with_defines(tmp_path, capsys) -> None:
    path = _write(tmp_path, "d.curly", "#if DEBUG\nlog();\n#endif\n")
    assert main(["quote", "--define", "DEBUG", path]) == 0
    assert "f:DisabledText" not in capsys.readouterr().out


def test_main_rebuild(tmp_path, capsys) -> None:
    path = _write(tmp_path, "c.json", CLASS_INTERCHANGE)
    assert main(["rebuild", path]) == 0
    assert capsys.readouterr().out == "class C\n{\n}\n"


def test_main_report(tmp_path, capsys) -> None:
    path = _write(tmp_path, "c.curly", "class C { }")
    assert main(["report", "--indent", "2", path]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["root_type"] == "CompilationUnit"
    assert payload["round_trip"] is True
    assert payload["interchange"].startswith('{\n  "f:CompilationUnit"')


def test_main_missing_file_returns_error(tmp_path, capsys) -> None:
    assert main(["quote", str(tmp_path / "missing.curly")]) == 1
    assert capsys.readouterr().out == ""


def test_main_malformed_interchange_returns_error(tmp_path, capsys) -> None:
    path = _write(tmp_path, "bad.json", '{"Block":null}')
    assert main(["rebuild", path]) == 1
    assert "not a builder" in capsys.readouterr().err


def test_main_invalid_define_returns_error(tmp_path) -> None:
    path = _write(tmp_path, "c.curly", "x = 1;")
    assert main(["quote", "--define", "not a symbol", path]) == 1


def test_main_writes_log_file(tmp_path) -> None:
    source = _write(tmp_path, "c.curly", "class C { }")
    log_file = tmp_path / "run.log"
    assert main(["--log-level", "DEBUG", "--log-file", str(log_file), "quote", source]) == 0
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Quoted CompilationUnit" in log_file.read_text(encoding="utf-8")


def test_configure_logging_accepts_names_and_numbers() -> None:
    assert configure_logging("debug").level == logging.DEBUG
    assert configure_logging(logging.ERROR).level == logging.ERROR
    assert configure_logging("nonsense").level == logging.INFO


def test_main_trace_adds_timestamps_and_logger_names(tmp_path) -> None:
    source = _write(tmp_path, "c.curly", "class C { }")
    log_file = tmp_path / "trace.log"
    argv = ["--trace", "--log-level", "DEBUG", "--log-file", str(log_file), "quote", source]
    assert main(argv) == 0
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "[DEBUG] [syntax_quoter.quoting.quoter] Quoted CompilationUnit" in text
    assert text.startswith("[")


def test_main_rebuild_rejects_deep_nesting(tmp_path, capsys) -> None:
    path = _write(tmp_path, "deep.json", '{"f:Block":[' * 100000)
    assert main(["rebuild", path]) == 1
    assert "nested too deeply" in capsys.readouterr().err
