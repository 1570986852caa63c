"""Programmatic and CLI entry points for quoting and rebuilding source text."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .logging_utils import configure_logging
from .models import QuoteReport, QuoteRequest
from .quoting import Quoter, QuoterError, call_depth, call_size, encode_call, modifier_count
from .syntax import normalize_whitespace

logger = logging.getLogger(__name__)


def quote_source(
    source: str,
    *,
    use_default_formatting: bool = True,
    remove_redundant_modifying_calls: bool = True,
    indent: int | None = None,
    preprocessor_symbols: Iterable[str] = (),
) -> str:
    """Quote Curly source text into interchange text.

    Args:
        source: Curly source text.
        use_default_formatting: Drop whitespace trivia while quoting.
        remove_redundant_modifying_calls: Prune modifiers that do not change
            the rendering.
        indent: Pretty-print the interchange text with this indentation.
        preprocessor_symbols: Symbols defined for ``#if`` conditions.

    Returns:
        The interchange text of the quoted compilation unit.
    """

    request = QuoteRequest(
        source=source,
        use_default_formatting=use_default_formatting,
        remove_redundant_modifying_calls=remove_redundant_modifying_calls,
        indent=indent,
        preprocessor_symbols=list(preprocessor_symbols),
    )
    return Quoter(request.to_config()).quote(request.source)


def rebuild_source(interchange: str, *, normalize: bool = True) -> str:
    """Replay interchange text and render the rebuilt tree."""

    return Quoter().rebuild(interchange, normalize=normalize).to_full_string()


def build_report(request: QuoteRequest) -> QuoteReport:
    """Quote ``request.source`` and check that the interchange text rebuilds it."""

    quoter = Quoter(request.to_config())
    tree = quoter.parse(request.source)
    call = quoter.quote_call(tree)
    interchange = encode_call(call, indent=request.indent)

    rebuilt = quoter.rebuild(interchange)
    expected = normalize_whitespace(tree) if request.use_default_formatting else tree
    return QuoteReport(
        root_type=tree.type_name,
        interchange=interchange,
        call_count=call_size(call),
        modifier_count=modifier_count(call),
        depth=call_depth(call),
        round_trip=rebuilt.to_full_string() == expected.to_full_string(),
    )


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _add_quote_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Curly source file ('-' reads stdin)")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print with this indentation")
    parser.add_argument(
        "--keep-formatting",
        action="store_true",
        help="Quote whitespace and line breaks instead of relying on default formatting",
    )
    parser.add_argument(
        "--keep-redundant",
        action="store_true",
        help="Keep modifier calls that do not change the rendered text",
    )
    parser.add_argument(
        "--define",
        action="append",
        default=[],
        metavar="SYMBOL",
        help="Define a preprocessor symbol (repeatable)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syntax_quoter",
        description="Quote Curly source into builder calls and rebuild source from them.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument(
        "--trace", action="store_true", help="Prefix log records with timestamps and logger names"
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    quote = subcommands.add_parser("quote", help="Print the interchange text for a source file")
    _add_quote_options(quote)

    rebuild = subcommands.add_parser("rebuild", help="Print the source rebuilt from interchange text")
    rebuild.add_argument("file", help="Interchange text file ('-' reads stdin)")
    rebuild.add_argument(
        "--keep-formatting",
        action="store_true",
        help="Do not normalize whitespace of the rebuilt tree",
    )

    report = subcommands.add_parser("report", help="Print a JSON report about quoting a source file")
    _add_quote_options(report)
    return parser


def _request_from_args(args: argparse.Namespace, source: str) -> QuoteRequest:
    return QuoteRequest(
        source=source,
        use_default_formatting=not args.keep_formatting,
        remove_redundant_modifying_calls=not args.keep_redundant,
        indent=args.indent,
        preprocessor_symbols=args.define,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        text = _read_input(args.file)
        if args.command == "rebuild":
            output = rebuild_source(text, normalize=not args.keep_formatting)
        else:
            request = _request_from_args(args, text)
            if args.command == "quote":
                output = Quoter(request.to_config()).quote(request.source)
            else:
                output = build_report(request).model_dump_json(indent=2)
    except (QuoterError, ValidationError, OSError) as exc:
        logger.error("%s: %s", args.command, exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
