"""Command-line interface for postfixer."""

from __future__ import annotations

import argparse
import io
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from postfixer.errors import TranslateError
from postfixer.limits import Limits

CONFIG_NAME = "postfixer.toml"
_LIMIT_KEYS = ("max_entries", "max_text", "max_lexeme")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    limits: Limits
    context: bool
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="postfixer",
        description="Translate infix arithmetic statements to postfix",
    )
    p.add_argument("input", help="Input file of ';'-terminated expressions")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--max-entries",
        type=int,
        default=None,
        metavar="N",
        help="Symbol table entry limit, keywords included (default: 100)",
    )
    p.add_argument(
        "--max-text",
        type=int,
        default=None,
        metavar="N",
        help="Total interned lexeme characters (default: 999)",
    )
    p.add_argument(
        "--max-lexeme",
        type=int,
        default=None,
        metavar="N",
        help="Longest identifier accepted (default: 128)",
    )
    p.add_argument(
        "--context", action="store_true", help="Show the offending source line on error"
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and retranslate")
    p.add_argument("--debug", action="store_true", help="Dump tokens and symbols to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_limits(config: dict[str, Any], args: argparse.Namespace) -> Limits:
    """Merge the [limits] config table and CLI flags into Limits.

    Precedence: defaults < config file < CLI flags.
    """
    values: dict[str, Any] = {}
    cfg_limits = config.get("limits")
    if cfg_limits is not None:
        if not isinstance(cfg_limits, dict):
            raise ValueError("[limits] must be a table")
        for k, v in cfg_limits.items():
            if k not in _LIMIT_KEYS:
                raise ValueError(f"unknown limit in config: {k}")
            values[k] = v
    for key in _LIMIT_KEYS:
        flag = getattr(args, key)
        if flag is not None:
            values[key] = flag
    return Limits(**values)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions."""
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        limits=resolve_limits(config, args),
        context=args.context,
        watch=args.watch,
        debug=args.debug,
    )


def translate_file(options: CliOptions, out: TextIO) -> int:
    """Read the input file and write its translation to *out*."""
    from postfixer.debug import dump_symbols, dump_tokens, scan_tokens
    from postfixer.parser import parse
    from postfixer.symtable import SymbolTable

    source = options.input_file.read_text(encoding="utf-8")
    table = SymbolTable.with_keywords(options.limits)
    try:
        return parse(io.StringIO(source), out, table)
    finally:
        if options.debug:
            dump_symbols(table)
            dump_tokens(*scan_tokens(source, options.limits))


def report(exc: TranslateError, options: CliOptions) -> str:
    """Render a translation error the way the options ask for."""
    if options.context:
        return exc.format(str(options.input_file))
    return str(exc)


def run(options: CliOptions) -> int:
    """Translate once. Returns exit code (0/1/2)."""
    try:
        if options.output_file:
            with open(options.output_file, "w", encoding="utf-8") as out:
                translate_file(options, out)
        else:
            translate_file(options, sys.stdout)
    except TranslateError as exc:
        print(report(exc, options), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, retranslate on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                if run(options) == 0:
                    sys.stdout.flush()
                    print(f"Translated {options.input_file}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    return run(options)
