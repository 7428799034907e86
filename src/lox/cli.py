"""Command-line driver: run a script file or an interactive prompt."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from lox.errors import ErrorReporter

# sysexits.h codes
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

CONFIG_NAME = "lox.toml"
DEFAULT_PROMPT = "> "


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    encoding: str | None
    prompt: str
    context: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lox",
        description="Scan a Lox script, or start an interactive prompt",
    )
    p.add_argument("script", nargs="?", help="Script file (default: interactive prompt)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Source file encoding (default: platform default)",
    )
    p.add_argument("--prompt", default=None, help=f"Interactive prompt (default: {DEFAULT_PROMPT!r})")
    p.add_argument(
        "--context",
        action="store_true",
        default=None,
        help="Show the offending source line under each error",
    )
    p.add_argument("--debug", action="store_true", help="Dump the token table to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name)
    return value if isinstance(value, dict) else {}


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    search_dir = Path(".")
    if script is not None and script.parent.parts:
        search_dir = script.parent

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    encoding: str | None = None
    cfg_encoding = _section(config, "source").get("encoding")
    if isinstance(cfg_encoding, str):
        encoding = cfg_encoding
    if args.encoding is not None:
        encoding = args.encoding

    prompt = DEFAULT_PROMPT
    cfg_prompt = _section(config, "repl").get("prompt")
    if isinstance(cfg_prompt, str):
        prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    context = False
    cfg_context = _section(config, "diagnostics").get("context")
    if isinstance(cfg_context, bool):
        context = cfg_context
    if args.context is not None:
        context = args.context

    return CliOptions(
        script=script,
        encoding=encoding,
        prompt=prompt,
        context=context,
        debug=args.debug,
    )


def run_source(
    source: str,
    options: CliOptions,
    *,
    filename: str = "<script>",
    out: TextIO,
    err: TextIO,
) -> ErrorReporter:
    """Scan one unit of source, print its tokens, and report errors.

    Returns the reporter used for this run so the caller can decide on an
    exit status.
    """
    from lox.debug import dump_tokens
    from lox.scanner import Scanner

    reporter = ErrorReporter(None if options.context else err)
    tokens = Scanner(source, reporter).scan_tokens()

    if options.debug:
        dump_tokens(tokens, file=err)

    if options.context:
        for diagnostic in reporter.diagnostics:
            print(diagnostic.format(source, filename), file=err)

    for token in tokens:
        print(token, file=out)
    return reporter


def run_file(script: Path, options: CliOptions, out: TextIO, err: TextIO) -> int:
    """Scan a whole script file. Returns the process exit status."""
    try:
        source = script.read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"error: cannot read {script}: {exc}", file=err)
        return EX_NOINPUT

    reporter = run_source(source, options, filename=str(script), out=out, err=err)
    if reporter.had_error:
        return EX_DATAERR
    return EX_OK


def run_prompt(options: CliOptions, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    """Read-scan-print loop; each line gets a fresh reporter."""
    while True:
        out.write(options.prompt)
        out.flush()
        line = stdin.readline()
        if not line or line.rstrip("\r\n") == "exit()":
            print("Goodbye!", file=out)
            return EX_OK
        run_source(line.rstrip("\r\n"), options, out=out, err=err)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/64/65/66). Does not call sys.exit()."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse already printed usage or help
        return EX_USAGE if exc.code else EX_OK

    try:
        options = resolve_options(args)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return EX_USAGE

    if options.script is not None:
        return run_file(options.script, options, sys.stdout, sys.stderr)

    try:
        return run_prompt(options, sys.stdin, sys.stdout, sys.stderr)
    except KeyboardInterrupt:
        print(file=sys.stdout)
        return EX_OK


def _entry() -> None:
    sys.exit(main())
