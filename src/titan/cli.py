"""Command-line interface for the Titan scanner."""

from __future__ import annotations

import argparse
import json
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from titan.errors import ScanError
from titan.tokens import Token

FORMATS = ("kinds", "spans", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="titan",
        description="Scan a Titan source file and print its tokens",
    )
    p.add_argument("input", help="Input .titan file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: kinds)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover titan.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and rescan")
    p.add_argument("--debug", action="store_true", help="Dump token table to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "titan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.

    Raises:
        argparse.ArgumentTypeError: On an unknown output format in the config.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    output_format = "kinds"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r} "
                    f"(expected one of {', '.join(FORMATS)})"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        watch=args.watch,
        debug=args.debug,
    )


def render_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens in the requested output format."""
    if output_format == "json":
        records = [
            {
                "type": tok.type.tag,
                "category": tok.category.value,
                "value": tok.value,
                "start": tok.span.start,
                "end": tok.span.end,
            }
            for tok in tokens
        ]
        return json.dumps(records, indent=2) + "\n"
    if output_format == "spans":
        return "".join(
            f"{tok.span.start}:{tok.span.end} {tok.category.value} {tok.kind}\n" for tok in tokens
        )
    return "".join(f"{tok.kind}\n" for tok in tokens)


def scan_file(options: CliOptions) -> str:
    """Read and scan a Titan file, returning the rendered token listing."""
    from titan.debug import dump_tokens
    from titan.scanner import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, str(options.input_file))

    if options.debug:
        dump_tokens(tokens, source)

    return render_tokens(tokens, options.output_format)


def _write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, rescan on each modification."""
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
                try:
                    _write_output(options, scan_file(options))
                    print(f"Scanned {options.input_file}", file=sys.stderr)
                except ScanError as exc:
                    print(exc.format(str(options.input_file)), file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        text = scan_file(options)
    except ScanError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _write_output(options, text)
    return 0
