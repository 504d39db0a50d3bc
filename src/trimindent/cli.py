"""Command-line interface for trimindent."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from trimindent.errors import ConfigError, InputError

STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    in_place: bool
    check: bool
    final_newline: bool
    debug: bool

    @property
    def display_name(self) -> str:
        return str(self.input_file) if self.input_file is not None else "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="trimindent",
        description="Remove the common leading indentation from text",
    )
    p.add_argument("input", nargs="?", default=STDIN, help="Input file (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("-i", "--in-place", action="store_true", help="Rewrite the input file")
    p.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the input would be reindented; write nothing",
    )
    p.add_argument(
        "--final-newline",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="End non-empty output with a newline (default: off)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover trimindent.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump line analysis to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict when the default is absent."""
    path = config_path if config_path is not None else input_dir / "trimindent.toml"

    if not path.is_file():
        if config_path is not None:
            raise ConfigError("config file not found", str(path))
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", str(path)) from None
    except OSError as exc:
        raise ConfigError(f"cannot read config: {exc.strerror}", str(path)) from None


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = None if args.input == STDIN else Path(args.input)
    if args.in_place and input_file is None:
        raise argparse.ArgumentTypeError("--in-place requires an input file")
    if args.in_place and args.output:
        raise argparse.ArgumentTypeError("--in-place and --output are mutually exclusive")

    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    config_name = str(config_path or input_dir / "trimindent.toml")

    final_newline = False
    cfg_output = config.get("output", {})
    if not isinstance(cfg_output, dict):
        raise ConfigError("[output] must be a table", config_name)
    if "final_newline" in cfg_output:
        cfg_final = cfg_output["final_newline"]
        if not isinstance(cfg_final, bool):
            raise ConfigError("output.final_newline must be a boolean", config_name)
        final_newline = cfg_final
    if args.final_newline is not None:
        final_newline = args.final_newline

    return CliOptions(
        input_file=input_file,
        output_file=Path(args.output) if args.output else None,
        in_place=args.in_place,
        check=args.check,
        final_newline=final_newline,
        debug=args.debug,
    )


def read_input(options: CliOptions) -> str:
    """Read the input text, from the file or stdin."""
    # Raw bytes and newline="" keep CR and CRLF intact for the normalizer
    try:
        if options.input_file is None:
            return sys.stdin.buffer.read().decode("utf-8")
        with open(options.input_file, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise InputError("no such file", options.display_name) from None
    except UnicodeDecodeError:
        raise InputError("input is not valid UTF-8", options.display_name) from None
    except OSError as exc:
        raise InputError(f"cannot read input: {exc.strerror}", options.display_name) from None


def reindent(source: str, options: CliOptions) -> str:
    """Normalize *source* and apply output options."""
    from trimindent.debug import dump_analysis
    from trimindent.strings import normalize_indent

    if options.debug:
        dump_analysis(source)

    text = normalize_indent(source)
    if options.final_newline and text:
        text += "\n"
    return text


def write_output(text: str, options: CliOptions) -> None:
    target = options.input_file if options.in_place else options.output_file
    if target is None:
        sys.stdout.write(text)
        return
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        source = read_input(options)
    except InputError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    text = reindent(source, options)

    if options.check:
        if text != source:
            print(f"would reindent {options.display_name}", file=sys.stderr)
            return 1
        return 0

    write_output(text, options)
    return 0
