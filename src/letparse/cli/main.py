# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the LetParse command-line interface."""

import argparse
import sys
from pathlib import Path

from letparse.compiler.artifact import serialize, write_artifact
from letparse.compiler.parser import ParseError, parse
from letparse.compiler.scanner import UnrecognizedCharacterError, tokenize
from letparse.config import ConfigError, LetParseConfig, find_config, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the LetParse CLI."""
    parser = argparse.ArgumentParser(
        prog="letparse",
        description="LetParse: scanner and parser for let/function declarations",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of a source file",
        description="Scan a source file and print one token per line.",
    )
    _add_common_arguments(tokens_parser)

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Print the syntax tree of a source file as JSON",
        description="Parse a source file and emit the syntax tree as a JSON artifact.",
    )
    _add_common_arguments(parse_parser)
    parse_parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="JSON indentation width (default: from config, otherwise 2)",
    )
    parse_parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit compact JSON without indentation",
    )
    parse_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the artifact to this path instead of standard output",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _non_negative_int(text: str) -> int:
    """argparse type for indentation widths, mirroring the config file rule."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("file", help="Source file to read")
    subparser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on characters the scanner does not recognize",
    )
    subparser.add_argument(
        "--config",
        default=None,
        help="Path to a config file (default: .letparse.yaml next to FILE)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "tokens":
        return _cmd_tokens(args)
    if args.command == "parse":
        return _cmd_parse(args)
    return 0


def _load_inputs(args: argparse.Namespace) -> tuple[str, LetParseConfig] | None:
    """Read the source file and resolve the effective configuration.

    Prints an error and returns None on failure.
    """
    source_path = Path(args.file)
    if not source_path.is_file():
        print(f"Error: file '{source_path}' does not exist.", file=sys.stderr)
        return None

    config_path = Path(args.config) if args.config else find_config(source_path.resolve().parent)
    config = LetParseConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    if args.strict:
        config.strict_characters = True

    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{source_path}': {exc}", file=sys.stderr)
        return None
    return source, config


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    loaded = _load_inputs(args)
    if loaded is None:
        return 1
    source, config = loaded

    try:
        tokens = tokenize(source, strict=config.strict_characters)
    except UnrecognizedCharacterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for tok in tokens:
        print(f"{tok.type.value} {tok.value!r} [{tok.start}, {tok.end})")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    loaded = _load_inputs(args)
    if loaded is None:
        return 1
    source, config = loaded

    try:
        program = parse(tokenize(source, strict=config.strict_characters))
    except (UnrecognizedCharacterError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    indent = config.indent
    if args.indent is not None:
        indent = args.indent
    if args.compact:
        indent = None

    if args.output:
        output_path = Path(args.output)
        try:
            write_artifact(program, output_path, indent=indent)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        except OSError as exc:
            print(f"Error: cannot write '{output_path}': {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {len(program.body)} declaration(s) to '{output_path}'.")
        return 0

    try:
        text = serialize(program, indent=indent)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(text)
    return 0
