"""Command-line interface: scan and parse a Lox file and print the result."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loxfront.errors import LexError, ParseError

FORMATS = ("sexpr", "tree")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    tokens: bool
    format: str
    show_eof: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxfront",
        description="Scan and parse Lox expressions",
    )
    p.add_argument("input", help="Input .lox file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("--tokens", action="store_true", help="Print tokens instead of the AST")
    p.add_argument(
        "--format",
        default=None,
        metavar="FORMAT",
        help="AST output format: sexpr or tree (default: sexpr)",
    )
    p.add_argument(
        "--show-eof",
        action="store_true",
        default=None,
        help="Include the EOF token in --tokens output",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxfront.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump AST tree to stderr")
    return p


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    if s not in FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid format (expected one of {', '.join(FORMATS)}): {s}"
        )
    return s


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "loxfront.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    output_format = "sexpr"
    show_eof = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            output_format = parse_format_arg(str(cfg_format))
        cfg_eof = cfg_output.get("show_eof")
        if isinstance(cfg_eof, bool):
            show_eof = cfg_eof
    if args.format is not None:
        output_format = parse_format_arg(args.format)
    if args.show_eof is not None:
        show_eof = args.show_eof

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        tokens=args.tokens,
        format=output_format,
        show_eof=show_eof,
        debug=args.debug,
    )


def inspect_file(options: CliOptions) -> str:
    """Read, scan, and parse a Lox file; return the rendered tokens or AST."""
    from loxfront.debug import dump_ast, dump_tokens, to_sexpr
    from loxfront.parser import parse
    from loxfront.scanner import scan
    from loxfront.tokens import TokenType

    source = options.input_file.read_text(encoding="utf-8")
    filename = str(options.input_file)
    tokens = scan(source, filename)

    out = io.StringIO()
    if options.tokens:
        shown = tokens if options.show_eof else [t for t in tokens if t.type != TokenType.EOF]
        dump_tokens(shown, file=out)
        return out.getvalue()

    exprs = parse(tokens, source, filename)

    if options.debug:
        dump_ast(exprs, file=sys.stderr)

    if options.format == "tree":
        dump_ast(exprs, file=out)
    else:
        for expr in exprs:
            out.write(to_sexpr(expr) + "\n")
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = inspect_file(options)
    except (LexError, ParseError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
