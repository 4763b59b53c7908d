#!/usr/bin/env python3
"""
hackasm: Hack assembler CLI

Usage:
    python hackasm.py <input.asm> [-o output.hack] [--format hack|listing|symbols]
                                  [--var-base 16] [--verbose] [--log-dir logs]

Output format is auto-detected from file extension:
    .hack      → binary words, one per line (default)
    .lst       → listing with ROM addresses, words and source
    .sym       → label / variable symbol dump

Examples:
    python hackasm.py Fill.asm                  # writes Fill.hack next to the input
    python hackasm.py Max.asm -o out/Max.hack
    python hackasm.py Pong.asm -o Pong.lst -v
    python hackasm.py Add.asm -o -              # words to stdout
"""

import argparse
import logging
import os
import sys

from hack_assembler import Assembler, __version__
from hack_assembler.errors import TranslationError
from hack_assembler.log_setup import setup_logging
from hack_assembler.tables import VARIABLE_BASE

log = logging.getLogger("hack_assembler.cli")

FORMAT_EXTENSIONS = {
    "hack": ".hack",
    "listing": ".lst",
    "symbols": ".sym",
}


def parse_int_arg(value: str) -> int:
    """Parse an integer argument that may be hex (0x...), $ prefix, or decimal."""
    value = value.strip()
    if value.startswith("0x") or value.startswith("0X"):
        return int(value, 16)
    if value.startswith("$"):
        return int(value[1:], 16)
    return int(value)


def detect_format(output: str) -> str:
    ext = os.path.splitext(output)[1].lower()
    for fmt, fmt_ext in FORMAT_EXTENSIONS.items():
        if ext == fmt_ext:
            return fmt
    return "hack"


def default_output_path(input_path: str, out_format: str = "hack") -> str:
    """Fill.asm -> Fill.hack (or Fill.lst / Fill.sym)."""
    stem, _ = os.path.splitext(input_path)
    return stem + FORMAT_EXTENSIONS[out_format]


def render(asm: Assembler, out_format: str) -> str:
    if out_format == "listing":
        return asm.get_listing() + "\n"
    if out_format == "symbols":
        dump = asm.dump_symbols()
        return dump + "\n" if dump else ""
    return asm.to_hack()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hackasm",
        description="Two-pass assembler for the Hack CPU",
    )
    parser.add_argument("input", help="Input assembly file (.asm)")
    parser.add_argument("-o", "--output",
                        help="Output file (default: input name with .hack; '-' for stdout)")
    parser.add_argument("--format", choices=list(FORMAT_EXTENSIONS), default=None,
                        help="Output format (auto-detected from -o extension if not set)")
    parser.add_argument("--var-base", default=None,
                        help=f"First RAM address for variables (default: {VARIABLE_BASE})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print assembly details to the console")
    parser.add_argument("--log-dir", default=None,
                        help="Also write a debug log file into this directory")
    parser.add_argument("--version", action="version",
                        version=f"hackasm {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        console_level=logging.DEBUG if args.verbose else logging.INFO,
        log_dir=args.log_dir,
    )

    if args.format:
        out_format = args.format
    elif args.output and args.output != "-":
        out_format = detect_format(args.output)
    else:
        out_format = "hack"

    try:
        var_base = parse_int_arg(args.var_base) if args.var_base else VARIABLE_BASE
        asm = Assembler(var_base=var_base)
    except ValueError as e:
        print(f"Error: invalid --var-base {args.var_base!r}: {e}", file=sys.stderr)
        return 1

    # Read input
    try:
        with open(args.input, "r", encoding="utf-8") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        return 1

    log.debug("Input:    %s", args.input)
    log.debug("Format:   %s", out_format)
    log.debug("Var base: %d", var_base)

    try:
        asm.assemble(source)
        result = render(asm, out_format)

        if args.output == "-":
            sys.stdout.write(result)
            return 0

        out_path = args.output or default_output_path(args.input, out_format)
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(result)
        log.info("OK: wrote %s (%d instructions)", out_path, len(asm.words))

    except TranslationError as e:
        for err in e.errors:
            print(f"Assembly error: {err}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal assembler error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
