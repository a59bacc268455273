#!/usr/bin/env python3
"""
masm: Maikor assembler CLI

Usage:
    python masm.py <input.masm> [-o output] [--format bin|hex|listing]
                                [--origin 0x0000] [--verbose] [--log-file PATH]
    python masm.py --ops

Output format is auto-detected from the file extension:
    .bin  → raw bytes
    .hex  → hex dump, 16 bytes per row
    .lst  → listing with addresses, bytes and opcode descriptions
    (no -o) listing to stdout

Examples:
    python masm.py game.masm -o game.bin
    python masm.py game.masm -o game.lst --origin 0x8000
    python masm.py game.masm --format hex
    python masm.py --ops                             # every mnemonic + operand pattern
"""

import argparse
import logging
import os
import sys

from maikor_asm import Assembler, AssemblerError, __version__
from maikor_asm.addressing import ADDRESSING_MODES, describe_op
from maikor_asm.log_setup import setup_logging

log = logging.getLogger("maikor_asm.cli")

FORMATS = ("bin", "hex", "listing")
EXTENSIONS = {".bin": "bin", ".hex": "hex", ".lst": "listing"}


def parse_int_arg(value: str) -> int:
    """Parse an integer argument that may be hex (0x...), $ prefix, or decimal."""
    value = value.strip()
    if value.startswith("0x") or value.startswith("0X"):
        return int(value, 16)
    if value.startswith("$"):
        return int(value[1:], 16)
    return int(value)


def detect_format(fmt, output) -> str:
    """--format wins, then the output extension, then a listing."""
    if fmt:
        return fmt
    if output:
        ext = os.path.splitext(output)[1].lower()
        return EXTENSIONS.get(ext, "listing")
    return "listing"


def print_ops():
    for mnemonic in sorted(ADDRESSING_MODES):
        for pattern, op in sorted(ADDRESSING_MODES[mnemonic].items()):
            print(f"{mnemonic:<8} {pattern or '-':<4} {op:02X}  {describe_op(op)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masm",
        description="Maikor assembler",
    )
    parser.add_argument("input", nargs="?", help="Input assembly file")
    parser.add_argument("-o", "--output", help="Output file (default: listing to stdout)")
    parser.add_argument("--format", choices=FORMATS, default=None,
                        help="Output format (auto-detected from -o extension if not set)")
    parser.add_argument("--origin", default="0",
                        help="Address of the first byte, for listings and hex dumps "
                             "(hex 0x.../$... or decimal)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log assembly details to stderr")
    parser.add_argument("--log-file", default=None,
                        help="Also write a debug log to this file")
    parser.add_argument("--ops", action="store_true",
                        help="Print the addressing-mode table and exit")
    parser.add_argument("--version", action="version",
                        version=f"masm {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        console_level=logging.INFO if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    if args.ops:
        print_ops()
        return 0
    if not args.input:
        parser.error("the following arguments are required: input")

    try:
        origin = parse_int_arg(args.origin)
    except ValueError:
        parser.error(f"invalid --origin: {args.origin}")

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

    out_format = detect_format(args.format, args.output)
    log.info("Input: %s, format: %s, origin: $%04X", args.input, out_format, origin)

    try:
        assembler = Assembler()
        binary = assembler.assemble(source)

        if out_format == "bin":
            result = binary
        elif out_format == "hex":
            result = assembler.to_hex(origin=origin)
        else:
            result = assembler.get_listing(origin=origin)

        # Write output
        if args.output:
            if out_format == "bin":
                with open(args.output, "wb") as f:
                    f.write(result)
            else:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(result)
                    if not result.endswith("\n"):
                        f.write("\n")
            log.info("Output: %s (%d bytes assembled)", args.output, len(binary))
        elif out_format == "bin":
            sys.stdout.buffer.write(result)
        else:
            print(result.rstrip("\n"))

    except AssemblerError as e:
        print(f"Assembler error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing {args.output}: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal assembler error: {e}", file=sys.stderr)
        log.debug("Internal error", exc_info=True)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
