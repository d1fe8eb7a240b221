"""
Command line front end.

    python -m ordre_cipher -e -m double -k lune -t "Le Conseil se réunit"
    python -m ordre_cipher -d -m double -k lune -i message.txt
    echo "Le Conseil" | python -m ordre_cipher -e -m symbols --archive
"""

import argparse
import logging
import sys

from . import __version__
from .codec import MessageCodec, Method, Mode
from .errors import MissingKeyError
from .tiers.tier1_caesar import CaesarCipher

logger = logging.getLogger("ordre_cipher")

METHOD_HELP = {
    Method.CAESAR:   "fixed shift, see --shift",
    Method.SYMBOLS:  "esoteric glyph substitution, no key",
    Method.VIGENERE: "polyalphabetic, needs --key",
    Method.DOUBLE:   "Vigenère then glyphs, needs --key (decodes to lowercase)",
}


def list_methods():
    print("\nAvailable methods:")
    print("=" * 60)
    for method, text in METHOD_HELP.items():
        print(f"  {method.value:<10} {text}")
    print("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ordre_cipher",
        description="L'Ordre cipher module: encode and decode secret messages.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {m.value:<10}: {t}" for m, t in METHOD_HELP.items())
    parser.add_argument("-m", "--method", choices=[m.value for m in Method], default=Method.DOUBLE.value,
                        help=f"Cipher method (default: double).\n{method_help}")

    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List cipher methods")

    parser.add_argument("-k", "--key", help="Secret key (vigenere, double)")
    parser.add_argument("-s", "--shift", type=int, default=CaesarCipher.DEFAULT_SHIFT,
                        help=f"Caesar shift (default: {CaesarCipher.DEFAULT_SHIFT})")
    parser.add_argument("--archive", action="store_true",
                        help="Print the archive record as JSON instead of the bare result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")
    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=" %(levelname)s %(name)s: %(message)s")

    if args.list:
        list_methods()
        return 0

    try:
        source = read_source(args)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    mode = Mode.ENCODE if args.encode else Mode.DECODE
    codec = MessageCodec()
    try:
        result = codec.transform(source, args.method, mode, key=args.key, shift=args.shift)
    except MissingKeyError as e:
        print(f"Secret key required: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"{mode.value.capitalize()} error: {e}", file=sys.stderr)
        return 1

    if args.archive:
        original, encoded = (source, result) if mode is Mode.ENCODE else (result, source)
        result = codec.archive(original, encoded, args.method, shift=args.shift).to_json()

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(result)
    logger.info(f"{args.method}/{mode.value} done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
