"""Command-line entry point."""

import argparse
import sys

from crackhash import display
from crackhash.cracker import HashCracker, validate_hash_format
from crackhash.errors import CrackError, UnsupportedAlgorithmError
from crackhash.hashers import get_hasher


def build_parser():
    parser = argparse.ArgumentParser(
        prog="crack-hash",
        description="A hash cracking tool that supports multiple algorithms",
    )
    parser.add_argument(
        "-V", "--version", action="version", version="crack-hash 0.1.0"
    )
    parser.add_argument(
        "-a", "--algo", required=True,
        help="Hash algorithm (supported: md5, sha1, sha256)",
    )
    parser.add_argument(
        "-H", "--hash", dest="hash", required=True, help="Target hash to crack"
    )
    parser.add_argument(
        "-w", "--wordlist", required=True, help="Path to wordlist file"
    )
    return parser


def main(argv=None):
    """Run a cracking session; return 0 when the password is found, else 1."""
    args = build_parser().parse_args(argv)

    display.print_banner()

    hasher = get_hasher(args.algo)
    if hasher is None:
        display.print_error(str(UnsupportedAlgorithmError(args.algo)))
        return 1

    try:
        validate_hash_format(args.algo, args.hash)
        password = HashCracker(hasher, args.hash, args.wordlist).crack()
    except CrackError as exc:
        display.print_error(str(exc))
        return 1

    return 0 if password is not None else 1


if __name__ == "__main__":
    sys.exit(main())