"""PassGen command-line interface.

Usage examples:
    python -m passgen generate
    python -m passgen generate -n 20 -c 5 --no-special
    python -m passgen generate --animate --copy
    python -m passgen check mypassword
    python -m passgen check -f passwords.txt
"""

import argparse
import logging
import sys

from passgen import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationPolicy,
    analyze_password,
    generate_password,
)
from passgen.reveal import animate, copy_to_clipboard

logger = logging.getLogger(__name__)


def _length(value: str) -> int:
    length = int(value)
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(
            f"length must be between {MIN_LENGTH} and {MAX_LENGTH}",
        )
    return length


def _count(value: str) -> int:
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError("count must be at least 1")
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and rate password strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=_length, default=DEFAULT_LENGTH,
        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument("--no-special", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=_count, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy", action="store_true",
        help="Copy the last generated password to the clipboard",
    )
    gen_p.add_argument(
        "--animate", action="store_true",
        help="Type each password out one character at a time",
    )

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Rate password strength")
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    policy = GenerationPolicy(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        digits=not args.no_digits,
        special=not args.no_special,
    )

    pwd = ""
    for _ in range(args.count):
        pwd = generate_password(policy)
        if not pwd:
            print("Error: enable at least one character class", file=sys.stderr)
            return 1

        verdict = analyze_password(pwd)
        if args.animate:
            animate(pwd, _typewriter)
            print(f"  ({verdict.strength})")
        else:
            print(f"  {pwd}  ({verdict.strength})")
        if verdict.message:
            print(f"    {verdict.message}")

    if args.copy and pwd:
        copy_to_clipboard(pwd)
        print("Copied to clipboard.")

    return 0


def _typewriter(prefix: str) -> None:
    sys.stdout.write(f"\r  {prefix}")
    sys.stdout.flush()


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            with open(args.file) as f:
                passwords.extend(line.strip() for line in f if line.strip())
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    weak = False
    for pwd in passwords:
        verdict = analyze_password(pwd)
        filled = min(verdict.score, 6)
        bar = "#" * filled + "-" * (6 - filled)
        print(f"  [{bar}] {verdict.strength:<9} '{pwd}'")
        if verdict.message:
            print(f"            ! {verdict.message}")
        if verdict.strength == "Very Weak":
            weak = True

    return 1 if weak else 0


if __name__ == "__main__":
    sys.exit(main())
