"""Greeting command."""

import argparse
import sys
from typing import Optional, Sequence


def greet(name: str) -> str:
    """Return the greeting for ``name``."""
    return f"Hello, {name}! You've been greeted from Python!"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Greet the name given as an argument, or read from standard input."""
    parser = argparse.ArgumentParser(prog="innex", description="Greet someone by name.")
    parser.add_argument("name", nargs="?", help="name to greet; read from stdin if omitted")
    args = parser.parse_args(argv)

    name = args.name if args.name is not None else sys.stdin.readline().rstrip("\r\n")
    if name:
        print(greet(name))
    return 0