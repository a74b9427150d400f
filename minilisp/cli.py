"""Command that prints the tokens of a Lisp source file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from minilisp.lexer import describe_token, tokenize
from minilisp.lines import for_each_line

BUFSZ = 4096


def _print_tokens(line: str) -> None:
    for token in tokenize(line):
        print(describe_token(token))


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize the file named in ``argv`` line by line and print each token."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Insufficient arguments provided | Usage: minilisp <file.lisp>")
        return 1
    path = args[0]
    try:
        source = open(path, encoding="utf-8", newline="")
    except OSError:
        print(f"Encountered I/O Error: Unable to read {path}")
        return 1
    with source:
        while for_each_line(source, BUFSZ, _print_tokens):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())