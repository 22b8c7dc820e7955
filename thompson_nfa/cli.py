"""Interactive prompt that matches strings against regular expressions."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from thompson_nfa.nfa import compile_regex, match

PROMPT = "regex > "
USAGE = "<regexpression> <input_string>\n"
EXIT_COMMAND = ".exit"


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Read ``<regex> <text>`` lines until ``.exit`` or end of input; return the exit status."""
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        words = line.split()
        if words and words[0] == EXIT_COMMAND:
            return 0
        if len(words) != 2:
            stdout.write(USAGE)
            return 1
        regex, text = words
        try:
            start = compile_regex(regex)
        except ValueError as exc:
            stdout.write(f"Invalid regular expression: {exc}\n")
            continue
        if match(start, text):
            stdout.write("Input String Matched\n")
        else:
            stdout.write("Input String not matched\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive prompt on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="thompson-nfa",
        description="Match input strings against regular expressions interactively.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())