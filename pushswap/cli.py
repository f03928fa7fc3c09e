"""Command line: print the instructions that sort the integers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments and print one instruction per line.

    Invalid or repeated arguments print ``Error`` on standard error.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    if len(args) >= 2:
        sys.stdout.write("".join(name + "\n" for name in push_swap(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())