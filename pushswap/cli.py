"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.parsing import InputError, parse_args
from pushswap.sorting import solve
from pushswap.stack import Operation, has_duplicates

ERROR_MESSAGE = "Error\n"


def run(args: Iterable[str]) -> list[Operation]:
    """The operations that sort the numbers named by the arguments."""
    values = parse_args(args)
    if has_duplicates(values):
        raise InputError("duplicate values")
    return solve(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; report bad input on standard error."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        operations = run(args)
    except InputError:
        sys.stderr.write(ERROR_MESSAGE)
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())