"""Command that prints greeting information."""

import sys
from typing import Optional, Sequence, TextIO

from hellodemo.output import Output
from hellodemo.utils import Utils


def greeting(stream: Optional[TextIO] = None) -> None:
    """Write the greeting to ``stream``, standard output by default."""
    if stream is None:
        stream = sys.stdout
    Output().write(stream, Utils().generate_greeting_string())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: print the greeting and return exit status 0."""
    greeting()
    return 0


if __name__ == "__main__":
    sys.exit(main())