"""Writing information to text streams."""

from typing import TextIO


class Output:
    """Writes information to a given output stream."""

    def write(self, stream: TextIO, text: str) -> "Output":
        """Write ``text`` to ``stream`` unchanged and return this object for chaining."""
        stream.write(text)
        return self