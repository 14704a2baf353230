"""Utility used to generate greeting information."""


class Utils:
    """Generates greeting information."""

    def generate_greeting_string(self) -> str:
        """Return the greeting text."""
        return "hello world"