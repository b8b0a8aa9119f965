"""Custom exceptions for the intake context."""


class OversizeInputError(ValueError):
    """
    Exception raised when résumé text exceeds the size ceiling.

    This is a recoverable condition. The calling layer surfaces it to the user
    as "file too large / text too complex" instead of running extraction.

    Attributes:
        length: Character count of the rejected text
        max_chars: Configured ceiling
    """

    def __init__(self, length: int, max_chars: int):
        self.length = length
        self.max_chars = max_chars
        super().__init__(
            f"CV text has {length:,} characters, above the {max_chars:,} character limit"
        )
