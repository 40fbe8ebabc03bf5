"""Decoder error types."""


class FormatError(ValueError):
    """Raised when the product text is missing a required line or a line is malformed.

    The offending text is kept on ``text`` for diagnostics.
    """

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class MalformedCellError(ValueError):
    """Raised when a cell's numeric subfields are not digits."""

    def __init__(self, message: str, cell: str = ""):
        super().__init__(message)
        self.cell = cell
