"""Error types raised by the document store"""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a null or malformed argument to the store."""
