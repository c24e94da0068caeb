"""Custom exceptions for catalog parsing."""


class ParseError(Exception):
    """Base exception for all catalog parsing errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class CatalogNotFoundError(ParseError):
    """Raised when the catalog file does not exist."""

    pass


class MalformedInputError(ParseError):
    """Raised when the tokenizer reports an XML syntax error."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *args,
        **kwargs,
    ):
        self.line = line
        self.column = column
        super().__init__(message, *args, **kwargs)
