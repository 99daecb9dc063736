class LdocGenError(Exception):
    """Base class for errors raised by ldoc-gen."""


class SourceParseError(LdocGenError, ValueError):
    """The structural parser rejected a source file."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class AliasOrderError(LdocGenError, RuntimeError):
    """An ``@alias`` line reached the attribute parser.

    Alias blocks are removed before the source is parsed, so this means the
    extraction pass did not run first. It is not a data problem and is never
    recovered from.
    """
