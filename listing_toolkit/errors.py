class ListingError(Exception):
    """Base class for fatal listing errors (the whole render is aborted)."""


class SourcesFormatError(ListingError):
    """sources.csv could not be parsed: no header, ragged rows, no key column."""


class DuplicateSourceError(ListingError):
    def __init__(self, filename: str, first_line: int, line: int):
        self.filename = filename
        self.first_line = first_line
        self.line = line
        super().__init__(
            f"{filename!r} is described twice (lines {first_line} and {line})"
        )


class ConfigError(ListingError):
    pass


class SizeOverflowError(ValueError):
    """Byte count too large for the largest decimal unit (YB)."""
