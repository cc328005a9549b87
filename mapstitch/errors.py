"""Exceptions raised while loading, extracting and writing maps."""

from typing import Optional


class MapStitchError(Exception):
    """Base class for all mapstitch errors."""


class ExtractionError(MapStitchError):
    """A decoded tag tree could not be turned into a map tile.

    Attributes:
        field: Name of the tag that failed validation
        source: Identifier of the file the tree came from, if known
    """

    def __init__(self, field: str, message: str, source: Optional[str] = None):
        self.field = field
        self.source = source
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        if self.source:
            return f"{self.source}: {self.field}: {self.message}"
        return f"{self.field}: {self.message}"


class TypeMismatchError(ExtractionError):
    """A tag was missing or did not have the expected tag type."""

    def __init__(
        self,
        field: str,
        expected: str,
        actual: Optional[str],
        source: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        if actual is None:
            message = f"missing, expected {expected}"
        else:
            message = f"expected {expected}, got {actual}"
        super().__init__(field, message, source)


class MalformedLengthError(ExtractionError):
    """The color index array did not hold exactly 128x128 entries."""

    def __init__(self, field: str, length: int, source: Optional[str] = None):
        self.length = length
        super().__init__(field, f"expected 16384 entries, got {length}", source)


class ScaleRangeError(ExtractionError):
    """The map scale was outside the supported 0-4 range."""

    def __init__(self, field: str, scale: int, source: Optional[str] = None):
        self.scale = scale
        super().__init__(field, f"scale {scale} is outside 0-4", source)


class LoadError(MapStitchError):
    """A map file could not be read or decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class OutputError(MapStitchError):
    """The composite could not be written."""
