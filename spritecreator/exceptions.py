"""Exception classes for the sprite data model and codecs.

Every error is a ``SpriteError`` and a ``ValueError``, so callers can either
catch the specific kind or treat all of them as bad input.
"""

from dataclasses import dataclass


class SpriteError(ValueError):
    """Base exception for sprite model errors."""

    pass


# --- Format violations ---

class FormatViolationError(SpriteError):
    """Raised when a string does not match its required pattern."""

    pass


class InvalidColorError(FormatViolationError):
    """Raised for values that are not ``#RRGGBB`` hex colors."""

    def __init__(self, color):
        super().__init__(f'Invalid hex color format: {color}')
        self.color = color


class InvalidLayerRefError(FormatViolationError):
    """Raised for layer references not matching ``layer<digits>``."""

    def __init__(self, ref):
        super().__init__(f'Invalid layer reference format: {ref}')
        self.ref = ref


class InvalidNameError(FormatViolationError):
    """Raised for animation, variant or scheme names with a bad format."""

    pass


# --- Bounds violations ---

class BoundsViolationError(SpriteError):
    """Raised when a value or collection size leaves its allowed range."""

    pass


class OutOfBoundsError(BoundsViolationError, IndexError):
    """Raised for coordinates or indexes outside the valid range."""

    pass


class CapacityError(BoundsViolationError):
    """Raised when a collection would exceed its maximum size."""

    pass


class InvalidDimensionsError(BoundsViolationError):
    """Raised for bitmap sizes below 1x1."""

    pass


class InvalidDurationError(BoundsViolationError):
    """Raised for frame durations that are not positive integers."""

    pass


# --- Structural invariants ---

class InvariantViolationError(SpriteError):
    """Raised when an operation would break a structural invariant."""

    pass


class LastFrameError(InvariantViolationError):
    """Raised when removing the only frame of an animation."""

    pass


class PixelCountMismatchError(InvariantViolationError):
    """Raised when decoded pixels do not fill the declared bitmap size."""

    def __init__(self, actual: int, expected: int):
        super().__init__(
            f'Decoded pixel count {actual} does not match expected {expected}'
        )
        self.actual = actual
        self.expected = expected


class EmptyPaletteError(InvariantViolationError):
    """Raised when a swap map is requested against an empty target palette."""

    pass


# --- Encoding corruption ---

class EncodingError(SpriteError):
    """Raised when an encoded payload cannot be decoded.

    The underlying cause, if any, is available as ``__cause__``.
    """

    pass


class RLEDecodeError(EncodingError):
    """Raised for malformed RLE pixel strings."""

    def __init__(self, message: str = 'Invalid RLE encoded data'):
        super().__init__(message)


class ASEFormatError(EncodingError):
    """Raised for buffers that are not parseable ASE swatch files."""

    def __init__(self, message: str = 'Invalid ASE file format'):
        super().__init__(message)


class DocumentDecodeError(EncodingError):
    """Raised when sprite document text is not valid JSON."""

    pass


# --- Schema violations ---

@dataclass(frozen=True)
class SchemaIssue:
    """A single sprite document schema violation."""

    path: str  # Dotted location, e.g. "canvas.w" or "layers.0.id"
    message: str
    kind: str  # Validator error type, e.g. "less_than_equal"

    def __str__(self) -> str:
        location = self.path or '<root>'
        return f'{location}: {self.message}'


class SchemaViolationError(SpriteError):
    """Raised when a sprite document fails schema validation.

    All violations found in the validation pass are kept in ``errors``.
    """

    def __init__(self, errors: list[SchemaIssue]):
        self.errors = list(errors)
        summary = '; '.join(str(issue) for issue in self.errors[:5])
        if len(self.errors) > 5:
            summary += f'; ... ({len(self.errors) - 5} more)'
        super().__init__(f'Invalid sprite data: {summary}')
