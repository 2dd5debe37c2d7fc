"""
Engine Errors
=============

Validation failures raised by the color, style and rendering layers.

Every error carries the attribute and style name it concerns when those are
known, so callers can point at the exact input to fix.
"""

from typing import Any, Dict, Optional


class FootlightsError(Exception):
    """Base class for all engine errors."""

    def __init__(
        self,
        message: str,
        *,
        attribute: Optional[str] = None,
        style_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attribute = attribute
        self.style_name = style_name

    def with_style(self, style_name: str) -> "FootlightsError":
        """Attach the style name once it is known and return the error."""
        self.style_name = style_name
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "attribute": self.attribute,
            "style_name": self.style_name,
        }

    def __str__(self) -> str:
        context = []
        if self.style_name is not None:
            context.append(f"style '{self.style_name}'")
        if self.attribute is not None:
            context.append(f"attribute '{self.attribute}'")
        if not context:
            return self.message
        return f"{', '.join(context)}: {self.message}"


class InvalidColorSyntax(FootlightsError):
    """Raised when color text does not match the color grammar."""

    pass


class EmptyGradient(FootlightsError):
    """Raised when a gradient is built without stops."""

    pass


class InvalidStopPosition(FootlightsError):
    """Raised when a stop position is outside 0-100, unparseable or decreasing."""

    pass


class MalformedColor(FootlightsError):
    """Raised when the color text of a gradient stop fails the grammar."""

    pass


class InvalidDimension(FootlightsError):
    """Raised when a pixel dimension or shadow opacity is out of range or mistyped."""

    pass


class UnresolvedReference(FootlightsError):
    """Raised when an image reference cannot be emitted verbatim."""

    pass
