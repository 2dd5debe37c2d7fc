"""
Style
=====

Assembly of styles from colors, layout modifiers and placement.

Styles are frozen values: each setter returns a new Style with one attribute
replaced and leaves its argument untouched. Passing ``None`` clears the
attribute.
"""

from typing import Optional, Union

from footlights.core.errors import InvalidDimension
from footlights.models.schemas import (
    AbsolutePosition,
    AbsoluteSize,
    CenterPosition,
    DropShadow,
    FitContentSize,
    LinearGradient,
    SolidColor,
    Style,
)

ColorValue = Union[SolidColor, LinearGradient]
PositionValue = Union[CenterPosition, AbsolutePosition]
SizeValue = Union[FitContentSize, AbsoluteSize]


def new_style() -> Style:
    """Create a style with no attributes set."""
    return Style()


def set_color(style: Style, color: Optional[ColorValue]) -> Style:
    """Replace the color of a style."""
    if color is not None and not isinstance(color, (SolidColor, LinearGradient)):
        raise TypeError(f"Expected SolidColor or LinearGradient, got {type(color).__name__}")
    return style.model_copy(update={"color": color})


def set_image(style: Style, ref: Optional[str]) -> Style:
    """Replace the image handle of a style. The handle is stored as-is."""
    if ref is not None and not isinstance(ref, str):
        raise TypeError(f"Image reference must be a string, got {type(ref).__name__}")
    return style.model_copy(update={"image": ref})


def set_corner_radius(style: Style, px: Optional[int]) -> Style:
    """
    Replace the corner radius of a style.

    Raises:
        InvalidDimension: If ``px`` is negative or not an integer
    """
    if px is not None and (isinstance(px, bool) or not isinstance(px, int) or px < 0):
        raise InvalidDimension(
            f"Corner radius must be a non-negative integer, got {px!r}",
            attribute="corner_radius",
        )
    return style.model_copy(update={"corner_radius": px})


def set_shadow(style: Style, shadow: Optional[DropShadow]) -> Style:
    """Replace the drop shadow of a style."""
    if shadow is not None and not isinstance(shadow, DropShadow):
        raise TypeError(f"Expected DropShadow, got {type(shadow).__name__}")
    return style.model_copy(update={"shadow": shadow})


def set_position(style: Style, position: Optional[PositionValue]) -> Style:
    """Replace the placement of a style within its container."""
    if position is not None and not isinstance(position, (CenterPosition, AbsolutePosition)):
        raise TypeError(
            f"Expected CenterPosition or AbsolutePosition, got {type(position).__name__}"
        )
    return style.model_copy(update={"position": position})


def set_size(style: Style, size: Optional[SizeValue]) -> Style:
    """
    Replace the sizing of a style.

    The rendered padding is the fit-content padding plus the shadow
    clearance on each axis.
    """
    if size is not None and not isinstance(size, (FitContentSize, AbsoluteSize)):
        raise TypeError(f"Expected FitContentSize or AbsoluteSize, got {type(size).__name__}")
    return style.model_copy(update={"size": size})
