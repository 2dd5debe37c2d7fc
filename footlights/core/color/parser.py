"""
Color Parser
============

Construction of color values from plain data: solid colors from color text
and linear gradients from ordered (color, position) pairs.
"""

from typing import Iterable, Optional, Tuple, Union

from footlights.config.settings import get_settings
from footlights.core.errors import EmptyGradient
from footlights.models.schemas import ColorStop, LinearGradient, SolidColor

StopInput = Union[ColorStop, Tuple[str, Union[str, float, int]]]


def parse_color(text: str) -> SolidColor:
    """
    Parse a textual solid color.

    Args:
        text: Named, hex or functional (rgb/hsl) color text

    Returns:
        SolidColor value

    Raises:
        InvalidColorSyntax: If the text does not match the color grammar
    """
    return SolidColor(value=text)


def linear_gradient(stops: Iterable[StopInput], angle: Optional[float] = None) -> LinearGradient:
    """
    Build a linear gradient from ordered stops.

    Args:
        stops: ``(color text, position)`` pairs or ``ColorStop`` values, in
            interpolation order. Positions are percentages given as numbers
            or strings like ``"35%"``.
        angle: Angle in degrees; defaults to the configured gradient angle

    Returns:
        LinearGradient value with stops kept in the given order

    Raises:
        EmptyGradient: If no stops are given
        InvalidStopPosition: If a position is outside 0-100 or decreasing
        MalformedColor: If a stop color fails the color grammar
    """
    stop_list = list(stops) if stops is not None else []
    if not stop_list:
        raise EmptyGradient("A linear gradient needs at least one stop", attribute="color")
    if angle is None:
        angle = get_settings().default_gradient_angle
    return LinearGradient(stops=stop_list, angle=angle)
