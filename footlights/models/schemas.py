"""
Pydantic Models and Schemas
===========================

Value models for colors, gradient stops, shadows and styles, plus the result
model of style document loading. Color and style models are frozen: they are
immutable, hashable-by-value records compared by their field values.
"""

import math
from typing import Annotated, Optional, List, Dict, Any, Union, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from footlights.core.color.grammar import validate_color
from footlights.core.errors import (
    EmptyGradient,
    InvalidColorSyntax,
    InvalidDimension,
    InvalidStopPosition,
    MalformedColor,
)


def _check_dimension(value: Any, attribute: str) -> int:
    """Accept non-negative integers only; bools and floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(
            f"Expected a non-negative integer pixel value, got {value!r}", attribute=attribute
        )
    if value < 0:
        raise InvalidDimension(f"Dimension must not be negative, got {value}", attribute=attribute)
    return value


class FrozenModel(BaseModel):
    """Base model for immutable value objects."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# Color Models
class ColorStop(FrozenModel):
    """One (color, position) point along a gradient."""

    color: str = Field(..., description="Color text accepted by the color grammar")
    position: float = Field(..., description="Percentage of the gradient length, 0-100")

    @field_validator("color", mode="before")
    @classmethod
    def validate_stop_color(cls, v: Any) -> str:
        try:
            return validate_color(v)
        except InvalidColorSyntax as e:
            raise MalformedColor(f"Gradient stop color is malformed: {e}", attribute="color") from e

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v: Any) -> float:
        """Accept numbers or percentage strings such as ``"35%"``."""
        if isinstance(v, bool):
            raise InvalidStopPosition(f"Invalid stop position {v!r}", attribute="position")
        if isinstance(v, str):
            text = v.strip()
            if text.endswith("%"):
                text = text[:-1].strip()
            try:
                v = float(text)
            except ValueError:
                raise InvalidStopPosition(f"Invalid stop position {v!r}", attribute="position")
        if not isinstance(v, (int, float)) or v != v:
            raise InvalidStopPosition(f"Invalid stop position {v!r}", attribute="position")
        if not 0 <= v <= 100:
            raise InvalidStopPosition(
                f"Stop position {v:g}% is outside 0%-100%", attribute="position"
            )
        return float(v)

    def as_pair(self) -> Tuple[str, float]:
        return self.color, self.position


class SolidColor(FrozenModel):
    """A flat color."""

    kind: Literal["solid"] = "solid"
    value: str = Field(..., description="Color text accepted by the color grammar")

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> str:
        try:
            return validate_color(v)
        except InvalidColorSyntax as e:
            e.attribute = "color"
            raise


class LinearGradient(FrozenModel):
    """A linear gradient with ordered stops and an angle in degrees."""

    kind: Literal["linear"] = "linear"
    stops: Tuple[ColorStop, ...] = Field(..., description="Stops in declaration order")
    angle: float = Field(180.0, description="Angle in degrees, stored modulo 360")

    @field_validator("stops", mode="before")
    @classmethod
    def validate_stops(cls, v: Any) -> Tuple[Any, ...]:
        if v is None or len(v) == 0:
            raise EmptyGradient("A linear gradient needs at least one stop", attribute="color")
        stops = []
        for stop in v:
            if isinstance(stop, (list, tuple)):
                if len(stop) != 2:
                    raise InvalidStopPosition(
                        f"Gradient stop must be a (color, position) pair, got {stop!r}",
                        attribute="color",
                    )
                stop = ColorStop(color=stop[0], position=stop[1])
            elif isinstance(stop, dict):
                stop = ColorStop(**stop)
            elif not isinstance(stop, ColorStop):
                raise InvalidStopPosition(
                    f"Gradient stop must be a (color, position) pair, got {stop!r}",
                    attribute="color",
                )
            stops.append(stop)
        return tuple(stops)

    @field_validator("angle", mode="before")
    @classmethod
    def normalize_angle(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
            raise ValueError(f"Gradient angle must be a finite number, got {v!r}")
        return float(v) % 360

    @model_validator(mode="after")
    def check_stop_order(self) -> "LinearGradient":
        """Positions must be non-decreasing in declaration order."""
        for previous, current in zip(self.stops, self.stops[1:]):
            if current.position < previous.position:
                raise InvalidStopPosition(
                    f"Stop position {current.position:g}% is before the preceding "
                    f"stop at {previous.position:g}%",
                    attribute="color",
                )
        return self


Color = Annotated[Union[SolidColor, LinearGradient], Field(discriminator="kind")]


# Style Models
class DropShadow(FrozenModel):
    """A drop shadow cast by a styled element."""

    x: int = Field(5, description="Horizontal offset in pixels")
    y: int = Field(5, description="Vertical offset in pixels")
    blur: int = Field(7, description="Standard deviation of the blur in pixels")
    opacity: float = Field(0.6, description="Shadow opacity, 0-1")

    @field_validator("x", "y", "blur", mode="before")
    @classmethod
    def validate_dimension(cls, v: Any, info: Any) -> int:
        return _check_dimension(v, f"shadow.{info.field_name}")

    @field_validator("opacity", mode="before")
    @classmethod
    def validate_opacity(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not 0 <= v <= 1:
            raise InvalidDimension(
                f"Shadow opacity must be a number between 0 and 1, got {v!r}",
                attribute="shadow.opacity",
            )
        return float(v)

    def get_clearance(self) -> Tuple[int, int]:
        """
        Space the shadow needs on each side of the element.

        A gaussian blur affects pixels no further than three standard
        deviations plus one away.
        """
        return self.x + 3 * self.blur + 1, self.y + 3 * self.blur + 1


# Layout Models
class CenterPosition(FrozenModel):
    """Element centered in its container."""

    kind: Literal["center"] = "center"


class AbsolutePosition(FrozenModel):
    """Element placed at a pixel offset from its container's origin."""

    kind: Literal["absolute"] = "absolute"
    x: int = Field(0, description="Left offset in pixels")
    y: int = Field(0, description="Top offset in pixels")

    @field_validator("x", "y", mode="before")
    @classmethod
    def validate_offset(cls, v: Any, info: Any) -> int:
        return _check_dimension(v, f"position.{info.field_name}")


class FitContentSize(FrozenModel):
    """Element sized to its content plus padding."""

    kind: Literal["fit_content"] = "fit_content"
    padding: int = Field(0, description="Padding on every side in pixels")

    @field_validator("padding", mode="before")
    @classmethod
    def validate_padding(cls, v: Any) -> int:
        return _check_dimension(v, "size.padding")


class AbsoluteSize(FrozenModel):
    """Element with a fixed content size."""

    kind: Literal["absolute"] = "absolute"
    width: int = Field(..., description="Width in pixels")
    height: int = Field(..., description="Height in pixels")

    @field_validator("width", "height", mode="before")
    @classmethod
    def validate_extent(cls, v: Any, info: Any) -> int:
        return _check_dimension(v, f"size.{info.field_name}")


ElementPosition = Annotated[Union[CenterPosition, AbsolutePosition], Field(discriminator="kind")]
ElementSize = Annotated[Union[FitContentSize, AbsoluteSize], Field(discriminator="kind")]


class Style(FrozenModel):
    """A bundle of optional visual attributes, identified by its registry key."""

    color: Optional[Color] = Field(None, description="Solid color or linear gradient")
    image: Optional[str] = Field(None, description="Opaque image handle, emitted verbatim")
    corner_radius: Optional[int] = Field(None, description="Corner radius in pixels")
    shadow: Optional[DropShadow] = Field(None, description="Drop shadow")
    position: Optional[ElementPosition] = Field(None, description="Placement in the container")
    size: Optional[ElementSize] = Field(None, description="Element sizing")

    @field_validator("corner_radius", mode="before")
    @classmethod
    def validate_corner_radius(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        return _check_dimension(v, "corner_radius")

    def is_empty(self) -> bool:
        """True when no attribute is set."""
        return all(getattr(self, name) is None for name in type(self).model_fields)


# Loading Results
class LoadResult(BaseModel):
    """Result of loading a style document."""

    success: bool = Field(..., description="Whether loading succeeded")
    # StyleRegistry; kept as Any so models stay free of engine imports
    registry: Optional[Any] = Field(None, description="Populated registry")
    errors: List[str] = Field(default_factory=list, description="Loading errors")
    warnings: List[str] = Field(default_factory=list, description="Loading warnings")
    error_details: List[Dict[str, Any]] = Field(
        default_factory=list, description="Structured engine errors"
    )
