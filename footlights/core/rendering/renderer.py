"""
Renderer
========

Turn a style registry snapshot into a single HTML fragment.

Each registered style becomes one element of the canvas, in registration
order, carrying its attributes as inline CSS declarations. Output depends on
registry content and order only, so repeated renders of the same registry are
byte-for-byte identical.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import jinja2
from markupsafe import Markup

from footlights.config.logging import get_logger
from footlights.config.settings import get_settings, validate_css_identifier
from footlights.core.errors import FootlightsError, UnresolvedReference
from footlights.core.registry import StyleRegistry
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

logger = get_logger(__name__)

# Characters that cannot appear verbatim inside url('...') in a style attribute;
# & would start a character reference the browser decodes
_UNEMITTABLE = frozenset("'\"\\<>&")


class ReferencePolicy(str, Enum):
    """
    Handling of image references that cannot be emitted verbatim.

    STRICT raises UnresolvedReference and is the default. PERMISSIVE drops
    only the image declarations of the affected style and logs a warning.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"


class TemplateRenderError(FootlightsError):
    """Raised when the canvas template fails to render."""

    pass


@dataclass(frozen=True)
class StyleFragment:
    """Resolved declarations of one style."""

    name: str
    declarations: Tuple[Markup, ...]


def format_number(value: float) -> str:
    """
    Format a number in its shortest exact form.

    Whole values drop the trailing ``.0``; other values keep every digit
    needed to read back the same float.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def is_emittable_reference(ref: str) -> bool:
    """True if the handle can be written verbatim into a CSS url()."""
    if not ref or not ref.strip():
        return False
    return not any(ch in _UNEMITTABLE or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in ref)


class BaseRenderer(ABC):
    """Abstract base class for registry renderers."""

    @abstractmethod
    def render(self, registry: StyleRegistry) -> str:
        """Render the registry into a string artifact."""
        pass


class HTMLRenderer(BaseRenderer):
    """Jinja2-based HTML renderer."""

    def __init__(
        self,
        policy: Optional[Union[ReferencePolicy, str]] = None,
        class_prefix: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        # An explicit policy wins over the configured one
        self.policy = ReferencePolicy(policy or settings.reference_policy)
        self.class_prefix = validate_css_identifier(
            settings.class_prefix if class_prefix is None else class_prefix
        )
        self.logger: Any = logger.bind(renderer="html", policy=self.policy.value)
        self._setup_jinja2_environment()

    def _setup_jinja2_environment(self) -> None:
        """Setup Jinja2 template environment."""
        template_dir = Path(__file__).parent / "templates"
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, registry: StyleRegistry) -> str:
        """
        Render every registered style in registration order.

        Args:
            registry: Style registry; it is only read

        Returns:
            HTML fragment string

        Raises:
            UnresolvedReference: If an image handle cannot be emitted and the
                policy is strict
            TemplateRenderError: If the canvas template fails
        """
        entries = registry.snapshot()
        self.logger.debug("Rendering styles", style_count=len(entries))

        fragments = [self.resolve_fragment(name, style) for name, style in entries]

        try:
            template = self.env.get_template("canvas.html")
            html = template.render(prefix=self.class_prefix, fragments=fragments)
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Rendering failed", error=error_msg)
            raise TemplateRenderError(error_msg) from e

        self.logger.debug("Rendering completed", html_length=len(html))
        return html

    def resolve_fragment(self, name: str, style: Style) -> StyleFragment:
        """
        Resolve the attributes of one style into CSS declarations.

        Unset attributes contribute nothing.
        """
        declarations: List[str] = []
        background_layers: List[str] = []

        image_layer = self._resolve_image(name, style.image)
        if image_layer is not None:
            # Image sits above any gradient
            background_layers.append(image_layer)

        if isinstance(style.color, SolidColor):
            declarations.append(f"background-color: {style.color.value}")
        elif isinstance(style.color, LinearGradient):
            declarations.extend(self._gradient_declarations(style.color))
            background_layers.append(
                f"linear-gradient(var(--{self.class_prefix}-gradient-angle), "
                f"var(--{self.class_prefix}-gradient-stops))"
            )

        if background_layers:
            declarations.append(f"background-image: {', '.join(background_layers)}")
        if image_layer is not None:
            declarations.append("background-size: cover")

        if style.corner_radius is not None:
            declarations.append(f"border-radius: {style.corner_radius}px")

        if style.shadow is not None:
            declarations.append(self._shadow_declaration(style.shadow))

        declarations.extend(self._layout_declarations(style))

        # Every piece is a validated color, a number or a checked handle
        return StyleFragment(name=name, declarations=tuple(Markup(d) for d in declarations))

    def _gradient_declarations(self, gradient: LinearGradient) -> List[str]:
        """Stop list in stored order, followed by the angle."""
        stops = ", ".join(
            f"{stop.color} {format_number(stop.position)}%" for stop in gradient.stops
        )
        return [
            f"--{self.class_prefix}-gradient-stops: {stops}",
            f"--{self.class_prefix}-gradient-angle: {format_number(gradient.angle)}deg",
        ]

    def _resolve_image(self, name: str, ref: Optional[str]) -> Optional[str]:
        if ref is None:
            return None
        if is_emittable_reference(ref):
            return f"url('{ref}')"

        if self.policy is ReferencePolicy.STRICT:
            self.logger.error("Unresolved image reference", style=name)
            raise UnresolvedReference(
                f"Image reference {ref!r} cannot be emitted verbatim",
                attribute="image",
                style_name=name,
            )

        self.logger.warning("Dropping unresolved image reference", style=name, reference=ref)
        return None

    def _shadow_declaration(self, shadow: DropShadow) -> str:
        return (
            f"filter: drop-shadow({shadow.x}px {shadow.y}px {shadow.blur}px "
            f"rgba(0, 0, 0, {format_number(shadow.opacity)}))"
        )

    def _layout_declarations(self, style: Style) -> List[str]:
        """
        Resolve placement and sizing.

        Padding on each axis is the fit-content padding plus the shadow
        clearance, and is only emitted for sized elements.
        """
        declarations: List[str] = []

        if isinstance(style.position, CenterPosition):
            declarations.extend(
                [
                    "position: absolute",
                    "left: 50%",
                    "top: 50%",
                    "transform: translate(-50%, -50%)",
                ]
            )
        elif isinstance(style.position, AbsolutePosition):
            declarations.extend(
                ["position: absolute", f"left: {style.position.x}px", f"top: {style.position.y}px"]
            )

        if style.size is None:
            return declarations

        padding = 0
        if isinstance(style.size, FitContentSize):
            declarations.extend(["width: fit-content", "height: fit-content"])
            padding = style.size.padding
        elif isinstance(style.size, AbsoluteSize):
            declarations.extend([f"width: {style.size.width}px", f"height: {style.size.height}px"])

        pad_x = pad_y = padding
        if style.shadow is not None:
            clear_x, clear_y = style.shadow.get_clearance()
            pad_x += clear_x
            pad_y += clear_y
        if pad_x or pad_y:
            declarations.append(f"padding: {pad_y}px {pad_x}px")

        return declarations


def render(
    registry: StyleRegistry, policy: Optional[Union[ReferencePolicy, str]] = None
) -> str:
    """
    Render a registry to HTML.

    Args:
        registry: Style registry
        policy: Optional reference policy override

    Returns:
        HTML fragment string
    """
    return HTMLRenderer(policy=policy).render(registry)
