"""
Style Document Loader
=====================

Load YAML or JSON style documents into a style registry.

A document holds a ``styles`` mapping from style name to attributes. Styles
are registered in document order:

    styles:
      bg:
        color:
          linear:
            stops: [["hsl(240 46% 65%)", "0%"], ["hsl(56 37% 89%)", "100%"]]
            angle: 35
      img:
        image: "{{ image }}"
        corner_radius: 20
        position: center
        size: {padding: 8}

``position`` is ``center`` or ``{x, y}``; ``size`` is ``{padding}`` or
``{width, height}``.

Documents may be rendered as Jinja2 templates first, so that values such as
image handles can be substituted by the caller.
"""

from typing import Dict, List, Any, Optional, Tuple
import json
import yaml  # type: ignore[import-untyped]
from abc import ABC, abstractmethod
from cerberus import Validator  # type: ignore[import-untyped]
import jinja2
from pydantic import ValidationError

from footlights.config.logging import get_logger
from footlights.core.color.parser import linear_gradient, parse_color
from footlights.core.errors import FootlightsError
from footlights.core.registry import StyleRegistry
from footlights.core.style import (
    new_style,
    set_color,
    set_corner_radius,
    set_image,
    set_position,
    set_shadow,
    set_size,
)
from footlights.models.schemas import (
    AbsolutePosition,
    AbsoluteSize,
    CenterPosition,
    DropShadow,
    FitContentSize,
    LoadResult,
    Style,
)

logger = get_logger(__name__)


class StyleDocumentError(FootlightsError):
    """Raised when a style document is structurally invalid."""

    pass


class StyleDocumentValidator:
    """Structural validation of style documents using Cerberus schemas."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="validator")  # structlog.BoundLoggerBase
        self._setup_schemas()

    def _setup_schemas(self) -> None:
        """Setup validation schemas."""
        self.shadow_schema = {
            "x": {"type": "integer"},
            "y": {"type": "integer"},
            "blur": {"type": "integer"},
            "opacity": {"type": "number", "min": 0.0, "max": 1.0},
        }

        self.linear_schema = {
            "stops": {"type": "list", "required": True, "schema": {"type": ["list", "dict"]}},
            "angle": {"type": "number"},
        }

        self.position_schema = {
            "x": {"type": "integer", "required": True},
            "y": {"type": "integer", "required": True},
        }

        self.fit_size_schema = {"padding": {"type": "integer", "required": True}}

        self.absolute_size_schema = {
            "width": {"type": "integer", "required": True},
            "height": {"type": "integer", "required": True},
        }

        # Colors are either a color string or {"linear": {...}} and positions
        # either "center" or {"x", "y"}; nested shapes are checked in
        # _validate_style.
        self.style_schema = {
            "color": {"type": ["string", "dict"], "nullable": True},
            "image": {"type": "string", "nullable": True},
            "corner_radius": {"type": "integer", "nullable": True},
            "shadow": {"type": "dict", "schema": self.shadow_schema, "nullable": True},
            "position": {"type": ["string", "dict"], "nullable": True},
            "size": {
                "type": "dict",
                "nullable": True,
                "oneof_schema": [self.fit_size_schema, self.absolute_size_schema],
            },
        }

        self.document_schema: Dict[str, Any] = {
            "styles": {
                "type": "dict",
                "required": True,
                "keysrules": {"type": "string"},
                "valuesrules": {"type": "dict", "schema": self.style_schema, "nullable": True},
            },
            "version": {"type": "string", "default": "1.0"},
        }

    def validate_document(self, data: Dict[str, Any]) -> Tuple[bool, List[str], List[str]]:
        """
        Validate style document structure.

        Args:
            data: Document data to validate

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        validator = Validator(self.document_schema)  # type: ignore[misc]
        validator.allow_unknown = False  # type: ignore[attr-defined]

        is_valid = validator.validate(data)  # type: ignore[misc]
        errors: List[str] = []
        warnings: List[str] = []

        if not is_valid:
            errors.extend(self._format_validation_errors(validator.errors))  # type: ignore[attr-defined]
            return False, errors, warnings

        styles = data.get("styles") or {}
        if not styles:
            warnings.append("Document defines no styles")

        for name, style_data in styles.items():
            style_errors, style_warnings = self._validate_style(name, style_data)
            errors.extend(style_errors)
            warnings.extend(style_warnings)

        return len(errors) == 0, errors, warnings

    def _format_validation_errors(self, errors: Any, path: str = "") -> List[str]:
        """Format Cerberus validation errors into readable messages."""
        formatted_errors: List[str] = []

        for field, error_info in errors.items():
            current_path = f"{path}.{field}" if path else str(field)

            if isinstance(error_info, list):
                for error in error_info:
                    if isinstance(error, dict):
                        formatted_errors.extend(self._format_validation_errors(error, current_path))
                    else:
                        formatted_errors.append(f"{current_path}: {error}")
            elif isinstance(error_info, dict):
                formatted_errors.extend(self._format_validation_errors(error_info, current_path))

        return formatted_errors

    def _validate_style(
        self, name: str, style_data: Optional[Dict[str, Any]]
    ) -> Tuple[List[str], List[str]]:
        """Validate the nested color shape and flag empty styles."""
        errors: List[str] = []
        warnings: List[str] = []
        path = f"styles.{name}"

        if not style_data or all(value is None for value in style_data.values()):
            warnings.append(f"{path}: Style sets no attributes and renders an empty element")
            return errors, warnings

        color = style_data.get("color")
        if isinstance(color, dict):
            if set(color) != {"linear"} or not isinstance(color["linear"], dict):
                errors.append(f"{path}.color: Expected a color string or a 'linear' mapping")
            else:
                validator = Validator(self.linear_schema)  # type: ignore[misc]
                if not validator.validate(color["linear"]):  # type: ignore[misc]
                    errors.extend(
                        self._format_validation_errors(
                            validator.errors, f"{path}.color.linear"  # type: ignore[attr-defined]
                        )
                    )

        position = style_data.get("position")
        if isinstance(position, str) and position != "center":
            errors.append(f"{path}.position: Expected 'center' or an {{x, y}} mapping")
        elif isinstance(position, dict):
            validator = Validator(self.position_schema)  # type: ignore[misc]
            if not validator.validate(position):  # type: ignore[misc]
                errors.extend(
                    self._format_validation_errors(
                        validator.errors, f"{path}.position"  # type: ignore[attr-defined]
                    )
                )

        return errors, warnings


def build_style(style_data: Optional[Dict[str, Any]]) -> Style:
    """
    Build a Style from validated document data.

    Raises:
        FootlightsError: If a color, gradient or dimension is invalid
        ValidationError: If shadow values fail model validation
    """
    style = new_style()
    if not style_data:
        return style

    color = style_data.get("color")
    if isinstance(color, str):
        style = set_color(style, parse_color(color))
    elif isinstance(color, dict):
        linear = color["linear"]
        style = set_color(style, linear_gradient(linear["stops"], linear.get("angle")))

    if style_data.get("image") is not None:
        style = set_image(style, style_data["image"])

    if style_data.get("corner_radius") is not None:
        style = set_corner_radius(style, style_data["corner_radius"])

    if style_data.get("shadow") is not None:
        style = set_shadow(style, DropShadow(**style_data["shadow"]))

    position = style_data.get("position")
    if position == "center":
        style = set_position(style, CenterPosition())
    elif isinstance(position, dict):
        style = set_position(style, AbsolutePosition(**position))

    size = style_data.get("size")
    if isinstance(size, dict):
        if "padding" in size:
            style = set_size(style, FitContentSize(**size))
        else:
            style = set_size(style, AbsoluteSize(**size))

    return style


class BaseStyleDocumentParser(ABC):
    """Abstract base class for style document parsers."""

    def __init__(self) -> None:
        self.validator = StyleDocumentValidator()

    @abstractmethod
    def decode(self, content: str) -> Any:
        """Decode raw content into Python data."""
        pass

    @abstractmethod
    def validate_syntax(self, content: str) -> bool:
        """Validate document syntax without building styles."""
        pass

    def parse(self, content: str) -> LoadResult:
        """
        Parse a style document into a populated registry.

        Args:
            content: Raw document content

        Returns:
            LoadResult containing the registry or errors
        """
        try:
            raw_data = self.decode(content)
        except StyleDocumentError as e:
            self.logger.error("Style document decoding failed", error=e.message)
            return LoadResult(success=False, errors=[e.message], error_details=[e.to_dict()])

        if not isinstance(raw_data, dict):
            error_msg = f"Style document must be a mapping, got {type(raw_data).__name__}"
            return LoadResult(success=False, errors=[error_msg])

        is_valid, errors, warnings = self.validator.validate_document(raw_data)
        if not is_valid:
            return LoadResult(success=False, errors=errors, warnings=warnings)

        return self._build_registry(raw_data, warnings)

    def _build_registry(self, raw_data: Dict[str, Any], warnings: List[str]) -> LoadResult:
        registry = StyleRegistry()
        errors: List[str] = []
        details: List[Dict[str, Any]] = []

        for name, style_data in (raw_data.get("styles") or {}).items():
            try:
                registry.add_style(name, build_style(style_data))
            except FootlightsError as e:
                e.with_style(name)
                errors.append(str(e))
                details.append(e.to_dict())
            except ValidationError as e:
                errors.append(f"style '{name}': {e.errors()[0]['msg']}")

        if errors:
            self.logger.warning("Style document rejected", error_count=len(errors))
            return LoadResult(
                success=False, errors=errors, warnings=warnings, error_details=details
            )

        self.logger.info("Style document loaded", style_count=len(registry))
        return LoadResult(success=True, registry=registry, warnings=warnings)


class JSONStyleDocumentParser(BaseStyleDocumentParser):
    """JSON style document parser."""

    def __init__(self) -> None:
        super().__init__()
        self.logger: Any = logger.bind(parser="json")

    def decode(self, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise StyleDocumentError(
                f"Invalid JSON syntax at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e

    def validate_syntax(self, content: str) -> bool:
        try:
            json.loads(content)
            return True
        except json.JSONDecodeError:
            return False


class YAMLStyleDocumentParser(BaseStyleDocumentParser):
    """YAML style document parser."""

    def __init__(self) -> None:
        super().__init__()
        self.logger: Any = logger.bind(parser="yaml")

    def decode(self, content: str) -> Any:
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise StyleDocumentError(f"Invalid YAML syntax: {e}") from e
        if raw_data is None:
            raise StyleDocumentError("Empty YAML document")
        return raw_data

    def validate_syntax(self, content: str) -> bool:
        try:
            yaml.safe_load(content)
            return True
        except yaml.YAMLError:
            return False


class StyleDocumentParserFactory:
    """Factory for creating style document parsers."""

    _parsers = {
        "json": JSONStyleDocumentParser,
        "yaml": YAMLStyleDocumentParser,
    }

    @classmethod
    def create_parser(cls, parser_type: str) -> BaseStyleDocumentParser:
        """
        Create a parser instance.

        Raises:
            ValueError: If parser type is not supported
        """
        if parser_type not in cls._parsers:
            raise ValueError(f"Unsupported parser type: {parser_type}")

        return cls._parsers[parser_type]()

    @classmethod
    def detect_parser_type(cls, content: str) -> str:
        """Detect JSON or YAML from content."""
        content = content.strip()
        if content.startswith(("{", "[")):
            return "json"
        return "yaml"


def render_document_template(content: str, context: Dict[str, Any]) -> str:
    """
    Substitute ``{{ name }}`` placeholders in a style document.

    Raises:
        StyleDocumentError: If the template is invalid or uses undefined names
    """
    env = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False)
    try:
        return env.from_string(content).render(**context)
    except jinja2.TemplateError as e:
        raise StyleDocumentError(f"Style document template failed: {e}") from e


def load_styles(
    content: str,
    parser_type: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
) -> LoadResult:
    """
    Load a style document.

    Args:
        content: Raw document content
        parser_type: Optional parser type override ("json" or "yaml")
        context: Optional template values substituted before parsing

    Returns:
        LoadResult containing the populated registry or errors
    """
    if not content or not content.strip():
        return LoadResult(success=False, errors=["Empty style document provided"])

    if context is not None:
        try:
            content = render_document_template(content, context)
        except StyleDocumentError as e:
            return LoadResult(success=False, errors=[e.message], error_details=[e.to_dict()])

    if not parser_type:
        parser_type = StyleDocumentParserFactory.detect_parser_type(content)

    try:
        parser = StyleDocumentParserFactory.create_parser(parser_type)
    except ValueError as e:
        return LoadResult(success=False, errors=[str(e)])

    return parser.parse(content)
