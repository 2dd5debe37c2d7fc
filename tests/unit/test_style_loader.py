"""
Unit Tests for Style Documents
==============================

Tests for document validation, JSON/YAML parsing, templating and registry
construction.
"""

import json

import pytest
import yaml

from footlights.core.dsl.loader import (
    JSONStyleDocumentParser,
    StyleDocumentParserFactory,
    StyleDocumentValidator,
    YAMLStyleDocumentParser,
    build_style,
    load_styles,
    render_document_template,
    StyleDocumentError,
)
from footlights.core.rendering.renderer import HTMLRenderer
from footlights.models.schemas import (
    AbsolutePosition,
    AbsoluteSize,
    CenterPosition,
    DropShadow,
    FitContentSize,
    LinearGradient,
    SolidColor,
)

from tests.utils.assertions import (
    assert_failed_load_result,
    assert_fragment_order,
    assert_successful_load_result,
)
from tests.utils.data_generators import StyleDataGenerator, StyleDocumentGenerator


class TestStyleDocumentValidator:
    """Test structural validation."""

    @pytest.fixture
    def validator(self):
        return StyleDocumentValidator()

    def test_validator_initialization(self, validator):
        assert "styles" in validator.document_schema
        assert "color" in validator.style_schema
        assert "blur" in validator.shadow_schema

    def test_valid_document(self, validator):
        is_valid, errors, warnings = validator.validate_document(
            StyleDocumentGenerator.generate_full_document()
        )
        assert is_valid is True
        assert errors == []
        assert warnings == []

    def test_missing_styles(self, validator):
        is_valid, errors, _ = validator.validate_document({"version": "1.0"})
        assert is_valid is False
        assert any("styles" in error for error in errors)

    def test_unknown_attribute(self, validator):
        is_valid, errors, _ = validator.validate_document({"styles": {"a": {"opacity": 1}}})
        assert is_valid is False
        assert any("opacity" in error for error in errors)

    def test_wrong_attribute_type(self, validator):
        is_valid, errors, _ = validator.validate_document({"styles": {"a": {"corner_radius": "20"}}})
        assert is_valid is False
        assert any("corner_radius" in error for error in errors)

    def test_bad_color_mapping(self, validator):
        is_valid, errors, _ = validator.validate_document(
            {"styles": {"a": {"color": {"radial": {"stops": []}}}}}
        )
        assert is_valid is False
        assert any("styles.a.color" in error for error in errors)

    def test_linear_without_stops(self, validator):
        is_valid, errors, _ = validator.validate_document(
            {"styles": {"a": {"color": {"linear": {"angle": 10}}}}}
        )
        assert is_valid is False
        assert any("stops" in error for error in errors)

    @pytest.mark.parametrize("position", ["top-left", {"x": 1}, {"x": 1, "y": "2"}])
    def test_bad_position(self, validator, position):
        is_valid, errors, _ = validator.validate_document({"styles": {"a": {"position": position}}})
        assert is_valid is False
        assert any("styles.a.position" in error for error in errors)

    @pytest.mark.parametrize(
        "size", [{}, {"width": 10}, {"padding": 1, "width": 2, "height": 3}, {"padding": "1"}]
    )
    def test_bad_size(self, validator, size):
        is_valid, errors, _ = validator.validate_document({"styles": {"a": {"size": size}}})
        assert is_valid is False
        assert any("size" in error for error in errors)

    def test_empty_style_warns(self, validator):
        is_valid, _, warnings = validator.validate_document({"styles": {"a": {}}})
        assert is_valid is True
        assert any("styles.a" in warning for warning in warnings)

    def test_no_styles_warns(self, validator):
        is_valid, _, warnings = validator.validate_document({"styles": {}})
        assert is_valid is True
        assert "Document defines no styles" in warnings


class TestBuildStyle:
    """Test conversion of document data into styles."""

    def test_build_solid(self):
        style = build_style({"color": "red", "corner_radius": 4})
        assert style.color == SolidColor(value="red")
        assert style.corner_radius == 4

    def test_build_gradient_uses_default_angle(self):
        style = build_style({"color": {"linear": {"stops": [["red", "0%"]]}}})
        assert isinstance(style.color, LinearGradient)
        assert style.color.angle == 180

    def test_build_gradient_from_stop_mappings(self):
        style = build_style(
            {"color": {"linear": {"stops": [{"color": "red", "position": 10}], "angle": 5}}}
        )
        assert style.color.stops[0].as_pair() == ("red", 10.0)

    def test_build_shadow(self):
        style = build_style({"shadow": {"x": 1, "y": 1}})
        assert style.shadow == DropShadow(x=1, y=1)

    def test_build_layout(self):
        centered = build_style({"position": "center", "size": {"padding": 6}})
        assert centered.position == CenterPosition()
        assert centered.size == FitContentSize(padding=6)

        placed = build_style({"position": {"x": 4, "y": 5}, "size": {"width": 10, "height": 20}})
        assert placed.position == AbsolutePosition(x=4, y=5)
        assert placed.size == AbsoluteSize(width=10, height=20)

    def test_build_empty(self):
        assert build_style(None).is_empty()


class TestParsers:
    """Test JSON and YAML parsers."""

    def test_parse_json(self):
        content = json.dumps(StyleDocumentGenerator.generate_demo_document())
        result = JSONStyleDocumentParser().parse(content)

        assert_successful_load_result(result)
        assert result.registry.names() == ["bg", "img"]

    def test_parse_yaml(self):
        content = yaml.dump(StyleDocumentGenerator.generate_full_document(), sort_keys=False)
        result = YAMLStyleDocumentParser().parse(content)

        assert_successful_load_result(result)
        assert result.registry.names() == ["panel", "card", "badge"]

    def test_invalid_json_syntax(self):
        result = JSONStyleDocumentParser().parse('{"styles": {')
        assert_failed_load_result(result, ["Invalid JSON syntax"])

    def test_invalid_yaml_syntax(self):
        result = YAMLStyleDocumentParser().parse('styles:\n  a: "unterminated\n')
        assert_failed_load_result(result, ["Invalid YAML syntax"])

    def test_empty_yaml(self):
        result = YAMLStyleDocumentParser().parse("# nothing here\n")
        assert_failed_load_result(result, ["Empty YAML document"])

    def test_non_mapping_document(self):
        result = YAMLStyleDocumentParser().parse("- a\n- b\n")
        assert_failed_load_result(result, ["must be a mapping"])

    def test_validate_syntax(self):
        assert JSONStyleDocumentParser().validate_syntax("{}") is True
        assert JSONStyleDocumentParser().validate_syntax("{") is False
        assert YAMLStyleDocumentParser().validate_syntax("a: b") is True
        assert YAMLStyleDocumentParser().validate_syntax("a: [b") is False

    def test_factory(self):
        assert isinstance(StyleDocumentParserFactory.create_parser("json"), JSONStyleDocumentParser)
        with pytest.raises(ValueError):
            StyleDocumentParserFactory.create_parser("toml")

    @pytest.mark.parametrize(
        "content,expected", [('{"styles": {}}', "json"), ("styles: {}", "yaml"), ("  [1]", "json")]
    )
    def test_detect_parser_type(self, content, expected):
        assert StyleDocumentParserFactory.detect_parser_type(content) == expected


class TestLoadStyles:
    """Test the load_styles entry point."""

    def test_demo_document_matches_built_registry(self):
        content = yaml.dump(StyleDocumentGenerator.generate_demo_document(), sort_keys=False)
        result = load_styles(content)

        assert_successful_load_result(result)
        expected = StyleDataGenerator.generate_demo_registry()
        assert HTMLRenderer().render(result.registry) == HTMLRenderer().render(expected)

    def test_document_order_is_render_order(self):
        content = "styles:\n  z: {corner_radius: 1}\n  a: {corner_radius: 2}\n  m: {color: red}\n"
        result = load_styles(content)

        assert_successful_load_result(result)
        assert_fragment_order(HTMLRenderer().render(result.registry), ["z", "a", "m"])

    def test_layout_document_renders(self):
        content = (
            "styles:\n"
            "  img:\n"
            "    image: ./logo.svg\n"
            "    shadow: {x: 0, y: 0, blur: 1}\n"
            "    position: center\n"
            "    size: {padding: 2}\n"
        )
        result = load_styles(content)

        assert_successful_load_result(result)
        html = HTMLRenderer().render(result.registry)
        assert "transform: translate(-50%, -50%)" in html
        assert "padding: 6px 6px" in html

    def test_shadow_opacity_error_names_the_style(self):
        result = load_styles('{"styles": {"a": {"shadow": {"opacity": 2}}}}')
        assert_failed_load_result(result, ["styles.a.shadow.opacity"])

    def test_errors_name_the_style(self):
        content = (
            "styles:\n"
            "  good: {color: red}\n"
            "  bad_color: {color: 'hsl(400 200% 10%)'}\n"
            "  bad_radius: {corner_radius: -3}\n"
            "  bad_stop: {color: {linear: {stops: [[red, '0%'], [blue, '101%']]}}}\n"
        )
        result = load_styles(content)

        assert_failed_load_result(
            result, ["style 'bad_color'", "style 'bad_radius'", "style 'bad_stop'"]
        )
        kinds = {detail["style_name"]: detail["error"] for detail in result.error_details}
        assert kinds == {
            "bad_color": "InvalidColorSyntax",
            "bad_radius": "InvalidDimension",
            "bad_stop": "InvalidStopPosition",
        }

    def test_shadow_model_errors_are_reported(self):
        result = load_styles("styles:\n  a: {shadow: {x: -1}}\n")
        assert_failed_load_result(result, ["style 'a'"])

    def test_empty_content(self):
        assert_failed_load_result(load_styles("   "), ["Empty style document provided"])

    def test_unsupported_parser(self):
        assert_failed_load_result(load_styles("styles: {}", parser_type="toml"), ["Unsupported"])

    def test_template_context(self):
        content = 'styles:\n  img: {image: "{{ image }}", corner_radius: 20}\n'
        result = load_styles(content, context={"image": "data:image/png;base64,AAAA"})

        assert_successful_load_result(result)
        assert result.registry.get_style("img").image == "data:image/png;base64,AAAA"

    def test_template_undefined_name(self):
        result = load_styles('styles:\n  img: {image: "{{ missing }}"}\n', context={})
        assert_failed_load_result(result, ["template failed"])

    def test_render_document_template_error(self):
        with pytest.raises(StyleDocumentError):
            render_document_template("{% if %}", {})
