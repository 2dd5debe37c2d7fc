"""
Color Grammar
=============

Recognition of textual CSS colors: named colors, hex notation and the
functional rgb()/rgba()/hsl()/hsla() notations in both the legacy comma
syntax and the space syntax with an optional ``/ alpha`` part.

Channel values are range checked per channel. Recognition never rewrites
the color; callers get the stripped input text back.
"""

import re
from typing import List, Optional, Tuple

from footlights.core.errors import InvalidColorSyntax


NAMED_COLORS = frozenset(
    {
        "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige", "bisque",
        "black", "blanchedalmond", "blue", "blueviolet", "brown", "burlywood",
        "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk",
        "crimson", "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
        "darkgreen", "darkgrey", "darkkhaki", "darkmagenta", "darkolivegreen",
        "darkorange", "darkorchid", "darkred", "darksalmon", "darkseagreen",
        "darkslateblue", "darkslategray", "darkslategrey", "darkturquoise",
        "darkviolet", "deeppink", "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
        "firebrick", "floralwhite", "forestgreen", "fuchsia", "gainsboro",
        "ghostwhite", "gold", "goldenrod", "gray", "green", "greenyellow", "grey",
        "honeydew", "hotpink", "indianred", "indigo", "ivory", "khaki", "lavender",
        "lavenderblush", "lawngreen", "lemonchiffon", "lightblue", "lightcoral",
        "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
        "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
        "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow", "lime",
        "limegreen", "linen", "magenta", "maroon", "mediumaquamarine", "mediumblue",
        "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
        "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
        "mintcream", "mistyrose", "moccasin", "navajowhite", "navy", "oldlace",
        "olive", "olivedrab", "orange", "orangered", "orchid", "palegoldenrod",
        "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff",
        "peru", "pink", "plum", "powderblue", "purple", "rebeccapurple", "red",
        "rosybrown", "royalblue", "saddlebrown", "salmon", "sandybrown", "seagreen",
        "seashell", "sienna", "silver", "skyblue", "slateblue", "slategray",
        "slategrey", "snow", "springgreen", "steelblue", "tan", "teal", "thistle",
        "tomato", "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
        "yellowgreen",
    }
)

SPECIAL_KEYWORDS = frozenset({"transparent", "currentcolor"})

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNCTION_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(
    r"^(?P<value>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?P<unit>%|deg|grad|rad|turn)?$",
    re.IGNORECASE,
)

_HUE_UNITS = {None, "deg", "grad", "rad", "turn"}


def _parse_token(token: str) -> Tuple[float, Optional[str]]:
    """Split a numeric token into its value and lower-cased unit."""
    match = _NUMBER_RE.match(token)
    if not match:
        raise ValueError(f"'{token}' is not a number")
    unit = match.group("unit")
    return float(match.group("value")), unit.lower() if unit else None


def _check_rgb_channel(token: str) -> None:
    value, unit = _parse_token(token)
    if unit == "%":
        if not 0 <= value <= 100:
            raise ValueError(f"channel '{token}' outside 0%-100%")
    elif unit is None:
        if not 0 <= value <= 255:
            raise ValueError(f"channel '{token}' outside 0-255")
    else:
        raise ValueError(f"channel '{token}' has unsupported unit")


def _check_hue(token: str) -> None:
    _, unit = _parse_token(token)
    if unit not in _HUE_UNITS:
        raise ValueError(f"hue '{token}' has unsupported unit")


def _check_percentage(token: str) -> None:
    value, unit = _parse_token(token)
    if unit not in (None, "%"):
        raise ValueError(f"'{token}' must be a percentage")
    if not 0 <= value <= 100:
        raise ValueError(f"'{token}' outside 0%-100%")


def _check_alpha(token: str) -> None:
    value, unit = _parse_token(token)
    if unit == "%":
        if not 0 <= value <= 100:
            raise ValueError(f"alpha '{token}' outside 0%-100%")
    elif unit is None:
        if not 0 <= value <= 1:
            raise ValueError(f"alpha '{token}' outside 0-1")
    else:
        raise ValueError(f"alpha '{token}' has unsupported unit")


def _split_arguments(body: str) -> Tuple[List[str], Optional[str]]:
    """Split a function body into its three channels and an optional alpha."""
    if "," in body:
        parts = [part.strip() for part in body.split(",")]
        if len(parts) not in (3, 4) or any(not part or "/" in part for part in parts):
            raise ValueError("expected 3 or 4 comma separated arguments")
        return parts[:3], parts[3] if len(parts) == 4 else None

    alpha: Optional[str] = None
    if "/" in body:
        body, _, alpha = body.partition("/")
        alpha = alpha.strip()
        if not alpha or len(alpha.split()) != 1:
            raise ValueError("expected a single alpha value after '/'")
    channels = body.split()
    if len(channels) != 3:
        raise ValueError("expected 3 space separated channels")
    return channels, alpha


def _check_function(name: str, body: str) -> None:
    channels, alpha = _split_arguments(body)
    if name.startswith("rgb"):
        for channel in channels:
            _check_rgb_channel(channel)
    else:
        _check_hue(channels[0])
        _check_percentage(channels[1])
        _check_percentage(channels[2])
    if alpha is not None:
        _check_alpha(alpha)


def validate_color(text: str) -> str:
    """
    Validate textual color syntax.

    Args:
        text: Color text such as ``"red"``, ``"#ff0000"`` or ``"hsl(240 46% 65%)"``

    Returns:
        The color text with surrounding whitespace removed

    Raises:
        InvalidColorSyntax: If the text is not a recognized color
    """
    if not isinstance(text, str):
        raise InvalidColorSyntax(f"Color must be text, got {type(text).__name__}")

    value = text.strip()
    if not value:
        raise InvalidColorSyntax("Color text is empty")

    lowered = value.lower()
    if lowered in NAMED_COLORS or lowered in SPECIAL_KEYWORDS:
        return value

    if value.startswith("#"):
        if _HEX_RE.match(value):
            return value
        raise InvalidColorSyntax(f"Invalid hex color '{value}'")

    match = _FUNCTION_RE.match(value)
    if not match:
        raise InvalidColorSyntax(f"Unrecognized color '{value}'")

    try:
        _check_function(match.group(1).lower(), match.group(2))
    except ValueError as e:
        raise InvalidColorSyntax(f"Invalid color '{value}': {e}") from e

    return value


def is_valid_color(text: str) -> bool:
    """Return True if the text is a recognized color."""
    try:
        validate_color(text)
        return True
    except InvalidColorSyntax:
        return False
