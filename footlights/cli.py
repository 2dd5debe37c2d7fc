"""
Command Line Renderer
=====================

Render a YAML/JSON style document to HTML.

    footlights --config styles.yml --image logo.png --output canvas.html

``--image`` is encoded as a base64 data URL and exposed to the document as
the ``{{ image }}`` placeholder.
"""

import argparse
import base64
import mimetypes
import sys
from pathlib import Path
from typing import Dict, List, Optional

from footlights import __version__
from footlights.config.logging import get_logger
from footlights.core.dsl.loader import load_styles
from footlights.core.errors import FootlightsError
from footlights.core.rendering.renderer import HTMLRenderer, ReferencePolicy

logger = get_logger(__name__)


def encode_data_url(path: Path) -> str:
    """Encode a file as a base64 data URL."""
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="footlights", description="Render a style document to HTML"
    )
    parser.add_argument("--config", "-c", required=True, help="Style document (YAML or JSON)")
    parser.add_argument("--output", "-o", help="Output HTML file (default: stdout)")
    parser.add_argument("--image", help="Image file exposed to the document as {{ image }}")
    parser.add_argument(
        "--format", choices=["json", "yaml"], help="Document format (default: detect)"
    )
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Drop unresolved image references instead of failing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line renderer."""
    args = build_parser().parse_args(argv)

    config_file = Path(args.config)
    if not config_file.exists():
        print(f"Style document does not exist: {config_file}", file=sys.stderr)
        return 1

    context: Dict[str, str] = {}
    if args.image:
        image_file = Path(args.image)
        if not image_file.exists():
            print(f"Image file does not exist: {image_file}", file=sys.stderr)
            return 1
        context["image"] = encode_data_url(image_file)

    result = load_styles(
        config_file.read_text(encoding="utf-8"), parser_type=args.format, context=context
    )
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    if not result.success:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        return 1

    policy = ReferencePolicy.PERMISSIVE if args.permissive else None
    try:
        html = HTMLRenderer(policy=policy).render(result.registry)
    except FootlightsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html, encoding="utf-8")
        logger.info("Canvas written", output=str(output_file), html_length=len(html))
    else:
        sys.stdout.write(html + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
