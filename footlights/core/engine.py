"""
Engine
======

One rendering context: a style registry and the renderer that draws it.
Engine instances share no state.
"""

from typing import Any, List, Optional, Union

from footlights.config.logging import get_logger
from footlights.core.registry import StyleRegistry
from footlights.core.rendering.renderer import HTMLRenderer, ReferencePolicy
from footlights.models.schemas import Style

logger = get_logger(__name__)


class Engine:
    """Style registry plus renderer behind a small call surface."""

    def __init__(
        self,
        registry: Optional[StyleRegistry] = None,
        policy: Optional[Union[ReferencePolicy, str]] = None,
    ) -> None:
        self.registry = registry if registry is not None else StyleRegistry()
        self.renderer = HTMLRenderer(policy=policy)
        self.logger: Any = logger.bind(component="engine")

    def add_style(self, name: str, style: Style) -> None:
        self.registry.add_style(name, style)

    def remove_style(self, name: str) -> None:
        self.registry.remove_style(name)

    def get_style(self, name: str) -> Optional[Style]:
        return self.registry.get_style(name)

    def style_names(self) -> List[str]:
        return self.registry.names()

    def render(self) -> str:
        """Render the current registry state."""
        return self.renderer.render(self.registry)
