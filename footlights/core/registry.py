"""
Style Registry
==============

Ordered mapping from style name to Style for one rendering context.

Insertion order is render order. Re-registering a name replaces its style in
place, keeping the position of the first registration.
"""

import threading
from typing import Any, Dict, Iterator, List, Optional, Tuple

from footlights.config.logging import get_logger
from footlights.models.schemas import Style

logger = get_logger(__name__)


class StyleRegistry:
    """Named styles available to a render pass."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="registry")  # structlog.BoundLoggerBase
        self._styles: Dict[str, Style] = {}
        # One lock covers mutation and snapshots so a render never sees a
        # partially applied update.
        self._lock = threading.RLock()

    def add_style(self, name: str, style: Style) -> None:
        """
        Insert or replace the style registered under ``name``.

        Args:
            name: Style name
            style: Style value

        Raises:
            TypeError: If name is not a string or style is not a Style
        """
        if not isinstance(name, str):
            raise TypeError(f"Style name must be a string, got {type(name).__name__}")
        if not isinstance(style, Style):
            raise TypeError(f"Expected Style, got {type(style).__name__}")

        with self._lock:
            replaced = name in self._styles
            # dict assignment keeps the existing key position
            self._styles[name] = style

        self.logger.debug("Style registered", style=name, replaced=replaced)

    def remove_style(self, name: str) -> None:
        """Remove the style registered under ``name``; absent names are ignored."""
        with self._lock:
            removed = self._styles.pop(name, None) is not None

        if removed:
            self.logger.debug("Style removed", style=name)

    def get_style(self, name: str) -> Optional[Style]:
        """Look up a style by name."""
        with self._lock:
            return self._styles.get(name)

    def names(self) -> List[str]:
        """Style names in registration order."""
        with self._lock:
            return list(self._styles)

    def snapshot(self) -> Tuple[Tuple[str, Style], ...]:
        """Consistent, ordered view of the registry for one render pass."""
        with self._lock:
            return tuple(self._styles.items())

    def clear(self) -> None:
        with self._lock:
            self._styles.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._styles)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"StyleRegistry(names={self.names()!r})"
