# topmark:header:start
#
#   project      : JSON Anything
#   file         : registry.py
#   file_relpath : src/jsonanything/renderers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of FormatRenderers for JSON Anything target formats.

This module provides a decorator to register FormatRenderer implementations for
specific target formats. Each renderer class is instantiated once per target it
is registered for, so one class can serve several keys (e.g. the SQL dialects).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonanything.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from jsonanything.core.formats import TargetFormat
    from jsonanything.renderers.base import FormatRenderer

logger = get_logger(__name__)


_registry: dict[TargetFormat, FormatRenderer] = {}


def register_format(
    target: TargetFormat,
) -> Callable[[type[FormatRenderer]], type[FormatRenderer]]:
    """Class decorator to register a FormatRenderer for a specific target format.

    Args:
        target (TargetFormat): The target format served by the decorated class.

    Returns:
        Callable[[type[FormatRenderer]], type[FormatRenderer]]: A decorator that
            registers the class as a FormatRenderer.
    """

    def decorator(cls: type[FormatRenderer]) -> type[FormatRenderer]:
        """Instantiate ``cls``, bind the instance to ``target`` and register it.

        Args:
            cls (type[FormatRenderer]): The class to register.

        Raises:
            ValueError: If ``target`` already has a registered renderer.

        Returns:
            type[FormatRenderer]: The decorated class, unchanged.
        """
        logger.debug("Registering renderer %s for target: %s", cls.__name__, target.key)
        if target in _registry:
            raise ValueError(f"Target format '{target.key}' already has a registered renderer.")
        instance = cls()
        instance.target = target
        _registry[target] = instance
        return cls

    return decorator


def get_renderer_registry() -> dict[TargetFormat, FormatRenderer]:
    """Return the registry of target formats to FormatRenderer instances."""
    return _registry
