# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/renderers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all renderer modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from jsonanything.config.logging import get_logger
from jsonanything.core.formats import TargetFormat
from jsonanything.renderers.base import FormatRenderer
from jsonanything.renderers.registry import get_renderer_registry

logger = get_logger(__name__)

_NON_RENDERER_MODULES: frozenset[str] = frozenset({"base", "registry", "typemaps"})


def register_all_renderers() -> None:
    """Import all renderer modules in the current package.

    Importing a module runs its ``@register_format`` decorators. Python caches
    imported modules, so calling this more than once is harmless.
    """
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name not in _NON_RENDERER_MODULES:
            importlib.import_module(f"{__name__}.{module_info.name}")


def get_renderer(target: TargetFormat) -> FormatRenderer | None:
    """Return the renderer registered for ``target``, or None if there is none.

    Args:
        target (TargetFormat): The target format.

    Returns:
        FormatRenderer | None: The bound renderer instance.
    """
    register_all_renderers()
    registry = get_renderer_registry()
    renderer = registry.get(target)
    if renderer is None:
        logger.warning("Target format '%s' has no registered renderer", target.key)
    else:
        logger.trace("Resolved target '%s' to %r", target.key, renderer)
    return renderer


def iter_registered_targets() -> list[TargetFormat]:
    """Return the registered target formats in declaration order."""
    register_all_renderers()
    registry = get_renderer_registry()
    return [target for target in TargetFormat if target in registry]
