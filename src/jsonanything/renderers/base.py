# topmark:header:start
#
#   project      : JSON Anything
#   file         : base.py
#   file_relpath : src/jsonanything/renderers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for format renderers.

A renderer turns a record set into text for one target notation. Renderers are
grouped into behavioral families (tabular, field list, declaration, statement,
pass-through); each family provides one parameterized base class, and concrete
targets only supply the bits of template that differ.

Renderers are registered with
[`register_format`][jsonanything.renderers.registry.register_format], which
instantiates the class once per target and binds the instance to that target.

Contract:
    - ``render()`` is total: it never raises for any JSON-like input.
    - ``render()`` is pure: no I/O, no mutation of the input, no shared state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from jsonanything.config.logging import get_logger
from jsonanything.constants import DEFAULT_CLASS_NAME, DEFAULT_TABLE_NAME

if TYPE_CHECKING:
    from jsonanything.config.logging import JsonAnythingLogger
    from jsonanything.core.formats import FormatFamily, TargetFormat

logger: JsonAnythingLogger = get_logger(__name__)


class FormatRenderer(ABC):
    """Base class for all format renderers.

    Class attributes:
        family (FormatFamily): The behavioral family of the renderer.
        default_name (str): Placeholder identifier used when no name is given.
        default_table (str): Placeholder table name used when no table is given.

    Attributes:
        target (TargetFormat | None): The target this instance was registered
            for; set by the registry at registration time.
    """

    family: ClassVar[FormatFamily]
    default_name: ClassVar[str] = DEFAULT_CLASS_NAME
    default_table: ClassVar[str] = DEFAULT_TABLE_NAME

    target: TargetFormat | None

    def __init__(self) -> None:
        self.target = None

    def __repr__(self) -> str:
        target = self.target.key if self.target is not None else None
        return f"{self.__class__.__name__}(target={target!r})"

    def render(self, value: Any, *, name: str | None = None, table: str | None = None) -> str:
        """Render a record set.

        Args:
            value (Any): A record, a sequence of records, or ``None``.
            name (str | None): Optional class/struct/interface name.
            table (str | None): Optional SQL table name.

        Returns:
            str: The rendered text.
        """
        logger.trace("Rendering %r with name=%r table=%r", self, name, table)
        return self.render_value(
            value,
            name=name or self.default_name,
            table=table or self.default_table,
        )

    @abstractmethod
    def render_value(self, value: Any, *, name: str, table: str) -> str:
        """Render a record set with resolved ``name`` and ``table`` placeholders."""
        ...
