"""ObjectGenerator base class and the context generators run in."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Mapping

from tick_content.config import LoaderConfig
from tick_content.modules import ModuleManager
from tick_content.resolver import TypeTable
from tick_content.types import Definition, LoaderState, Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorContext:
    """Live host modules and loader state shared by every generator."""

    modules: ModuleManager
    state: LoaderState
    config: LoaderConfig

    def types(self, module: str) -> TypeTable:
        """Identifier -> index table of *module*. Raises KeyError if not added."""
        return self.modules.get(module).types

    def optional_types(self, module: str) -> TypeTable:
        """Like ``types`` but empty when the module has not been added."""
        if not self.modules.has(module):
            return {}
        return self.types(module)

    def component(self, components: Mapping[str, Any], name: str) -> Any:
        return components.get(self.config.key(name))


class ObjectGenerator:
    """Translates raw definitions of one object kind into host records.

    Subclasses implement ``translate`` as a generator yielding
    ``(identifier, record)`` pairs. ``generate`` registers each pair before
    asking for the next one, so later records in the same definition see
    earlier ones in the host tables, and code after a ``yield`` runs once that
    record is registered.
    """

    kind: ClassVar[str] = ""
    label: ClassVar[str] = ""
    source: ClassVar[str] = "object"
    root: ClassVar[str] = "object_definition"
    dependencies: ClassVar[tuple[str, ...]] = ()

    def generate(self, definition: Definition, ctx: GeneratorContext) -> int:
        """Translate and register one definition. Returns records registered."""
        count = 0
        for identifier, record in self.translate(definition, ctx):
            self.register(identifier, record, ctx)
            count += 1
        return count

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        raise NotImplementedError

    def register(self, identifier: str, record: Record, ctx: GeneratorContext) -> int:
        return ctx.modules.get(self.kind).add(identifier, record)

    # --- Document helpers ---

    def _body(self, definition: Definition, ctx: GeneratorContext) -> dict[str, Any] | None:
        root_key = ctx.config.key(self.root)
        body = definition.get(root_key) if isinstance(definition, dict) else None
        if not isinstance(body, dict):
            logger.warning("%s definition has no '%s' section, skipped", self.label, root_key)
            return None
        return body

    def _parts(
        self, definition: Definition, ctx: GeneratorContext
    ) -> tuple[dict[str, Any], dict[str, Any], str] | None:
        """Return ``(description, components, identifier)`` or None if malformed."""
        body = self._body(definition, ctx)
        if body is None:
            return None
        description = body.get("description")
        if not isinstance(description, dict):
            logger.warning("%s definition has no description, skipped", self.label)
            return None
        identifier = description.get("identifier")
        if not isinstance(identifier, str) or not identifier:
            logger.warning("%s definition has no identifier, skipped", self.label)
            return None
        components = body.get("components")
        if not isinstance(components, dict):
            components = {}
        return description, components, identifier
