"""Game object generator."""
from __future__ import annotations

import logging
from typing import Any, Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.math3d import m_to_p, vec3
from tick_content.resolver import resolve
from tick_content.schema import Field, compile_record, is_number
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)

# One marker 0.3 m above the origin.
DEFAULT_MARKERS = [[0.0, 0.3, 0.0]]


class GameObjectGenerator(ObjectGenerator):
    kind = "gameObject"
    label = "Game object"
    dependencies = ("gameObject", "resource")

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        parts = self._parts(definition, ctx)
        if parts is None:
            return
        description, components, identifier = parts
        logger.info("Game object %s", identifier)
        label = f"Game object '{identifier}'"

        resource_identifier: Any = identifier
        link = ctx.component(components, "resource_link")
        if link is not None:
            resource_identifier = link.get("identifier") if isinstance(link, dict) else None

        resource_index = resolve(ctx.types("resource"), resource_identifier, "Resource")
        if resource_index is None:
            logger.warning("%s: skipped, it has no resource", label)
            return

        obj = ctx.component(components, "object")
        world_scale = ctx.config.world_scale

        def marker(position: Any) -> Record | None:
            if not isinstance(position, (list, tuple)) or len(position) != 3:
                return None
            if not all(is_number(v) for v in position):
                return None
            return {"world_offset": m_to_p(vec3(*position), world_scale)}

        record = compile_record(
            {
                "key": Field(
                    description,
                    "identifier",
                    required=True,
                    kind="string",
                    absent_from=ctx.types("gameObject"),
                    label="Game object",
                ),
                "name": Field(description, "name", required=True, kind="string"),
                "plural": Field(description, "plural", required=True, kind="string"),
                "model_name": Field(obj, "model", required=True, kind="string"),
                "scale": Field(obj, "scale", required=True, kind="number", default=1.0),
                "has_physics": Field(obj, "physics", required=True, kind="boolean", default=True),
                "marker_positions": Field(
                    obj,
                    "marker_positions",
                    required=True,
                    kind="list",
                    default=DEFAULT_MARKERS,
                    each=marker,
                ),
            },
            label,
        )
        if record is None:
            return
        record["resource_type_index"] = resource_index
        yield identifier, record
