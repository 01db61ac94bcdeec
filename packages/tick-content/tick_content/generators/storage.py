"""Storage generator."""
from __future__ import annotations

import logging
from typing import Callable, Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.math3d import m_to_p, mat3_identity, mat3_rotate, value_for_unique_id
from tick_content.modules import StorageRegistry
from tick_content.resolver import resolve
from tick_content.schema import Field, compile_record, extract, vec3_field
from tick_content.types import Definition, Mat3, Record, Vec3

logger = logging.getLogger(__name__)

_ZERO = (0.0, 0.0, 0.0)


def make_rotation_function(weight: float, axis: Vec3) -> Callable[[int, int], Mat3]:
    """Return ``rotation_function(unique_id, seed) -> Mat3`` for placed instances."""

    def rotation_function(unique_id: int, seed: int) -> Mat3:
        value = value_for_unique_id(unique_id, seed)
        return mat3_rotate(mat3_identity(), value * weight, axis)

    return rotation_function


class StorageGenerator(ObjectGenerator):
    kind = "storage"
    label = "Storage"
    source = "storage"
    root = "storage_definition"
    dependencies = ("storage",)

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        parts = self._parts(definition, ctx)
        if parts is None:
            return
        description, components, identifier = parts
        logger.info("Storage %s", identifier)
        label = f"Storage '{identifier}'"

        storages: StorageRegistry = ctx.modules.get("storage")
        storage = ctx.component(components, "storage")
        carry = ctx.component(components, "carry")
        carry_counts = extract(Field(carry, "carry_count", kind="table", default={}), label)

        data = compile_record(
            {
                "key": Field(
                    description,
                    "identifier",
                    required=True,
                    kind="string",
                    absent_from=storages.types,
                    label="Storage",
                ),
                "name": Field(description, "name", required=True, kind="string"),
                "random_rotation_weight": Field(
                    storage, "random_rotation_weight", required=True, kind="number", default=2.0
                ),
                "rotation": vec3_field(storage, "rotation", default=_ZERO, required=True),
                "size": vec3_field(storage, "size", default=(0.5, 0.5, 0.5), required=True),
                "rotate_to_fit": Field(
                    storage,
                    "rotate_to_fit_below_surface",
                    required=True,
                    kind="boolean",
                    default=True,
                ),
                "offset": vec3_field(storage, "offset", default=_ZERO, required=True),
                "max_carry_count": Field(
                    carry_counts, "normal", required=True, kind="number", default=1
                ),
                "max_carry_count_limited_ability": Field(
                    carry_counts, "limited_ability", required=True, kind="number", default=1
                ),
                "max_carry_count_for_running": Field(
                    carry_counts, "running", required=True, kind="number", default=1
                ),
                "carry_stack_type": Field(
                    carry,
                    "stack_type",
                    required=True,
                    kind="string",
                    default="standard",
                    exists_in=storages.stack_types,
                    transform=storages.stack_types.get,
                    label="Stack type",
                ),
                "carry_type": Field(
                    carry,
                    "carry_type",
                    required=True,
                    kind="string",
                    default="standard",
                    exists_in=storages.carry_types,
                    transform=storages.carry_types.get,
                    label="Carry type",
                ),
                "carry_offset": vec3_field(carry, "offset", default=_ZERO, required=True),
                "carry_rotation_constant": Field(
                    carry, "rotation_constant", required=True, kind="number", default=1
                ),
                "carry_rotation_axis": vec3_field(carry, "rotation", default=_ZERO, required=True),
            },
            label,
        )
        if data is None:
            return

        record: Record = {
            "key": data["key"],
            "name": data["name"],
            "resources": self._resources_for(identifier, ctx),
            "storage_box": {
                "size": data["size"],
                "rotation_function": make_rotation_function(
                    data["random_rotation_weight"], data["rotation"]
                ),
                "dont_rotate_to_fit_below_surface": data["rotate_to_fit"],
                "place_object_offset": m_to_p(data["offset"], ctx.config.world_scale),
            },
            "max_carry_count": data["max_carry_count"],
            "max_carry_count_limited_ability": data["max_carry_count_limited_ability"],
            "max_carry_count_for_running": data["max_carry_count_for_running"],
            "carry_stack_type": data["carry_stack_type"],
            "carry_type": data["carry_type"],
            "carry_offset": data["carry_offset"],
            "carry_rotation": mat3_rotate(
                mat3_identity(), data["carry_rotation_constant"], data["carry_rotation_axis"]
            ),
        }

        preview = extract(Field(storage, "preview_object", kind="string"), label)
        if preview is not None:
            index = resolve(ctx.optional_types("gameObject"), preview, "Game object")
            if index is not None:
                record["display_game_object_type_index"] = index

        yield identifier, record

    def _resources_for(self, identifier: str, ctx: GeneratorContext) -> list[int]:
        linked = ctx.state.storage_links.get(identifier)
        if not linked:
            logger.warning(
                "Storage %s is being generated with zero resources", identifier
            )
            return []
        resources = ctx.optional_types("resource")
        indices = []
        for object_identifier in linked:
            index = resolve(resources, object_identifier, "Resource")
            if index is not None:
                indices.append(index)
        return indices
