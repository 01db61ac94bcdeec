"""Resource generator."""
from __future__ import annotations

import logging
import operator
from typing import Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.schema import Field, compile_record
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)


class ResourceGenerator(ObjectGenerator):
    """One resource per object definition, unless it links to another resource."""

    kind = "resource"
    label = "Resource"
    dependencies = ("resource",)

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        parts = self._parts(definition, ctx)
        if parts is None:
            return
        description, components, identifier = parts

        link = ctx.component(components, "resource_link")
        if link is not None:
            target = link.get("identifier") if isinstance(link, dict) else link
            logger.info(
                "Object %s linked to resource %s, no unique resource created",
                identifier,
                target,
            )
            return

        logger.info("Resource %s", identifier)
        label = f"Resource '{identifier}'"
        food = ctx.component(components, "food")
        decoration = ctx.component(components, "decoration")

        fields = {
            "key": Field(
                description,
                "identifier",
                required=True,
                kind="string",
                absent_from=ctx.types("resource"),
                label="Resource",
            ),
            "name": Field(description, "name", required=True, kind="string"),
            "plural": Field(description, "plural", required=True, kind="string"),
            "food_value": Field(food, "value", kind="number"),
            "food_portion_count": Field(food, "portions", kind="number"),
            "food_poisoning_chance": Field(food, "food_poison_chance", kind="number"),
            "default_to_eating_disabled": Field(food, "default_disabled", kind="boolean"),
        }
        if decoration is not None:
            fields["disallows_decoration_placing"] = Field(
                decoration,
                "enabled",
                kind="boolean",
                default=False,
                transform=operator.not_,
            )

        record = compile_record(fields, label)
        if record is None:
            return

        display_index = ctx.optional_types("gameObject").get(identifier)
        if display_index is not None:
            record["display_game_object_type_index"] = display_index

        yield identifier, record

        # Runs once the resource is registered.
        storage_link = ctx.component(components, "storage_link")
        if storage_link is None:
            return
        storage_identifier = (
            storage_link.get("identifier") if isinstance(storage_link, dict) else None
        )
        if not isinstance(storage_identifier, str):
            logger.warning("%s: storage link has no identifier", label)
            return
        ctx.state.link_storage(storage_identifier, identifier)
