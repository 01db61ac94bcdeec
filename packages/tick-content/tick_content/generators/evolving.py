"""Evolving object generator, e.g. an orange rotting into a rotten orange."""
from __future__ import annotations

import logging
from typing import Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.modules import EvolvingObjectRegistry
from tick_content.resolver import resolve
from tick_content.schema import Field, compile_record
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)


class EvolvingObjectGenerator(ObjectGenerator):
    kind = "evolvingObject"
    label = "Evolving object"
    dependencies = ("evolvingObject", "gameObject")

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        parts = self._parts(definition, ctx)
        if parts is None:
            return
        _, components, identifier = parts

        component = ctx.component(components, "evolving_object")
        if component is None:
            return
        logger.info("Evolving object %s", identifier)

        evolving: EvolvingObjectRegistry = ctx.modules.get("evolvingObject")
        game_objects = ctx.types("gameObject")

        # min_time is measured in days.
        record = compile_record(
            {
                "min_time": Field(
                    component,
                    "min_time",
                    required=True,
                    kind="number",
                    transform=lambda days: days * evolving.day_length,
                ),
                "category_index": Field(
                    component,
                    "category",
                    required=True,
                    kind="string",
                    exists_in=evolving.categories,
                    transform=evolving.categories.get,
                    label="Evolution category",
                ),
                "to_types": Field(
                    component,
                    "transform_to",
                    kind="list",
                    each=lambda target: resolve(game_objects, target, "Game object"),
                ),
            },
            f"Evolving object '{identifier}'",
        )
        if record is not None:
            yield identifier, record
