"""Material generator. One definition carries a list of materials."""
from __future__ import annotations

import logging
from typing import Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.schema import Field, compile_record, vec3_field
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)


class MaterialGenerator(ObjectGenerator):
    kind = "material"
    label = "Material"
    source = "material"
    root = "material_definition"
    dependencies = ("material",)

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        body = self._body(definition, ctx)
        if body is None:
            return
        materials = body.get("materials")
        if not isinstance(materials, list):
            logger.warning("Material definition has no materials list, skipped")
            return

        for material in materials:
            if not isinstance(material, dict):
                logger.warning("Material entry should be a table, got %r", material)
                continue
            identifier = material.get("identifier")
            logger.info("Material %s", identifier)
            record = compile_record(
                {
                    "identifier": Field(
                        material,
                        "identifier",
                        required=True,
                        kind="string",
                        absent_from=ctx.types("material"),
                        label="Material",
                    ),
                    "color": vec3_field(material, "color", required=True),
                    "roughness": Field(material, "roughness", required=True, kind="number"),
                    "metal": Field(material, "metal", kind="number"),
                },
                f"Material '{identifier}'",
            )
            if record is not None:
                yield record["identifier"], record
