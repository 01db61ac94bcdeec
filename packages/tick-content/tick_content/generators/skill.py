"""Skill generator. One definition carries a list of skills."""
from __future__ import annotations

import logging
from typing import Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.resolver import resolve
from tick_content.schema import Field, compile_record
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)


class SkillGenerator(ObjectGenerator):
    kind = "skill"
    label = "Skill"
    source = "skill"
    root = "skill_definition"
    dependencies = ("skill",)

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        body = self._body(definition, ctx)
        if body is None:
            return
        skills = body.get("skills")
        if not isinstance(skills, list):
            logger.warning("Skill definition has no skills list, skipped")
            return

        for entry in skills:
            if not isinstance(entry, dict) or not isinstance(entry.get("description"), dict):
                logger.warning("Skill entry has no description, skipped")
                continue
            description = entry["description"]
            placement = entry.get("skill")
            identifier = description.get("identifier")
            logger.info("Skill %s", identifier)

            # Looked up per entry: earlier skills in this list may be required.
            known = ctx.types("skill")
            record = compile_record(
                {
                    "identifier": Field(
                        description,
                        "identifier",
                        required=True,
                        kind="string",
                        absent_from=known,
                        label="Skill",
                    ),
                    "name": Field(description, "name", required=True, kind="string"),
                    "description": Field(description, "description", required=True, kind="string"),
                    "icon": Field(description, "icon", required=True, kind="string"),
                    "row": Field(placement, "row", required=True, kind="number"),
                    "column": Field(placement, "column", required=True, kind="number"),
                    "required_skill_types": Field(
                        placement,
                        "requiredSkills",
                        kind="list",
                        each=lambda name: resolve(known, name, "Skill"),
                    ),
                    "start_learned": Field(placement, "startLearned", kind="boolean"),
                    "partial_capacity_with_limited_general_ability": Field(
                        placement, "impactedByLimitedGeneralAbility", kind="boolean"
                    ),
                },
                f"Skill '{identifier}'",
            )
            if record is not None:
                yield record["identifier"], record
