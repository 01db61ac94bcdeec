"""Recipe (craftable) generator."""
from __future__ import annotations

import logging
from typing import Any, Iterator

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.modules import CraftableRegistry
from tick_content.resolver import TypeTable, resolve, resolve_each
from tick_content.schema import Field, compile_record, extract, is_number
from tick_content.types import Definition, Record

logger = logging.getLogger(__name__)


class RecipeGenerator(ObjectGenerator):
    """Builds craftables and indexes them by the craft areas that make them."""

    kind = "craftable"
    label = "Recipe"
    source = "recipe"
    root = "recipe_definition"
    dependencies = (
        "craftable",
        "gameObject",
        "resource",
        "skill",
        "tool",
        "craftAreaGroup",
        "action",
        "actionSequence",
    )

    def translate(
        self, definition: Definition, ctx: GeneratorContext
    ) -> Iterator[tuple[str, Record]]:
        parts = self._parts(definition, ctx)
        if parts is None:
            return
        description, components, identifier = parts
        logger.info("Recipe %s", identifier)
        label = f"Recipe '{identifier}'"

        recipe = ctx.component(components, "recipe")
        requirements = ctx.component(components, "requirements")
        output = ctx.component(components, "output")
        build = ctx.component(components, "build_sequence")

        craftables: CraftableRegistry = ctx.modules.get("craftable")
        game_objects = ctx.types("gameObject")
        resources = ctx.types("resource")
        tools = ctx.types("tool")
        areas = ctx.types("craftAreaGroup")
        actions = ctx.types("action")
        sequences = ctx.types("actionSequence")

        def outputs(entries: list[Any]) -> dict[int, list[int]] | None:
            result: dict[int, list[int]] = {}
            for entry in entries:
                if not isinstance(entry, dict):
                    logger.warning("%s: output entry should be a table", label)
                    return None
                index = resolve(game_objects, entry.get("input"), "Game object")
                if index is None:
                    return None
                produced = entry.get("output")
                if not isinstance(produced, list):
                    logger.warning("%s: output of %s should be a list", label, entry.get("input"))
                    return None
                produced_indices = resolve_each(game_objects, produced, "Game object")
                if produced_indices is None:
                    return None
                result[index] = produced_indices
            return result

        def build_sequence(sequence: Any) -> Record | None:
            if not isinstance(sequence, dict):
                logger.warning("%s: build sequence should be a table", label)
                return None
            if sequence.get("steps"):
                logger.warning("%s: custom build sequence steps are not implemented", label)
                return None
            action = sequence.get("action")
            if action is None:
                logger.warning("%s: missing action sequence", label)
                return None
            sequence_index = resolve(sequences, action, "Action sequence")
            if sequence_index is None:
                return None
            tool_index = None
            tool = sequence.get("tool")
            if tool:
                tool_index = resolve(tools, tool, "Tool")
                if tool_index is None:
                    return None
            return craftables.create_standard_build_sequence(sequence_index, tool_index)

        def required_resource(entry: Any) -> Record | None:
            return _required_resource(entry, resources, actions, label)

        record = compile_record(
            {
                "identifier": Field(
                    description,
                    "identifier",
                    required=True,
                    kind="string",
                    absent_from=craftables.types,
                    label="Recipe",
                ),
                "name": Field(description, "name", required=True, kind="string"),
                "plural": Field(description, "plural", required=True, kind="string"),
                "summary": Field(description, "summary", required=True, kind="string"),
                "icon_game_object_type": Field(
                    recipe,
                    "preview_object",
                    required=True,
                    kind="string",
                    exists_in=game_objects,
                    transform=game_objects.get,
                    label="Game object",
                ),
                "classification": Field(
                    recipe,
                    "classification",
                    required=True,
                    kind="string",
                    exists_in=craftables.classifications,
                    transform=craftables.classifications.get,
                    label="Classification",
                ),
                "is_food_preparation": Field(recipe, "isFoodPreparation", kind="boolean"),
                "output_arrays_by_resource_object_type": Field(
                    output, "output_by_object", required=True, kind="list", transform=outputs
                ),
                "required_craft_area_groups": Field(
                    requirements,
                    "craft_area_groups",
                    kind="list",
                    default=[],
                    each=lambda area: resolve(areas, area, "Craft area group"),
                ),
                "required_tools": Field(
                    requirements,
                    "tools",
                    kind="list",
                    default=[],
                    each=lambda tool: resolve(tools, tool, "Tool"),
                ),
                "in_progress_build_model": Field(
                    build, "build_sequence_model", required=True, kind="string"
                ),
                "build_sequence": Field(
                    build, "build_sequence", required=True, kind="table", transform=build_sequence
                ),
                "required_resources": Field(
                    build, "resource_sequence", required=True, kind="list", each=required_resource
                ),
            },
            label,
        )
        if record is None:
            return

        # Only the first two skills mean anything: the first is required to
        # craft, the second hides the recipe until it is discovered.
        skills = ctx.types("skill")
        listed = extract(
            Field(requirements, "skills", kind="list", exists_in=skills, label="Skill"), label
        )
        if listed:
            record["skills"] = {"required": skills[listed[0]]}
            if len(listed) > 1:
                record["disabled_until_additional_skill_type_discovered"] = skills[listed[1]]
            if len(listed) > 2:
                logger.warning("%s: only the first two skills are used", label)

        yield identifier, record

    def register(self, identifier: str, record: Record, ctx: GeneratorContext) -> int:
        index = super().register(identifier, record, ctx)
        areas = ctx.modules.get("craftAreaGroup")
        game_objects = ctx.types("gameObject")
        for area_index in record.get("required_craft_area_groups", []):
            area_key = areas.key_for(area_index)
            object_index = game_objects.get(area_key)
            if object_index is None:
                logger.warning(
                    "Craft area group %s has no game object, recipe %s is not shown in its panel",
                    area_key,
                    identifier,
                )
                continue
            ctx.state.add_to_craft_panel(object_index, index)
        return index


def _required_resource(
    entry: Any, resources: TypeTable, actions: TypeTable, label: str
) -> Record | None:
    if not isinstance(entry, dict):
        logger.warning("%s: resource sequence entry should be a table", label)
        return None
    resource = entry.get("resource")
    resource_index = resolve(resources, resource, "Resource")
    if resource_index is None:
        return None

    count = entry.get("count")
    if count is None:
        count = 1
    if not is_number(count):
        logger.warning("%s: resource count for %s is not a number", label, resource)
        return None
    requirement: Record = {"type": resource_index, "count": count}

    action = entry.get("action")
    if action is None:
        return requirement
    if not isinstance(action, dict):
        logger.warning("%s: action for %s should be a table", label, resource)
        return None
    action_type = action.get("action_type")
    action_index = resolve(actions, action_type, "Action")
    if action_index is None:
        return None
    duration = action.get("duration")
    if not is_number(duration):
        logger.warning("%s: duration for %s is not a number", label, action_type)
        return None
    without_skill = action.get("duration_without_skill")
    if without_skill is None:
        without_skill = duration
    if not is_number(without_skill):
        logger.warning("%s: duration without skill for %s is not a number", label, action_type)
        return None
    requirement["after_action"] = {
        "action_type_index": action_index,
        "duration": duration,
        "duration_without_skill": without_skill,
    }
    return requirement
