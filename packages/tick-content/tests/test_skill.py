"""Tests for the skill generator."""
from __future__ import annotations

from typing import Any

import pytest
from tick_content import GeneratorContext, TypeRegistry
from tick_content.generators import SkillGenerator


def skill(identifier: str, **placement: Any) -> dict[str, Any]:
    placement.setdefault("row", 1)
    placement.setdefault("column", 2)
    return {
        "description": {
            "identifier": identifier,
            "name": identifier.title(),
            "description": f"Knows {identifier}.",
            "icon": f"icon_{identifier}",
        },
        "skill": placement,
    }


def skill_definition(*skills: Any) -> dict[str, Any]:
    return {"hammerstone:skill_definition": {"skills": list(skills)}}


@pytest.fixture
def generator() -> SkillGenerator:
    return SkillGenerator()


class TestSkill:
    def test_basic_skill(
        self, generator: SkillGenerator, ctx: GeneratorContext,
        registries: dict[str, TypeRegistry],
    ) -> None:
        assert generator.generate(skill_definition(skill("fishing")), ctx) == 1
        assert registries["skill"].get("fishing") == {
            "identifier": "fishing",
            "name": "Fishing",
            "description": "Knows fishing.",
            "icon": "icon_fishing",
            "row": 1,
            "column": 2,
        }

    def test_flags_and_requirements(
        self, generator: SkillGenerator, ctx: GeneratorContext,
        registries: dict[str, TypeRegistry],
    ) -> None:
        entry = skill(
            "fishing",
            requiredSkills=["gathering"],
            startLearned=True,
            impactedByLimitedGeneralAbility=False,
        )
        generator.generate(skill_definition(entry), ctx)
        record = registries["skill"].get("fishing")
        assert record["required_skill_types"] == [registries["skill"].types["gathering"]]
        assert record["start_learned"] is True
        assert record["partial_capacity_with_limited_general_ability"] is False

    def test_requires_earlier_skill_in_same_definition(
        self, generator: SkillGenerator, ctx: GeneratorContext,
        registries: dict[str, TypeRegistry],
    ) -> None:
        definition = skill_definition(
            skill("fishing"), skill("netFishing", requiredSkills=["fishing"])
        )
        assert generator.generate(definition, ctx) == 2
        fishing = registries["skill"].types["fishing"]
        assert registries["skill"].get("netFishing")["required_skill_types"] == [fishing]

    def test_missing_placement(
        self, generator: SkillGenerator, ctx: GeneratorContext,
        registries: dict[str, TypeRegistry],
    ) -> None:
        entry = skill("fishing")
        del entry["skill"]
        assert generator.generate(skill_definition(entry), ctx) == 0
        assert registries["skill"].has("fishing") is False

    def test_entry_without_description(
        self, generator: SkillGenerator, ctx: GeneratorContext,
    ) -> None:
        definition = skill_definition({"skill": {"row": 1, "column": 1}}, skill("fishing"))
        assert generator.generate(definition, ctx) == 1

    def test_existing_skill_rejected(
        self, generator: SkillGenerator, ctx: GeneratorContext,
    ) -> None:
        assert generator.generate(skill_definition(skill("gathering")), ctx) == 0
