"""Object generators, one per definition kind."""
from __future__ import annotations

from tick_content.generators.base import GeneratorContext, ObjectGenerator
from tick_content.generators.evolving import EvolvingObjectGenerator
from tick_content.generators.game_object import GameObjectGenerator
from tick_content.generators.material import MaterialGenerator
from tick_content.generators.recipe import RecipeGenerator
from tick_content.generators.resource import ResourceGenerator
from tick_content.generators.skill import SkillGenerator
from tick_content.generators.storage import StorageGenerator, make_rotation_function

__all__ = [
    "EvolvingObjectGenerator",
    "GameObjectGenerator",
    "GeneratorContext",
    "MaterialGenerator",
    "ObjectGenerator",
    "RecipeGenerator",
    "ResourceGenerator",
    "SkillGenerator",
    "StorageGenerator",
    "make_rotation_function",
]
