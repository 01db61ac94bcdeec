"""Shared fixtures: host registries and definition document builders."""
from __future__ import annotations

import copy
from typing import Any, Callable

import pytest
from tick_content import (
    CraftableRegistry,
    EvolvingObjectRegistry,
    GeneratorContext,
    LoaderConfig,
    LoaderState,
    ModuleManager,
    StorageRegistry,
    TypeRegistry,
)


def key(name: str) -> str:
    return f"hammerstone:{name}"


def object_definition(identifier: str, **components: Any) -> dict[str, Any]:
    return {
        key("object_definition"): {
            "description": {
                "identifier": identifier,
                "name": identifier.title(),
                "plural": identifier.title() + "s",
            },
            "components": {key(name): value for name, value in components.items()},
        }
    }


def storage_definition(identifier: str, **components: Any) -> dict[str, Any]:
    return {
        key("storage_definition"): {
            "description": {"identifier": identifier, "name": identifier.title()},
            "components": {key(name): value for name, value in components.items()},
        }
    }


_RECIPE_COMPONENTS: dict[str, Any] = {
    "recipe": {"preview_object": "flintAxe", "classification": "craft"},
    "requirements": {
        "skills": ["woodWorking"],
        "craft_area_groups": ["campfire"],
        "tools": ["knife"],
    },
    "output": {"output_by_object": [{"input": "flint", "output": ["flintAxe"]}]},
    "build_sequence": {
        "build_sequence_model": "craftSimple",
        "build_sequence": {"action": "knap", "tool": "hammer"},
        "resource_sequence": [
            {"resource": "flint", "count": 2},
            {"resource": "stone", "action": {"action_type": "scrape", "duration": 2.0}},
        ],
    },
}


def recipe_definition(identifier: str = "flintAxe", **components: Any) -> dict[str, Any]:
    """A valid recipe; keyword arguments replace whole components (None drops one)."""
    merged = copy.deepcopy(_RECIPE_COMPONENTS)
    for name, value in components.items():
        if value is None:
            merged.pop(name, None)
        else:
            merged[name] = value
    return {
        key("recipe_definition"): {
            "description": {
                "identifier": identifier,
                "name": "Flint Axe",
                "plural": "Flint Axes",
                "summary": "A simple axe.",
            },
            "components": {key(name): value for name, value in merged.items()},
        }
    }


def make_registries() -> dict[str, TypeRegistry]:
    return {
        "resource": TypeRegistry("resource", ["stone", "flint"]),
        "gameObject": TypeRegistry("gameObject", ["flint", "flintAxe", "campfire"]),
        "storage": StorageRegistry(
            stack_types={"standard": 0, "round": 1},
            carry_types={"standard": 0, "small": 1},
        ),
        "evolvingObject": EvolvingObjectRegistry(
            day_length=120.0, categories={"food": 0, "rot": 1}
        ),
        "craftable": CraftableRegistry(classifications={"craft": 0, "build": 1}),
        "material": TypeRegistry("material"),
        "skill": TypeRegistry("skill", ["gathering", "basicBuilding", "woodWorking"]),
        "tool": TypeRegistry("tool", ["knife", "hammer"]),
        "craftAreaGroup": TypeRegistry("craftAreaGroup", ["campfire", "kiln"]),
        "action": TypeRegistry("action", ["scrape", "chop"]),
        "actionSequence": TypeRegistry("actionSequence", ["knap", "inspect"]),
    }


@pytest.fixture
def registries() -> dict[str, TypeRegistry]:
    return make_registries()


@pytest.fixture
def modules(registries: dict[str, TypeRegistry]) -> ModuleManager:
    manager = ModuleManager()
    for name, registry in registries.items():
        manager.add_module(name, registry)
    return manager


@pytest.fixture
def ctx(modules: ModuleManager) -> GeneratorContext:
    return GeneratorContext(modules, LoaderState(), LoaderConfig())


@pytest.fixture
def objects() -> Callable[..., dict[str, Any]]:
    return object_definition


@pytest.fixture
def storages() -> Callable[..., dict[str, Any]]:
    return storage_definition


@pytest.fixture
def recipes() -> Callable[..., dict[str, Any]]:
    return recipe_definition
