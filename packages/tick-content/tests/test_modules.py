"""Tests for host registries and the module broadcast."""
from __future__ import annotations

from typing import Any

import pytest
from tick_content import (
    CraftableRegistry,
    EvolvingObjectRegistry,
    ModuleManager,
    StorageRegistry,
    TypeRegistry,
)


class TestTypeRegistry:
    def test_add_assigns_indices_in_order(self) -> None:
        registry = TypeRegistry("resource")
        assert registry.add("wood", {"name": "Wood"}) == 0
        assert registry.add("stone", {"name": "Stone"}) == 1
        assert registry.types == {"wood": 0, "stone": 1}

    def test_initial_identifiers(self) -> None:
        registry = TypeRegistry("tool", ["knife", "hammer"])
        assert registry.identifiers() == ["knife", "hammer"]
        assert len(registry) == 2

    def test_add_overwrites_record_keeps_index(self) -> None:
        registry = TypeRegistry("resource")
        registry.add("wood", {"v": 1})
        registry.add("stone", {})
        assert registry.add("wood", {"v": 2}) == 0
        assert registry.get("wood") == {"v": 2}

    def test_get_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            TypeRegistry("resource").get("wood")

    def test_has(self) -> None:
        registry = TypeRegistry("resource", ["wood"])
        assert registry.has("wood") is True
        assert registry.has("stone") is False

    def test_key_for(self) -> None:
        registry = TypeRegistry("craftAreaGroup", ["campfire", "kiln"])
        assert registry.key_for(1) == "kiln"

    def test_key_for_out_of_range(self) -> None:
        registry = TypeRegistry("craftAreaGroup", ["campfire"])
        with pytest.raises(KeyError):
            registry.key_for(1)
        with pytest.raises(KeyError):
            registry.key_for(-1)

    def test_snapshot_drops_callables(self) -> None:
        registry = TypeRegistry("storage")
        registry.add("crate", {"name": "Crate", "box": {"size": (1.0, 1.0, 1.0), "fn": len}})
        assert registry.snapshot() == {
            "name": "storage",
            "entries": [
                {"identifier": "crate", "record": {"name": "Crate", "box": {"size": (1.0, 1.0, 1.0)}}}
            ],
        }


class TestKindRegistries:
    def test_storage_option_tables(self) -> None:
        storage = StorageRegistry()
        assert storage.stack_types == {"standard": 0}
        assert storage.carry_types == {"standard": 0}
        assert storage.name == "storage"

    def test_evolving_day_length_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            EvolvingObjectRegistry(day_length=0)

    def test_standard_build_sequence(self) -> None:
        craftable = CraftableRegistry()
        assert craftable.create_standard_build_sequence(3) == {"action_sequence_type_index": 3}
        assert craftable.create_standard_build_sequence(3, 1) == {
            "action_sequence_type_index": 3,
            "required_tool_type_index": 1,
        }


class TestModuleManager:
    def test_add_and_get(self) -> None:
        manager = ModuleManager()
        registry = TypeRegistry("resource")
        manager.add_module("resource", registry)
        assert manager.get("resource") is registry
        assert manager.has("resource") is True

    def test_get_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            ModuleManager().get("resource")

    def test_missing(self) -> None:
        manager = ModuleManager()
        manager.add_module("resource", TypeRegistry("resource"))
        assert manager.missing(["resource", "storage", "skill"]) == ["storage", "skill"]

    def test_broadcast_on_add(self) -> None:
        manager = ModuleManager()
        received: list[tuple[str, list[str]]] = []

        def listener(name: str, modules: dict[str, Any]) -> None:
            received.append((name, sorted(modules)))

        manager.bind(listener)
        manager.add_module("resource", TypeRegistry("resource"))
        manager.add_module("storage", StorageRegistry())
        assert received == [("resource", ["resource"]), ("storage", ["resource", "storage"])]

    def test_unbind(self) -> None:
        manager = ModuleManager()
        received: list[str] = []

        def listener(name: str, modules: dict[str, Any]) -> None:
            received.append(name)

        manager.bind(listener)
        manager.unbind(listener)
        manager.unbind(listener)  # Second unbind is a no-op
        manager.add_module("resource", TypeRegistry("resource"))
        assert received == []

    def test_listener_may_add_modules(self) -> None:
        manager = ModuleManager()
        received: list[str] = []

        def listener(name: str, modules: dict[str, Any]) -> None:
            received.append(name)
            if name == "resource":
                manager.add_module("gameObject", TypeRegistry("gameObject"))

        manager.bind(listener)
        manager.add_module("resource", TypeRegistry("resource"))
        assert received == ["resource", "gameObject"]
        assert manager.names() == ["resource", "gameObject"]
