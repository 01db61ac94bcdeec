"""Core data types for content loading."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tick_content.generators.base import ObjectGenerator

Definition = dict[str, Any]
Record = dict[str, Any]
Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]


class LoadState(Enum):
    """Readiness of one object type, derived on every evaluation."""

    PENDING_SOURCE = "pending_source"
    PENDING_START = "pending_start"
    PENDING_DEPENDENCIES = "pending_dependencies"
    READY = "ready"
    LOADED = "loaded"


@dataclass
class ObjectTypeDescriptor:
    """How and when one kind of definition gets loaded.

    Attributes:
        name: Object type name used by ``release_object_type``.
        source: Config source the definitions are read from.
        generator: Translator run once per definition.
        module_dependencies: Host modules that must be registered first.
        loaded: Set once, when loading begins. Never reverts.
        waiting_for_start: True while the type is held back.
    """

    name: str
    source: str
    generator: ObjectGenerator
    module_dependencies: tuple[str, ...] = ()
    loaded: bool = False
    waiting_for_start: bool = False


@dataclass
class LoaderState:
    """All mutable loader state for one process.

    Attributes:
        guards: Names of run-once operations that already ran.
        storage_links: storage identifier -> object identifiers stored in it.
        craft_panels: craft area object index -> recipe indices it can craft.
    """

    guards: set[str] = field(default_factory=set)
    storage_links: dict[str, list[str]] = field(default_factory=dict)
    craft_panels: dict[int, list[int]] = field(default_factory=dict)

    def run_once(self, guard: str) -> bool:
        """Return True the first time *guard* is seen, False afterwards."""
        if guard in self.guards:
            return False
        self.guards.add(guard)
        return True

    def link_storage(self, storage_identifier: str, identifier: str) -> None:
        self.storage_links.setdefault(storage_identifier, []).append(identifier)

    def add_to_craft_panel(self, area_index: int, recipe_index: int) -> None:
        self.craft_panels.setdefault(area_index, []).append(recipe_index)
