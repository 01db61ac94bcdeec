"""Dependency-gated loading of object definitions."""
from __future__ import annotations

import logging
from typing import Any

from tick_content.config import ConfigStore, LoaderConfig
from tick_content.generators import (
    EvolvingObjectGenerator,
    GameObjectGenerator,
    GeneratorContext,
    MaterialGenerator,
    ObjectGenerator,
    RecipeGenerator,
    ResourceGenerator,
    SkillGenerator,
    StorageGenerator,
)
from tick_content.modules import ModuleManager
from tick_content.types import LoaderState, LoadState, ObjectTypeDescriptor

logger = logging.getLogger(__name__)

# Object types loaded through the gate, in evaluation order.
GATED_TYPES = ("storage", "evolvingObject")


class ContentLoader:
    """Turns discovered definitions into host records once the host is ready.

    Gated object types load by themselves as soon as configs are discovered,
    the type is released and all its host modules are added; every
    module-added broadcast re-evaluates every pending type. The remaining
    kinds are generated on request through the ``generate_*`` methods.
    """

    def __init__(
        self,
        modules: ModuleManager,
        configs: ConfigStore,
        config: LoaderConfig | None = None,
    ) -> None:
        self.modules = modules
        self.configs = configs
        self.config: LoaderConfig = config if config is not None else LoaderConfig()
        self.state = LoaderState()
        self._context = GeneratorContext(modules, self.state, self.config)

        generators: list[ObjectGenerator] = [
            ResourceGenerator(),
            GameObjectGenerator(),
            StorageGenerator(),
            EvolvingObjectGenerator(),
            RecipeGenerator(),
            MaterialGenerator(),
            SkillGenerator(),
        ]
        self._generators: dict[str, ObjectGenerator] = {g.kind: g for g in generators}

        self._types: dict[str, ObjectTypeDescriptor] = {}
        for name in GATED_TYPES:
            generator = self._generators[name]
            self.add_object_type(
                ObjectTypeDescriptor(
                    name=name,
                    source=generator.source,
                    generator=generator,
                    module_dependencies=generator.dependencies,
                )
            )

        modules.bind(self._on_module_added)

    # --- Type table ---

    def add_object_type(self, descriptor: ObjectTypeDescriptor) -> None:
        """Append a gated object type. Raises ValueError if the name is taken."""
        if descriptor.name in self._types:
            raise ValueError(f"Object type {descriptor.name!r} already defined")
        if descriptor.name in self.config.held_types:
            descriptor.waiting_for_start = True
        self._types[descriptor.name] = descriptor

    def descriptor(self, name: str) -> ObjectTypeDescriptor:
        """Look up a gated object type. Raises KeyError if not defined."""
        return self._types[name]

    def object_types(self) -> list[str]:
        return list(self._types)

    def generator(self, kind: str) -> ObjectGenerator:
        return self._generators[kind]

    # --- Lifecycle ---

    def initialize(self) -> None:
        """Run config discovery once, then load whatever is ready."""
        if not self.state.run_once("content"):
            return
        logger.info("Initializing content loading")
        self.configs.load()
        self.try_load_object_definitions()

    def state_of(self, name: str) -> LoadState:
        return self._state(self._types[name])

    def _state(self, descriptor: ObjectTypeDescriptor) -> LoadState:
        if descriptor.loaded:
            return LoadState.LOADED
        if not self.configs.initialized:
            return LoadState.PENDING_SOURCE
        if descriptor.waiting_for_start:
            return LoadState.PENDING_START
        if self.modules.missing(descriptor.module_dependencies):
            return LoadState.PENDING_DEPENDENCIES
        return LoadState.READY

    def can_load(self, descriptor: ObjectTypeDescriptor) -> bool:
        """True if *descriptor* is ready. Marks it loaded in that case."""
        if self._state(descriptor) is not LoadState.READY:
            return False
        descriptor.loaded = True
        return True

    def release_object_type(self, name: str) -> None:
        """Let a held-back object type load. Raises KeyError for unknown types."""
        descriptor = self._types[name]
        logger.info("Object type %s is ready to start loading", name)
        descriptor.waiting_for_start = False
        # Re-evaluate now, in case no further modules will be added.
        self.try_load_object_definitions()

    def try_load_object_definitions(self) -> None:
        logger.debug("Attempting to load new object definitions")
        for descriptor in list(self._types.values()):
            if self.can_load(descriptor):
                self.load_object_definition(descriptor)

    def load_object_definition(self, descriptor: ObjectTypeDescriptor) -> int:
        """Translate every definition of a ready type. Returns records registered."""
        if not self.state.run_once(descriptor.generator.kind):
            logger.info("%s definitions were already generated", descriptor.name)
            return 0
        return self._generate_all(descriptor.generator, descriptor.source)

    def _on_module_added(self, name: str, modules: dict[str, Any]) -> None:
        self.try_load_object_definitions()

    # --- Direct generation ---

    def generate_resource_definitions(self) -> bool:
        return self._generate_kind("resource")

    def generate_game_objects(self) -> bool:
        return self._generate_kind("gameObject")

    def generate_storage_definitions(self) -> bool:
        return self._generate_kind("storage")

    def generate_evolving_object_definitions(self) -> bool:
        return self._generate_kind("evolvingObject")

    def generate_recipe_definitions(self) -> bool:
        return self._generate_kind("craftable")

    def generate_material_definitions(self) -> bool:
        return self._generate_kind("material")

    def generate_skill_definitions(self) -> bool:
        return self._generate_kind("skill")

    def _generate_kind(self, kind: str) -> bool:
        """Generate all definitions of *kind* once. Returns True if it ran now."""
        generator = self._generators[kind]
        if not self.configs.initialized:
            logger.warning("Cannot generate %s definitions before configs are loaded", generator.label)
            return False
        missing = self.modules.missing(generator.dependencies)
        if missing:
            logger.warning(
                "Cannot generate %s definitions, missing modules: %s",
                generator.label,
                ", ".join(missing),
            )
            return False
        if not self.state.run_once(kind):
            return False
        for descriptor in self._types.values():
            if descriptor.generator is generator:
                descriptor.loaded = True
        self._generate_all(generator, generator.source)
        return True

    def _generate_all(self, generator: ObjectGenerator, source: str) -> int:
        logger.info("Generating %s definitions", generator.label)
        definitions = self.configs.configs(source)
        if not definitions:
            logger.info("  (none)")
            return 0
        count = 0
        for definition in definitions:
            if not definition:
                logger.warning("Attempting to generate empty %s definition", generator.label)
                continue
            count += generator.generate(definition, self._context)
        return count
