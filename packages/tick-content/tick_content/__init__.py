"""tick-content — Data-driven object definitions for tick engine hosts."""
from __future__ import annotations

from tick_content.config import ConfigStore, LoaderConfig
from tick_content.generators import GeneratorContext, ObjectGenerator
from tick_content.loader import ContentLoader
from tick_content.modules import (
    CraftableRegistry,
    EvolvingObjectRegistry,
    ModuleManager,
    StorageRegistry,
    TypeRegistry,
)
from tick_content.resolver import is_new_identifier, resolve, resolve_each
from tick_content.schema import Field, compile_record, extract, vec3_field
from tick_content.types import LoaderState, LoadState, ObjectTypeDescriptor

__all__ = [
    "ConfigStore",
    "ContentLoader",
    "CraftableRegistry",
    "EvolvingObjectRegistry",
    "Field",
    "GeneratorContext",
    "LoadState",
    "LoaderConfig",
    "LoaderState",
    "ModuleManager",
    "ObjectGenerator",
    "ObjectTypeDescriptor",
    "StorageRegistry",
    "TypeRegistry",
    "compile_record",
    "extract",
    "is_new_identifier",
    "resolve",
    "resolve_each",
    "vec3_field",
]
