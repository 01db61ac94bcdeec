"""Loader configuration and the config-discovery boundary."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from tick_content.types import Definition

logger = logging.getLogger(__name__)

# Config sources known to the loader. Object definitions feed the resource,
# game object and evolving object generators.
SOURCES = ("object", "storage", "recipe", "material", "skill")

DiscoverFn = Callable[[], Mapping[str, Iterable[Definition | None]]]


@dataclass(frozen=True)
class LoaderConfig:
    """Immutable loader configuration.

    Attributes:
        namespace: Prefix of definition and component keys
            (``"<namespace>:object_definition"``).
        world_scale: Metres per engine position unit, used by ``m_to_p``.
        held_types: Object types that wait for ``release_object_type``.
    """

    namespace: str = "hammerstone"
    world_scale: float = 8388608.0
    held_types: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.world_scale <= 0:
            raise ValueError(f"world_scale must be > 0, got {self.world_scale}")

    def key(self, name: str) -> str:
        """Return the namespaced document key for *name*."""
        return f"{self.namespace}:{name}"


class ConfigStore:
    """Ordered definitions per source, filled by a host-supplied discovery.

    The store never reads files itself. ``discover`` returns a mapping of
    source name -> definitions and runs once, inside ``load``.
    """

    def __init__(self, discover: DiscoverFn | None = None) -> None:
        self._discover = discover
        self._configs: dict[str, list[Definition | None]] = {s: [] for s in SOURCES}
        self.initialized: bool = False

    def add(self, source: str, definition: Definition | None) -> None:
        """Append one definition to *source*. Raises KeyError for unknown sources."""
        if source not in self._configs:
            raise KeyError(source)
        self._configs[source].append(definition)

    def extend(self, source: str, definitions: Iterable[Definition | None]) -> None:
        for definition in definitions:
            self.add(source, definition)

    def load(self) -> None:
        """Run discovery (if any) and mark the store initialized."""
        if self._discover is not None:
            for source, definitions in self._discover().items():
                if source not in self._configs:
                    logger.warning("Ignoring definitions for unknown source '%s'", source)
                    continue
                self.extend(source, definitions)
        self.initialized = True
        logger.info(
            "Config discovery finished: %s",
            ", ".join(f"{s}={len(d)}" for s, d in self._configs.items()),
        )

    def configs(self, source: str) -> list[Definition | None]:
        """Definitions of *source* in discovery order."""
        return list(self._configs.get(source, ()))
