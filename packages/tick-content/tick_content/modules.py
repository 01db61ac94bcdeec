"""Host module registries and the module-added broadcast."""
from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterable

from tick_content.types import Record

logger = logging.getLogger(__name__)

_Listener = Callable[[str, dict[str, Any]], None]


class TypeRegistry:
    """Identifier -> index table plus the records registered under it.

    Indices are assigned in registration order and never reused.
    """

    def __init__(self, name: str, identifiers: Iterable[str] = ()) -> None:
        self.name = name
        self.types: dict[str, int] = {}
        self._keys: list[str] = []
        self._records: list[Record] = []
        for identifier in identifiers:
            self.add(identifier, {})

    def add(self, identifier: str, record: Record) -> int:
        """Register a record. Overwrites the record (keeping the index) if it exists."""
        if identifier in self.types:
            index = self.types[identifier]
            self._records[index] = record
            return index
        index = len(self._keys)
        self.types[identifier] = index
        self._keys.append(identifier)
        self._records.append(record)
        return index

    def get(self, identifier: str) -> Record:
        """Look up a record. Raises KeyError if not registered."""
        return self._records[self.types[identifier]]

    def has(self, identifier: str) -> bool:
        return identifier in self.types

    def key_for(self, index: int) -> str:
        """Identifier registered at *index*. Raises KeyError if out of range."""
        if not 0 <= index < len(self._keys):
            raise KeyError(index)
        return self._keys[index]

    def identifiers(self) -> list[str]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def snapshot(self) -> dict[str, Any]:
        """Serialize identifiers and plain-data records in index order."""
        return {
            "name": self.name,
            "entries": [
                {"identifier": key, "record": _plain(self._records[i])}
                for i, key in enumerate(self._keys)
            ],
        }


def _plain(record: Record) -> Record:
    # Closures (storage rotation functions) are not serializable.
    return {
        k: (_plain(v) if isinstance(v, dict) else copy.deepcopy(v))
        for k, v in record.items()
        if not callable(v)
    }


class StorageRegistry(TypeRegistry):
    """Storage module: storage types plus stack and carry type option tables."""

    def __init__(
        self,
        stack_types: dict[str, int] | None = None,
        carry_types: dict[str, int] | None = None,
    ) -> None:
        super().__init__("storage")
        self.stack_types: dict[str, int] = stack_types or {"standard": 0}
        self.carry_types: dict[str, int] = carry_types or {"standard": 0}


class EvolvingObjectRegistry(TypeRegistry):
    """Evolving object module: day length and evolution categories."""

    def __init__(
        self, day_length: float = 1.0, categories: dict[str, int] | None = None
    ) -> None:
        super().__init__("evolvingObject")
        if day_length <= 0:
            raise ValueError(f"day_length must be > 0, got {day_length}")
        self.day_length = day_length
        self.categories: dict[str, int] = categories or {}


class CraftableRegistry(TypeRegistry):
    """Craftable module: recipe types, classifications and build sequences."""

    def __init__(self, classifications: dict[str, int] | None = None) -> None:
        super().__init__("craftable")
        self.classifications: dict[str, int] = classifications or {}

    def create_standard_build_sequence(
        self, action_sequence_index: int, tool_index: int | None = None
    ) -> Record:
        sequence: Record = {"action_sequence_type_index": action_sequence_index}
        if tool_index is not None:
            sequence["required_tool_type_index"] = tool_index
        return sequence


class ModuleManager:
    """Named host modules. Adding one notifies every bound listener at once.

    Listeners receive ``(module_name, modules)`` and may add further modules
    while being notified.
    """

    def __init__(self) -> None:
        self._modules: dict[str, Any] = {}
        self._listeners: list[_Listener] = []

    def bind(self, listener: _Listener) -> None:
        self._listeners.append(listener)

    def unbind(self, listener: _Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def add_module(self, name: str, module: Any) -> None:
        """Register a module and broadcast that it is available."""
        self._modules[name] = module
        logger.debug("Module added: %s", name)
        for listener in list(self._listeners):
            listener(name, dict(self._modules))

    def get(self, name: str) -> Any:
        """Look up a module. Raises KeyError if not added."""
        return self._modules[name]

    def has(self, name: str) -> bool:
        return name in self._modules

    def missing(self, names: Iterable[str]) -> list[str]:
        """Names from *names* that have not been added yet."""
        return [n for n in names if n not in self._modules]

    def names(self) -> list[str]:
        return list(self._modules)
