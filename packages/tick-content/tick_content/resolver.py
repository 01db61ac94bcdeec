"""Identifier resolution against host type tables."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

TypeTable = Mapping[str, int]


def resolve(types: TypeTable, identifier: Any, kind: str) -> int | None:
    """Return the index of *identifier* in *types*, or None if it is missing.

    *kind* only labels the warning, e.g. ``"Game Object"``.
    """
    if not isinstance(identifier, str) or identifier not in types:
        logger.warning("%s '%s' does not exist", kind, identifier)
        return None
    return types[identifier]


def resolve_each(
    types: TypeTable, identifiers: Iterable[Any], kind: str
) -> list[int] | None:
    """Resolve every identifier. Returns None if any one is missing."""
    indices: list[int] = []
    for identifier in identifiers:
        index = resolve(types, identifier, kind)
        if index is None:
            return None
        indices.append(index)
    return indices


def is_new_identifier(types: TypeTable, identifier: Any, kind: str) -> bool:
    """True if *identifier* is not yet taken in *types*."""
    if isinstance(identifier, str) and identifier in types:
        logger.warning("%s '%s' already exists", kind, identifier)
        return False
    return True
