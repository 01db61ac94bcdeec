"""Field extraction, validation and record assembly.

A ``Field`` describes where one output value comes from and how it is checked.
``compile_record`` runs a mapping of output name -> ``Field`` and returns the
assembled record, or None when any required field is missing or invalid.

Failure is always signalled with None, never raised: a bad field is logged and
treated as absent, and only required fields can sink the whole record.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from tick_content.math3d import vec3
from tick_content.resolver import TypeTable, is_new_identifier, resolve_each
from tick_content.types import Record

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_vec3(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 3
        and all(is_number(v) for v in value)
    )


_KIND_CHECKS: dict[str, Callable[[Any], bool]] = {
    "number": is_number,
    "boolean": lambda v: isinstance(v, bool),
    "string": lambda v: isinstance(v, str),
    "table": lambda v: isinstance(v, (dict, list)),
    "list": lambda v: isinstance(v, (list, tuple)),
    "vec3": _is_vec3,
}


@dataclass(frozen=True)
class Field:
    """Extraction rule for one output field.

    Attributes:
        source: Sub-document to read from. None behaves like an empty one.
        key: Key inside *source*.
        required: Whether a missing value fails the whole record.
        default: Substituted when the value is absent. None means no default.
        kind: Expected primitive kind (see ``_KIND_CHECKS``).
        exists_in: Table the value (or each list element) must be a key of.
        absent_from: Table the value must not be a key of.
        each: Applied to every list element; None from any element fails.
        transform: Applied to the whole value last; None fails.
        label: Name of the target table in membership warnings.
    """

    source: Mapping[str, Any] | None
    key: str
    required: bool = False
    default: Any = None
    kind: str | None = None
    exists_in: TypeTable | None = None
    absent_from: TypeTable | None = None
    each: Transform | None = None
    transform: Transform | None = None
    label: str = "Identifier"

    def __post_init__(self) -> None:
        if self.kind is not None and self.kind not in _KIND_CHECKS:
            raise ValueError(f"Unknown field kind {self.kind!r}")


def vec3_field(
    source: Mapping[str, Any] | None,
    key: str,
    default: tuple[float, float, float] | None = None,
    required: bool = False,
) -> Field:
    """Field holding three numbers, converted to a float tuple."""
    return Field(
        source,
        key,
        required=required,
        default=default,
        kind="vec3",
        transform=lambda v: vec3(*v),
    )


def _lookup(source: Mapping[str, Any] | None, key: str) -> Any:
    if not isinstance(source, Mapping):
        return None
    return source.get(key)


def extract(field: Field, label: str = "") -> Any:
    """Return the validated value of *field*, or None if absent or invalid."""
    value = _lookup(field.source, field.key)

    if value is not None and field.kind is not None:
        if not _KIND_CHECKS[field.kind](value):
            logger.warning(
                "%s: field '%s' should be %s, got %r", label, field.key, field.kind, value
            )
            value = None

    if value is None:
        if field.default is None:
            return None
        value = field.default

    kind_label = f"{label}: {field.label}" if label else field.label
    if field.absent_from is not None:
        if not is_new_identifier(field.absent_from, value, kind_label):
            return None

    if field.exists_in is not None:
        members = value if isinstance(value, (list, tuple)) else [value]
        if resolve_each(field.exists_in, members, kind_label) is None:
            return None

    if field.each is not None:
        if not isinstance(value, (list, tuple)):
            logger.warning("%s: field '%s' should be a list", label, field.key)
            return None
        mapped = []
        for element in value:
            result = field.each(element)
            if result is None:
                logger.warning("%s: invalid element in '%s'", label, field.key)
                return None
            mapped.append(result)
        value = mapped

    if field.transform is not None:
        value = field.transform(value)
        if value is None:
            logger.warning("%s: field '%s' could not be built", label, field.key)
            return None

    return value


def compile_record(fields: Mapping[str, Field], label: str = "") -> Record | None:
    """Extract every field; None if any required one failed.

    Every field is attempted so that all problems in a definition are logged
    in one pass. Optional fields without a value are left out of the record.
    """
    record: Record = {}
    failed = False
    for name, field in fields.items():
        value = extract(field, label)
        if value is None:
            if field.required:
                logger.warning("%s: missing required field '%s'", label, name)
                failed = True
            continue
        record[name] = value
    if failed:
        logger.warning("%s: skipped, definition is invalid", label)
        return None
    return record
