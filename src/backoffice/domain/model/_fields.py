"""Helpers shared by the directory entities for field validation and merging."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone

from backoffice.domain.exceptions import ValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def require_name(value: object, entity: str) -> str:
    """Return the stripped name, or raise if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{entity} name is required")
    return value.strip()


def apply_changes(
    target: object,
    changes: Mapping[str, object],
    editable: frozenset[str],
    entity: str,
) -> None:
    """Merge only the supplied fields into ``target``.

    Unknown field names are rejected before anything is assigned, so a
    bad request never half-applies.
    """
    unknown = sorted(set(changes) - editable)
    if unknown:
        raise ValidationError(f"Unknown {entity.lower()} field(s): {', '.join(unknown)}")

    values = dict(changes)
    if "name" in values:
        values["name"] = require_name(values["name"], entity)

    for key, value in values.items():
        setattr(target, key, value)
