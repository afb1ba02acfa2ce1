"""
BrokerTemplate — declarative description of one partner's manifest layout.

Templates are pure data.  Adding a broker means adding one entry to the
catalog; the parser, mapper and validator never branch on a template id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from tripflow.importer.rows import CANONICAL_ATTRIBUTES

# Column-name fragments that make a column required unless the template
# declares its fields explicitly.
REQUIRED_KEYWORDS: tuple[str, ...] = (
    "name",
    "address",
    "street",
    "date",
    "phone",
    "time",
    "pickup",
    "origin",
    "destination",
)


@dataclass(frozen=True)
class TemplateField:
    """One source column of a broker manifest."""

    source_column: str
    required: bool = False
    canonical_target: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if self.canonical_target is not None and self.canonical_target not in CANONICAL_ATTRIBUTES:
            raise ValueError(
                f"Column {self.source_column!r} targets unknown attribute {self.canonical_target!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_column": self.source_column,
            "required": self.required,
            "canonical_target": self.canonical_target,
            "description": self.description,
        }


@dataclass(frozen=True)
class BrokerTemplate:
    """Immutable broker template: id, display name and ordered fields."""

    id: str
    display_name: str
    fields: tuple[TemplateField, ...]

    @property
    def column_names(self) -> list[str]:
        return [f.source_column for f in self.fields]

    @property
    def required_fields(self) -> tuple[TemplateField, ...]:
        return tuple(f for f in self.fields if f.required)

    @property
    def mapped_fields(self) -> tuple[TemplateField, ...]:
        return tuple(f for f in self.fields if f.canonical_target is not None)

    def to_dict(self, *, include_fields: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "display_name": self.display_name,
            "field_count": len(self.fields),
        }
        if include_fields:
            data["fields"] = [f.to_dict() for f in self.fields]
        return data


def is_required_column(column: str) -> bool:
    """Keyword heuristic used by catalog entries without explicit flags."""
    lowered = column.lower()
    return any(keyword in lowered for keyword in REQUIRED_KEYWORDS)


def template(
    template_id: str,
    columns: Iterable[str | tuple[str, str] | TemplateField],
    *,
    display_name: str | None = None,
) -> BrokerTemplate:
    """
    Build a catalog entry from an ordered column list.

    A column is a bare source-column name (kept only in the raw snapshot),
    a ``(source_column, canonical_target)`` pair, or a TemplateField.
    Names and pairs take their required flag from ``is_required_column``;
    a TemplateField is used as given, so a template that lists its fields
    explicitly sets its own flags.
    """
    fields = []
    for column in columns:
        if isinstance(column, TemplateField):
            fields.append(column)
            continue
        if isinstance(column, tuple):
            name, target = column
        else:
            name, target = column, None
        fields.append(
            TemplateField(
                source_column=name,
                required=is_required_column(name),
                canonical_target=target,
            )
        )
    return BrokerTemplate(
        id=template_id,
        display_name=display_name or template_id,
        fields=tuple(fields),
    )
