"""
Template Registry — lookup over the static broker catalog.

The catalog is validated once at import: duplicate template ids or a
column listed twice in one template are load-time errors.

To add a new broker:
    1. Append a ``template(...)`` entry to catalog.BROKER_TEMPLATES
    2. List the columns in file order, pairing mapped ones with their
       canonical attribute
    3. Nothing else changes: parser, mapper and validator are generic
"""

from __future__ import annotations

from tripflow.importer.errors import TemplateNotFoundError
from tripflow.importer.templates.base import BrokerTemplate, TemplateField, is_required_column
from tripflow.importer.templates.catalog import BROKER_TEMPLATES


def _build_registry(templates: list[BrokerTemplate]) -> dict[str, BrokerTemplate]:
    registry: dict[str, BrokerTemplate] = {}
    for entry in templates:
        if entry.id in registry:
            raise ValueError(f"Duplicate broker template id: {entry.id}")
        columns = entry.column_names
        if len(columns) != len(set(columns)):
            raise ValueError(f"Template {entry.id} lists a column more than once")
        registry[entry.id] = entry
    return registry


TEMPLATE_REGISTRY: dict[str, BrokerTemplate] = _build_registry(BROKER_TEMPLATES)


def get_template(template_id: str) -> BrokerTemplate:
    """Return the template registered under ``template_id``."""
    try:
        return TEMPLATE_REGISTRY[template_id]
    except KeyError:
        raise TemplateNotFoundError(template_id) from None


def list_templates() -> list[BrokerTemplate]:
    """All templates in catalog order."""
    return list(TEMPLATE_REGISTRY.values())


__all__ = [
    "BrokerTemplate",
    "TemplateField",
    "TEMPLATE_REGISTRY",
    "get_template",
    "list_templates",
    "is_required_column",
]
