"""Bulk import request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Start a session, optionally with the template already chosen."""

    template_id: str | None = Field(default=None, max_length=128)


class SelectTemplateRequest(BaseModel):
    template_id: str = Field(..., min_length=1, max_length=128)


class UpdateFieldRequest(BaseModel):
    """Point edit of one canonical attribute; null or blank clears it."""

    attribute: str = Field(..., min_length=1, max_length=64)
    value: str | None = None


class CommitRequest(BaseModel):
    org_id: str = Field(..., min_length=1, max_length=64)


class TemplateFieldResponse(BaseModel):
    source_column: str
    required: bool
    canonical_target: str | None
    description: str | None = None


class TemplateResponse(BaseModel):
    id: str
    display_name: str
    field_count: int
    fields: list[TemplateFieldResponse] | None = None


class ImportSummaryResponse(BaseModel):
    total: int
    valid_count: int
    invalid_count: int
    error_type_histogram: dict[str, int]


class UploadResponse(BaseModel):
    session_id: str
    state: str
    file_name: str
    headers: list[str]
    parse_errors: list[str]
    summary: ImportSummaryResponse
