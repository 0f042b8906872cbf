"""Pydantic DTOs for the Document feature."""

from typing import Any

from pydantic import BaseModel, Field


class DocumentCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Contract.pdf"])
    type: str
    category: str = "general"
    file_size: int = Field(0, ge=0)
    mime_type: str = "application/pdf"
    template_id: str | None = None

    model_config = {"extra": "allow"}


class DocumentTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: str
    category: str = "general"
    content: str = ""
    variables: list[str] = Field(default_factory=list)


class DocumentShare(BaseModel):
    shared_with: str
    permissions: list[str] = Field(default_factory=lambda: ["view"])
    expires_at: str | None = None


class PdfGenerateRequest(BaseModel):
    template_id: str
    variables: dict[str, Any] = Field(default_factory=dict)
