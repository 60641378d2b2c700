"""Pydantic schemas for Codegen API endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class CodegenMapRequest(BaseModel):
    """Request for POST /api/v1/codegen/map."""
    figma_data: Dict[str, Any] = Field(
        ...,
        description=(
            "Design data: an export with a `structure` root, a Figma file "
            "response with a `document` root, or a bare root node"
        ),
    )


class CodegenGenerateRequest(CodegenMapRequest):
    """Request for POST /api/v1/codegen/generate."""
    requirements: List[str] = Field(
        default_factory=list,
        description="Extra requirements appended to the prompt (numbered from 8)",
    )
    examples: Optional[List[str]] = Field(
        None,
        description="Pre-supplied Salt usage examples, placed before fetched ones",
    )

    @field_validator("requirements")
    @classmethod
    def strip_requirements(cls, requirements: List[str]) -> List[str]:
        return [r.strip() for r in requirements if r and r.strip()]


class MappedComponentSchema(BaseModel):
    """One node of the mapped Salt component tree."""
    type: str
    import_path: str = Field(..., alias="import")
    props: Dict[str, Any] = Field(default_factory=dict)
    content: Optional[str] = None
    children: List["MappedComponentSchema"] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class CodegenMapResponse(BaseModel):
    """Response for POST /api/v1/codegen/map."""
    components: List[MappedComponentSchema]
    component_types: List[str]
    context: str


class CodegenGenerateResponse(BaseModel):
    """Response for POST /api/v1/codegen/generate."""
    code: str
    imports: List[str]
    dependencies: List[str]
    warnings: List[str]


class CodegenValidateRequest(BaseModel):
    """Request for POST /api/v1/codegen/validate."""
    code: str = Field(..., description="React component source to check")


class CodegenValidateResponse(BaseModel):
    """Response for POST /api/v1/codegen/validate."""
    valid: bool
    errors: List[str]
    suggestions: List[str]


MappedComponentSchema.model_rebuild()
