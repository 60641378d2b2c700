"""Figma → Salt codegen API endpoints.

- POST /api/v1/codegen/map       map design data to Salt components (no LLM call)
- POST /api/v1/codegen/generate  full generation (examples + completion + parsing)
- POST /api/v1/codegen/validate  Salt usage checks on arbitrary source
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from saltgen.codegen.generator import (
    CodeGenerationRequest,
    CodeGenerator,
    map_figma_data,
)
from saltgen.codegen.response_parser import CodeGenerationError, NoCodeBlockError
from saltgen.codegen.validator import CodeValidator
from saltgen.mapping.models import DesignDataError

from .codegen_schemas import (
    CodegenGenerateRequest,
    CodegenGenerateResponse,
    CodegenMapRequest,
    CodegenMapResponse,
    CodegenValidateRequest,
    CodegenValidateResponse,
    MappedComponentSchema,
)

# Child of the "api" logger configured by get_api_logger()
logger = logging.getLogger("api.codegen")

router = APIRouter(prefix="/api/v1/codegen", tags=["codegen"])


def get_generator(request: Request) -> Optional[CodeGenerator]:
    """Process-wide generator created in the app lifespan (None if unconfigured)."""
    return getattr(request.app.state, "generator", None)


def get_validator() -> CodeValidator:
    return CodeValidator()


@router.post("/map", response_model=CodegenMapResponse)
async def map_design(body: CodegenMapRequest) -> CodegenMapResponse:
    """Dry run: show how the design maps to Salt components and the prompt context."""
    try:
        mapping = map_figma_data(body.figma_data)
    except DesignDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    logger.info("map: components=%d, types=%s", len(mapping.components), mapping.component_types)
    return CodegenMapResponse(
        components=[
            MappedComponentSchema.model_validate(c.to_dict()) for c in mapping.components
        ],
        component_types=mapping.component_types,
        context=mapping.context,
    )


@router.post("/generate", response_model=CodegenGenerateResponse)
async def generate_code(
    body: CodegenGenerateRequest,
    generator: Optional[CodeGenerator] = Depends(get_generator),
) -> CodegenGenerateResponse:
    """Generate a Salt React component from design data."""
    if generator is None:
        raise HTTPException(
            status_code=400,
            detail="LLM_ENDPOINT not configured. Set LLM_ENDPOINT to enable code generation.",
        )

    try:
        result = await generator.generate_react_code(
            CodeGenerationRequest(
                figma_data=body.figma_data,
                requirements=body.requirements,
                examples=body.examples,
            )
        )
    except DesignDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except NoCodeBlockError as e:
        logger.warning("generate: malformed LLM output: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    except CodeGenerationError as e:
        logger.error("generate: upstream failure: %s", e)
        raise HTTPException(status_code=502, detail=str(e)) from e

    return CodegenGenerateResponse(**result.to_dict())


@router.post("/validate", response_model=CodegenValidateResponse)
async def validate_code(
    body: CodegenValidateRequest,
    validator: CodeValidator = Depends(get_validator),
) -> CodegenValidateResponse:
    """Check React source for Salt imports, exports and component usage."""
    result = validator.validate_react_code(body.code)
    logger.info("validate: valid=%s, errors=%d", result.valid, len(result.errors))
    return CodegenValidateResponse(**result.to_dict())
