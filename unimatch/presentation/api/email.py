"""
Email API Router - Live university email feedback for the signup form.

Public endpoints (no token): the form calls them on every keystroke,
before an account exists.
"""

from typing import Optional

from fastapi import APIRouter, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from unimatch.application.dto.email import InstitutionDTO, ValidationResultDTO
from unimatch.application.queries.email import (
    CheckEmailHandler,
    CheckEmailQuery,
    SuggestDomainsHandler,
    SuggestDomainsQuery,
)


# ==================== REQUEST/RESPONSE MODELS ====================


class EmailCheckResponse(BaseModel):
    validation: ValidationResultDTO
    institution: Optional[InstitutionDTO] = None


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


# ==================== ROUTER ====================

router = APIRouter(prefix="/email", tags=["email"])


@router.get(
    "/validate",
    response_model=EmailCheckResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def validate_email(
    handler: FromDishka[CheckEmailHandler],
    email: str = "",
):
    """Classify an email address as a university address."""
    result = await handler.execute(CheckEmailQuery(email=email))
    return EmailCheckResponse(
        validation=ValidationResultDTO.from_result(result.validation),
        institution=(
            InstitutionDTO.from_info(result.institution) if result.institution else None
        ),
    )


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def suggest_domains(
    handler: FromDishka[SuggestDomainsHandler],
    email: str = "",
):
    """Autocomplete hints for a partially typed email."""
    suggestions = await handler.execute(SuggestDomainsQuery(partial_email=email))
    return SuggestionsResponse(suggestions=suggestions)
