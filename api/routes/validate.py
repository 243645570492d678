"""Validate endpoint for token sequences."""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import List, Optional

from rpn.runtime.tokens import check_tokens

router = APIRouter()


class ValidateRequest(BaseModel):
    """Request body for token validation."""
    tokens: List[str]


class TokenError(BaseModel):
    index: Optional[int] = None
    token: Optional[str] = None
    kind: str
    error: str


class ValidateResponse(BaseModel):
    """Response body for token validation."""
    valid: bool
    token_count: int = 0
    operand_count: int = 0
    operator_count: int = 0
    errors: List[TokenError] = []


@router.post("/validate", response_model=ValidateResponse)
async def validate_tokens(request: ValidateRequest):
    """Classify every token without evaluating."""
    tokens, errors = check_tokens(request.tokens)
    operators = sum(1 for t in tokens if t.is_operator)
    return ValidateResponse(
        valid=not errors,
        token_count=len(request.tokens),
        operand_count=len(tokens) - operators,
        operator_count=operators,
        errors=[
            TokenError(index=e.index, token=e.token, kind=e.kind.value, error=e.detail)
            for e in errors
        ],
    )
