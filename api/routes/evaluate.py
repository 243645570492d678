"""Evaluate endpoint for postfix expressions."""

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import List, Optional

from rpn.runtime.executor import Executor, ExecutionConfig
from rpn.runtime.state import DEFAULT_CAPACITY

router = APIRouter()


class EvaluateRequest(BaseModel):
    """Request body for evaluation."""
    tokens: List[str]
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=0)


class EvaluateResponse(BaseModel):
    """Response body for evaluation."""
    success: bool
    value: Optional[int] = None
    status: int
    error_kind: Optional[str] = None
    error_index: Optional[int] = None
    error_token: Optional[str] = None
    error: Optional[str] = None
    token_count: int = 0
    execution_time_ms: float


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_tokens(request: EvaluateRequest):
    """Evaluate a token sequence. Input errors come back with success=false."""
    executor = Executor(ExecutionConfig(capacity=request.capacity))
    result = executor.execute(request.tokens)
    return EvaluateResponse(**result.to_dict())
