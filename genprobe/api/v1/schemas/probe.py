# api/v1/schemas/probe.py
from pydantic import BaseModel, Field
from typing import List, Optional

from genprobe.domain.models.product import ProductSummaryView


class ProbeIn(BaseModel):
    model_id: str = Field(..., min_length=1)
    prompt: Optional[str] = None  # falls back to settings.DEFAULT_PROMPT
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    model_config = {"protected_namespaces": ()}


class SweepIn(BaseModel):
    candidates: List[str] = Field(..., min_length=1)
    prompt: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)


class ProductSummaryListOut(BaseModel):
    items: List[ProductSummaryView]
    count: int
