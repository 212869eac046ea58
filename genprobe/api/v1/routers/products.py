# genprobe/api/v1/routers/products.py

from fastapi import APIRouter
from typing import List

from genprobe.api.v1.schemas.probe import ProductSummaryListOut
from genprobe.domain.models.product import ProductDetailView, ProductRecord
from genprobe.domain.services.product_projector import to_detail, to_summary_list

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.post("/summary", response_model=ProductSummaryListOut, summary="Project catalog records into listing cards")
async def products_summary(records: List[ProductRecord]):
    """
    The catalog service owns the records; this only reshapes them.
    Order is preserved.
    """
    items = to_summary_list(records)
    logger.debug(f"[products] summary count={len(items)}")
    return {"items": items, "count": len(items)}


@router.post("/detail", response_model=ProductDetailView, summary="Project one catalog record into the product page view")
async def products_detail(record: ProductRecord):
    return to_detail(record)
