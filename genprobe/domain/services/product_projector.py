# genprobe/domain/services/product_projector.py

from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Optional, Union

from genprobe.domain.models.product import (
    ProductDetailView,
    ProductImage,
    ProductRecord,
    ProductSummaryView,
)

ProductInput = Union[ProductRecord, Mapping[str, Any]]


def _as_record(p: ProductInput) -> ProductRecord:
    """Accept a validated record or a raw catalog document (dict with camelCase keys / _id)."""
    if isinstance(p, ProductRecord):
        return p
    return ProductRecord.model_validate(dict(p))


def _primary_image_url(images: Optional[List[ProductImage]]) -> Optional[str]:
    for img in images or []:
        if img.is_primary is True:
            return img.url
    return None


def _brand_name(brand: Any) -> Optional[str]:
    # unpopulated references arrive as a bare id
    if isinstance(brand, Mapping):
        name = brand.get("name")
    else:
        name = getattr(brand, "name", None)
    return name if isinstance(name, str) else None


def to_summary(p: ProductInput) -> ProductSummaryView:
    """Listing card view: primary image url, brand name, rating defaults to 0."""
    rec = _as_record(p)
    return ProductSummaryView(
        id=rec.id,
        name=rec.name,
        slug=rec.slug,
        price=rec.price,
        final_price=rec.final_price,
        image=_primary_image_url(rec.images),
        brand=_brand_name(rec.brand),
        rating=rec.ratings_average or 0,
        rating_count=rec.ratings_quantity or 0,
    )


def to_detail(p: ProductInput) -> ProductDetailView:
    """Product page view: straight field copy, nothing derived or defaulted."""
    rec = _as_record(p)
    return ProductDetailView(
        id=rec.id,
        name=rec.name,
        slug=rec.slug,
        sku=rec.sku,
        description=rec.description,
        images=rec.images,
        price=rec.price,
        final_price=rec.final_price,
        category=rec.category,
        brand=rec.brand,
        specifications=rec.specifications,
        features=rec.features,
        compare_attributes=rec.compare_attributes,
        seo=rec.seo,
    )


def to_summary_list(products: Iterable[ProductInput]) -> List[ProductSummaryView]:
    return [to_summary(p) for p in products]
