from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List, Union

# Catalog documents and public views both use camelCase keys (finalPrice, isPrimary, ...)
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProductImage(BaseModel):
    url: Optional[str] = None
    is_primary: Optional[bool] = None

    model_config = {**_CAMEL, "extra": "allow"}


class ProductRecord(BaseModel):
    """
    Catalog product as stored by the catalog service.
    Read-only input for the projector; every field may be missing.
    """
    id: Any = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    name: Optional[str] = None
    slug: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[Any] = None
    images: Optional[List[ProductImage]] = None
    price: Optional[float] = None
    final_price: Optional[float] = None
    category: Optional[Any] = None
    brand: Optional[Any] = None  # populated document or bare reference id
    specifications: Optional[Any] = None
    features: Optional[Any] = None
    compare_attributes: Optional[Any] = None
    seo: Optional[Any] = None
    ratings_average: Optional[float] = None
    ratings_quantity: Optional[Union[int, float]] = None

    model_config = {**_CAMEL, "extra": "ignore"}


class ProductSummaryView(BaseModel):
    id: Any = None
    name: Optional[str] = None
    slug: Optional[str] = None
    price: Optional[float] = None
    final_price: Optional[float] = None
    image: Optional[str] = None
    brand: Optional[str] = None
    rating: float = 0
    rating_count: Union[int, float] = 0

    model_config = _CAMEL


class ProductDetailView(BaseModel):
    id: Any = None
    name: Optional[str] = None
    slug: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[Any] = None
    images: Optional[List[ProductImage]] = None
    price: Optional[float] = None
    final_price: Optional[float] = None
    category: Optional[Any] = None
    brand: Optional[Any] = None
    specifications: Optional[Any] = None
    features: Optional[Any] = None
    compare_attributes: Optional[Any] = None
    seo: Optional[Any] = None

    model_config = _CAMEL
