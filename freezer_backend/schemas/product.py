"""Product API schemas."""
from pydantic import Field

from .base import CamelModel

# 100 years; keeps every expiration date inside the date range
MAX_EXPIRATION_MONTHS = 1200


class ProductResponse(CamelModel):
    product_id: int
    name: str
    expiration_months: int


class ProductAdd(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    expiration_months: int | None = Field(
        None, ge=0, le=MAX_EXPIRATION_MONTHS, description="Shelf life in months, defaults to 6"
    )


class ProductUpdate(CamelModel):
    product_id: int
    name: str = Field(..., min_length=1, max_length=50)
    expiration_months: int = Field(..., ge=0, le=MAX_EXPIRATION_MONTHS)
