"""Storage API schemas."""
from datetime import date
from pydantic import Field, StrictBool, field_validator

from .base import CamelModel
from .product import MAX_EXPIRATION_MONTHS

DEFAULT_MIN_WEIGHT = 0.0
DEFAULT_MAX_WEIGHT = 1000.0

# date_in plus the longest shelf life must stay before year 10000
LATEST_DATE_IN = date(9999 - MAX_EXPIRATION_MONTHS // 12, 12, 31)


class StorageFilter(CamelModel):
    """Query parameters of GET /api/storage. An absent field puts no constraint on its dimension."""
    product_name: str | None = None
    freezer_name: str | None = None
    drawer_name: str | None = None  # only together with freezer_name
    in_before: date | None = None
    expires_in_days: int | None = None
    expires_after_date: date | None = None
    expires_before_date: date | None = None
    is_withdrawn: StrictBool = False
    min_weight: float = DEFAULT_MIN_WEIGHT
    max_weight: float = DEFAULT_MAX_WEIGHT

    @field_validator("is_withdrawn", mode="before")
    @classmethod
    def true_or_false(cls, value):
        """Only the literals true and false, in any case; 1, yes and on are rejected."""
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        return value


class StorageResponse(CamelModel):
    """Denormalized storage entry with its derived expiration data."""
    storage_id: int
    product_name: str
    freezer_name: str
    drawer_name: str
    weight_grams: float
    expires_in_days: int
    expiration_date: date
    in_storage_since: date
    out_storage_since: date | None = None


class StorageItemAdd(CamelModel):
    product_id: int
    drawer_id: int
    weight_grams: float = Field(..., ge=0)
    date_in: date | None = Field(None, le=LATEST_DATE_IN, description="YYYY-MM-DD, defaults to today")
