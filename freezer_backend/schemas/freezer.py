"""Freezer API schemas."""
from pydantic import Field

from .base import CamelModel


class FreezerResponse(CamelModel):
    freezer_id: int
    name: str


class FreezerAdd(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)


class FreezerUpdate(CamelModel):
    freezer_id: int
    name: str = Field(..., min_length=1, max_length=50)
