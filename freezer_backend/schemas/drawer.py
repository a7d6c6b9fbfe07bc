"""Drawer API schemas."""
from pydantic import Field

from .base import CamelModel


class DrawerResponse(CamelModel):
    drawer_id: int
    name: str
    freezer_id: int


class DrawerAdd(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    freezer_id: int


class DrawerUpdate(CamelModel):
    drawer_id: int
    name: str = Field(..., min_length=1, max_length=50)
    freezer_id: int


class DrawerQueryOptions(CamelModel):
    """Query parameters of GET /api/drawers."""
    drawer_id: int | None = None
    freezer_id: int | None = None
    drawer_name: str | None = None
