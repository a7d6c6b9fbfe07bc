"""Service info schemas."""
from .base import CamelModel


class VersionResponse(CamelModel):
    major: int
    minor: int
    patch: int
    pre: str | None = None
