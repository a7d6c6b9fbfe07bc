"""/api: service name, version and authors."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..config.settings import settings
from ..exceptions import FreezerAPIError
from ..schemas.root import VersionResponse

router = APIRouter()


def parse_version(version: str) -> VersionResponse:
    """'0.1.0-alpha' -> major 0, minor 1, patch 0, pre 'alpha'."""
    core, _, pre = version.partition("-")
    try:
        major, minor, patch = (int(part) for part in core.split("."))
    except ValueError as exc:
        raise FreezerAPIError(f"Invalid version string '{version}': {exc}") from exc
    return VersionResponse(major=major, minor=minor, patch=patch, pre=pre or None)


@router.get("", response_class=PlainTextResponse)
async def info():
    return f"Welcome to {settings.app_name} v{settings.app_version}"


@router.get("/version", response_model=VersionResponse)
async def version():
    return parse_version(settings.app_version)


@router.get("/authors", response_class=PlainTextResponse)
async def authors():
    return settings.app_authors or "No authors defined"
