"""/api/drawers."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config.database import get_db
from ..exceptions import BadRequestError, DuplicateError, NotFoundError
from ..models import Drawer, Freezer
from ..schemas.drawer import DrawerAdd, DrawerQueryOptions, DrawerResponse, DrawerUpdate
from ..services.query_params import parse_query

router = APIRouter()

DUPLICATE_NAME = "This drawer name already exists within this freezer"
DRAWER_NOT_FOUND = "Drawer not found"
DRAWER_ID_EXCLUSIVE = "When a drawer_id is given, no other parameters can be given"


def drawer_query_params(
    drawer_id: str | None = Query(None, alias="drawerId"),
    freezer_id: str | None = Query(None, alias="freezerId"),
    drawer_name: str | None = Query(None, alias="drawerName"),
) -> DrawerQueryOptions:
    raw = {"drawerId": drawer_id, "freezerId": freezer_id, "drawerName": drawer_name}
    return parse_query(DrawerQueryOptions, raw, BadRequestError)


async def _name_taken(db: AsyncSession, name: str, freezer_id: int, exclude_id: int | None = None) -> bool:
    q = select(Drawer.drawer_id).where(Drawer.name == name, Drawer.freezer_id == freezer_id)
    if exclude_id is not None:
        q = q.where(Drawer.drawer_id != exclude_id)
    return (await db.execute(q.limit(1))).first() is not None


@router.get(
    "",
    response_model=list[DrawerResponse],
    summary="Drawers by id, freezer and/or name; all drawers without parameters",
    responses={400: {"description": DRAWER_ID_EXCLUSIVE}},
)
async def get_drawers(
    options: Annotated[DrawerQueryOptions, Depends(drawer_query_params)],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    if options.drawer_id is not None and (options.drawer_name is not None or options.freezer_id is not None):
        raise BadRequestError(DRAWER_ID_EXCLUSIVE)

    q = select(Drawer)
    if options.drawer_id is not None:
        q = q.where(Drawer.drawer_id == options.drawer_id)
    if options.drawer_name is not None:
        q = q.where(Drawer.name == options.drawer_name)
    if options.freezer_id is not None:
        q = q.where(Drawer.freezer_id == options.freezer_id)
    result = await db.execute(q.order_by(Drawer.drawer_id))
    return result.scalars().all()


@router.post(
    "",
    response_model=DrawerResponse,
    responses={500: {"description": "Duplicate name within the freezer or unknown freezer"}},
)
async def create_drawer(body: DrawerAdd, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name, body.freezer_id):
        raise DuplicateError(DUPLICATE_NAME)
    if not await db.get(Freezer, body.freezer_id):
        raise NotFoundError("Record not found")
    drawer = Drawer(name=body.name, freezer_id=body.freezer_id)
    db.add(drawer)
    await db.flush()
    await db.refresh(drawer)
    return drawer


@router.patch(
    "",
    response_model=DrawerResponse,
    summary="Rename a drawer or move it to another freezer",
    responses={500: {"description": "Duplicate name within the freezer or unknown drawer"}},
)
async def update_drawer(body: DrawerUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name, body.freezer_id, exclude_id=body.drawer_id):
        raise DuplicateError(DUPLICATE_NAME)
    drawer = await db.get(Drawer, body.drawer_id)
    if not drawer:
        raise NotFoundError(DRAWER_NOT_FOUND)
    if not await db.get(Freezer, body.freezer_id):
        raise NotFoundError("Record not found")
    drawer.name = body.name
    drawer.freezer_id = body.freezer_id
    await db.flush()
    return drawer


@router.delete(
    "/id={drawer_id}",
    response_model=int,
    responses={500: {"description": "Drawer not found"}},
)
async def delete_drawer(drawer_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    drawer = await db.get(Drawer, drawer_id)
    if not drawer:
        raise NotFoundError(DRAWER_NOT_FOUND)
    await db.delete(drawer)
    await db.flush()
    return drawer_id
