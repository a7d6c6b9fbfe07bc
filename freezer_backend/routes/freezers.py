"""/api/freezers."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config.database import get_db
from ..exceptions import DuplicateError, NotFoundError
from ..models import Freezer
from ..schemas.freezer import FreezerAdd, FreezerResponse, FreezerUpdate

router = APIRouter()

DUPLICATE_NAME = "This freezer name already exists"


async def _name_taken(db: AsyncSession, name: str, exclude_id: int | None = None) -> bool:
    q = select(Freezer.freezer_id).where(Freezer.name == name)
    if exclude_id is not None:
        q = q.where(Freezer.freezer_id != exclude_id)
    return (await db.execute(q.limit(1))).first() is not None


@router.get("", response_model=list[FreezerResponse], summary="All freezers")
async def get_all_freezers(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Freezer).order_by(Freezer.freezer_id))
    return result.scalars().all()


@router.get(
    "/id={freezer_id}",
    response_model=FreezerResponse,
    responses={500: {"description": "Record not found"}},
)
async def get_freezer_by_id(freezer_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    freezer = await db.get(Freezer, freezer_id)
    if not freezer:
        raise NotFoundError("Record not found")
    return freezer


@router.get(
    "/name={name}",
    response_model=FreezerResponse,
    responses={500: {"description": "Record not found"}},
)
async def get_freezer_by_name(name: str, db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Freezer).where(Freezer.name == name))
    freezer = result.scalar_one_or_none()
    if not freezer:
        raise NotFoundError("Record not found")
    return freezer


@router.post(
    "/create",
    response_model=FreezerResponse,
    responses={500: {"description": DUPLICATE_NAME}},
)
async def create_freezer(body: FreezerAdd, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name):
        raise DuplicateError(DUPLICATE_NAME)
    freezer = Freezer(name=body.name)
    db.add(freezer)
    await db.flush()
    await db.refresh(freezer)
    return freezer


@router.patch(
    "",
    response_model=FreezerResponse,
    responses={500: {"description": "Duplicate name or unknown freezer id"}},
)
async def update_freezer(body: FreezerUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name, exclude_id=body.freezer_id):
        raise DuplicateError(DUPLICATE_NAME)
    freezer = await db.get(Freezer, body.freezer_id)
    if not freezer:
        raise NotFoundError("Record not found")
    freezer.name = body.name
    await db.flush()
    return freezer


@router.delete(
    "/id={freezer_id}",
    response_model=int,
    summary="Delete a freezer together with its drawers and their contents",
    responses={500: {"description": "This freezer id does not exist"}},
)
async def delete_freezer(freezer_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    freezer = await db.get(Freezer, freezer_id)
    if not freezer:
        raise NotFoundError("This freezer id does not exist")
    await db.delete(freezer)
    await db.flush()
    return freezer_id
