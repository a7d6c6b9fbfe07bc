"""/api/storage: search with expiration data, intake, update, withdraw, re-enter, delete."""
import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config.database import get_db
from ..config.timezone import get_today
from ..exceptions import FreezerAPIError, NotFoundError
from ..models import Drawer, Freezer, Product, Storage
from ..schemas.storage import StorageFilter, StorageItemAdd, StorageResponse
from ..services.storage_query import (
    STORAGE_ITEM_NOT_FOUND,
    get_storage_response,
    parse_storage_filter,
    search_storage,
)

logger = logging.getLogger(__name__)

router = APIRouter()

RECORD_NOT_FOUND = "Record not found"
UPDATE_FAILED = "Storage id not found, update failed"
DELETE_FAILED = "Storage id not found, delete failed"


def storage_filter_params(
    product_name: str | None = Query(None, alias="productName"),
    freezer_name: str | None = Query(None, alias="freezerName"),
    drawer_name: str | None = Query(None, alias="drawerName", description="Requires freezerName"),
    in_before: str | None = Query(None, alias="inBefore", description="YYYY-MM-DD"),
    expires_in_days: str | None = Query(None, alias="expiresInDays"),
    expires_after_date: str | None = Query(None, alias="expiresAfterDate", description="YYYY-MM-DD"),
    expires_before_date: str | None = Query(None, alias="expiresBeforeDate", description="YYYY-MM-DD"),
    is_withdrawn: str | None = Query(None, alias="isWithdrawn", description="Defaults to false"),
    min_weight: str | None = Query(None, alias="minWeight", description="Defaults to 0.0"),
    max_weight: str | None = Query(None, alias="maxWeight", description="Defaults to 1000.0"),
) -> StorageFilter:
    """Raw strings so empty parameters can be dropped before parsing."""
    return parse_storage_filter(
        {
            "productName": product_name,
            "freezerName": freezer_name,
            "drawerName": drawer_name,
            "inBefore": in_before,
            "expiresInDays": expires_in_days,
            "expiresAfterDate": expires_after_date,
            "expiresBeforeDate": expires_before_date,
            "isWithdrawn": is_withdrawn,
            "minWeight": min_weight,
            "maxWeight": max_weight,
        }
    )


@router.get(
    "",
    response_model=list[StorageResponse],
    summary="Search storage entries, ordered by storage id",
    responses={
        400: {"description": "Contradicting filter parameters"},
        500: {"description": "Database error"},
    },
)
async def get_storage(
    storage_filter: Annotated[StorageFilter, Depends(storage_filter_params)],
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    return await search_storage(db, storage_filter, today)


@router.get(
    "/{storage_id}",
    response_model=list[StorageResponse],
    summary="Single storage entry, wrapped in a list",
    responses={500: {"description": "Storage item not found"}},
)
async def get_storage_by_id(
    storage_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    return [await get_storage_response(db, storage_id, today)]


@router.post(
    "",
    response_model=list[StorageResponse],
    summary="Put a product in a drawer",
    responses={500: {"description": "Unknown product or drawer"}},
)
async def create_storage(
    body: StorageItemAdd,
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    if not await db.get(Product, body.product_id) or not await db.get(Drawer, body.drawer_id):
        raise NotFoundError(RECORD_NOT_FOUND)
    item = Storage(
        product_id=body.product_id,
        drawer_id=body.drawer_id,
        weight_grams=body.weight_grams,
        date_in=body.date_in or today,
        date_out=None,
        available=True,
    )
    db.add(item)
    await db.flush()
    await db.refresh(item)
    logger.info("Stored %.1f g of product %d in drawer %d (storage id %d)",
                item.weight_grams, item.product_id, item.drawer_id, item.storage_id)
    return [await get_storage_response(db, item.storage_id, today)]


@router.patch(
    "",
    response_model=list[StorageResponse],
    summary="Update a storage entry from its denormalized form",
    responses={500: {"description": "Storage item, product or drawer not found"}},
)
async def update_storage(
    body: StorageResponse,
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    item = await db.get(Storage, body.storage_id)
    if not item:
        raise NotFoundError(STORAGE_ITEM_NOT_FOUND)

    product = (await db.execute(
        select(Product).where(Product.name == body.product_name)
    )).scalar_one_or_none()
    drawer = (await db.execute(
        select(Drawer)
        .join(Freezer, Drawer.freezer_id == Freezer.freezer_id)
        .where(Freezer.name == body.freezer_name, Drawer.name == body.drawer_name)
    )).scalar_one_or_none()
    if not product or not drawer:
        raise NotFoundError(RECORD_NOT_FOUND)
    if body.out_storage_since is not None and body.out_storage_since < body.in_storage_since:
        raise FreezerAPIError("Withdrawal date cannot be earlier than the storage date")

    item.product_id = product.product_id
    item.drawer_id = drawer.drawer_id
    item.weight_grams = body.weight_grams
    item.date_in = body.in_storage_since
    item.date_out = body.out_storage_since
    item.available = body.out_storage_since is None
    await db.flush()
    return [await get_storage_response(db, item.storage_id, today)]


@router.patch(
    "/{storage_id}/withdraw",
    response_model=list[StorageResponse],
    summary="Take an item out of the freezer (sets the withdrawal date to today)",
    responses={500: {"description": "Storage id not found or already withdrawn"}},
)
async def withdraw_storage(
    storage_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    item = await db.get(Storage, storage_id)
    if not item:
        raise NotFoundError(UPDATE_FAILED)
    if item.date_out is not None:
        raise FreezerAPIError("Storage item already withdrawn")
    item.date_out = max(today, item.date_in)
    item.available = False
    await db.flush()
    logger.info("Withdrew storage id %d on %s", storage_id, item.date_out)
    return [await get_storage_response(db, storage_id, today)]


@router.patch(
    "/{storage_id}/re-enter",
    response_model=list[StorageResponse],
    summary="Put a withdrawn item back (clears the withdrawal date)",
    responses={500: {"description": "Storage id not found"}},
)
async def re_enter_storage(
    storage_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date, Depends(get_today)],
):
    item = await db.get(Storage, storage_id)
    if not item:
        raise NotFoundError(UPDATE_FAILED)
    item.date_out = None
    item.available = True
    await db.flush()
    return [await get_storage_response(db, storage_id, today)]


@router.delete(
    "/{storage_id}",
    response_model=int,
    summary="Delete a storage entry permanently",
    responses={500: {"description": "Storage id not found"}},
)
async def delete_storage(
    storage_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    item = await db.get(Storage, storage_id)
    if not item:
        raise NotFoundError(DELETE_FAILED)
    await db.delete(item)
    await db.flush()
    logger.info("Deleted storage id %d", storage_id)
    return storage_id
