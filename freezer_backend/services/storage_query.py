"""Storage search: validate filter, query the joined tables, project, then filter on expiration.

Expiration is derived (date_in + product shelf life), so predicates on it are
applied in memory after projection instead of being pushed into SQL. That keeps
the month arithmetic in one place (services.expiration).
"""
import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, PersistenceError, StorageFilterError
from ..models import Drawer, Freezer, Product, Storage
from ..schemas.storage import StorageFilter, StorageResponse
from .expiration import compute_expiration
from .query_params import parse_query

logger = logging.getLogger(__name__)

StorageRow = tuple[Storage, Product, Drawer, Freezer]

DRAWER_WITHOUT_FREEZER = "drawerName also requires freezerName as query parameters"
IN_BEFORE_AFTER_EXPIRES_AFTER = "inBefore cannot be later than expiresAfterDate"
EXPIRES_BEFORE_NOT_AFTER_EXPIRES_AFTER = "expiresBeforeDate cannot be equal or earlier than expiresAfterDate"
MIN_WEIGHT_NOT_BELOW_MAX = "minWeight must be smaller than maxWeight"
STORAGE_ITEM_NOT_FOUND = "Storage item not found"


def parse_storage_filter(params: Mapping[str, str | None]) -> StorageFilter:
    """Build a StorageFilter from raw camelCase query values, treating empty strings as absent."""
    return parse_query(StorageFilter, params, StorageFilterError)


def validate_filter(storage_filter: StorageFilter) -> None:
    """Cross-field checks, in order; the first failing rule is reported."""
    f = storage_filter
    if f.drawer_name is not None and f.freezer_name is None:
        raise StorageFilterError(DRAWER_WITHOUT_FREEZER)
    if f.in_before is not None and f.expires_after_date is not None and f.in_before >= f.expires_after_date:
        raise StorageFilterError(IN_BEFORE_AFTER_EXPIRES_AFTER)
    if (
        f.expires_before_date is not None
        and f.expires_after_date is not None
        and f.expires_before_date <= f.expires_after_date
    ):
        raise StorageFilterError(EXPIRES_BEFORE_NOT_AFTER_EXPIRES_AFTER)
    if not f.min_weight < f.max_weight:
        raise StorageFilterError(MIN_WEIGHT_NOT_BELOW_MAX)


def joined_storage_select() -> Select:
    """Storage joined with its product, drawer and the drawer's freezer."""
    return (
        select(Storage, Product, Drawer, Freezer)
        .join(Product, Storage.product_id == Product.product_id)
        .join(Drawer, Storage.drawer_id == Drawer.drawer_id)
        .join(Freezer, Drawer.freezer_id == Freezer.freezer_id)
    )


def build_storage_query(storage_filter: StorageFilter) -> Select:
    """SQL for every storable predicate of the filter, ordered by storage id.

    expires_in_days, expires_after_date and expires_before_date are left to
    apply_expiration_filters.
    """
    f = storage_filter
    q = joined_storage_select()
    if f.product_name is not None:
        q = q.where(Product.name == f.product_name)
    if f.freezer_name is not None:
        q = q.where(Freezer.name == f.freezer_name)
        if f.drawer_name is not None:
            q = q.where(Drawer.name == f.drawer_name)
    if f.in_before is not None:
        q = q.where(Storage.date_in < f.in_before)
    if f.is_withdrawn:
        q = q.where(Storage.date_out.is_not(None))
    else:
        q = q.where(Storage.date_out.is_(None))
    q = q.where(Storage.weight_grams <= f.max_weight, Storage.weight_grams >= f.min_weight)
    return q.order_by(Storage.storage_id.asc())


def project_row(row: StorageRow, today: date) -> StorageResponse:
    storage, product, drawer, freezer = row
    expiration = compute_expiration(storage.date_in, product.expiration_months, today)
    return StorageResponse(
        storage_id=storage.storage_id,
        product_name=product.name,
        freezer_name=freezer.name,
        drawer_name=drawer.name,
        weight_grams=storage.weight_grams,
        expires_in_days=expiration.expires_in_days,
        expiration_date=expiration.expiration_date,
        in_storage_since=storage.date_in,
        out_storage_since=storage.date_out,
    )


def project_rows(rows: Iterable[StorageRow], today: date) -> list[StorageResponse]:
    """One response per row, input order kept."""
    return [project_row(row, today) for row in rows]


def apply_expiration_filters(
    responses: Sequence[StorageResponse], storage_filter: StorageFilter
) -> list[StorageResponse]:
    """Narrow projected responses by the expiration-derived predicates, keeping order."""
    f = storage_filter
    result = list(responses)
    if f.expires_in_days is not None:
        result = [r for r in result if r.expires_in_days <= f.expires_in_days]
    if f.expires_after_date is not None:
        result = [r for r in result if r.expiration_date >= f.expires_after_date]
    if f.expires_before_date is not None:
        result = [r for r in result if r.expiration_date <= f.expires_before_date]
    return result


async def _fetch_rows(db: AsyncSession, query: Select) -> list[StorageRow]:
    try:
        result = await db.execute(query)
    except SQLAlchemyError as exc:
        logger.exception("Storage query failed")
        raise PersistenceError(str(exc)) from exc
    return [tuple(row) for row in result.all()]


async def search_storage(db: AsyncSession, storage_filter: StorageFilter, today: date) -> list[StorageResponse]:
    """Full GET /api/storage pipeline. Performs a single read query."""
    validate_filter(storage_filter)
    logger.debug("Storage search with %s", storage_filter.model_dump(exclude_defaults=True))
    rows = await _fetch_rows(db, build_storage_query(storage_filter))
    responses = project_rows(rows, today)
    filtered = apply_expiration_filters(responses, storage_filter)
    logger.debug("Storage search: %d rows, %d after expiration filters", len(responses), len(filtered))
    return filtered


async def get_storage_response(db: AsyncSession, storage_id: int, today: date) -> StorageResponse:
    """Single storage entry by id, withdrawn or not."""
    rows = await _fetch_rows(db, joined_storage_select().where(Storage.storage_id == storage_id))
    if not rows:
        raise NotFoundError(STORAGE_ITEM_NOT_FOUND)
    return project_row(rows[0], today)
