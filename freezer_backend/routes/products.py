"""/api/products: catalog of storable products and their shelf life."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config.database import get_db
from ..config.settings import settings
from ..exceptions import DuplicateError, NotFoundError
from ..models import Product
from ..schemas.product import ProductAdd, ProductResponse, ProductUpdate

router = APIRouter()

DUPLICATE_NAME = "This product name already exists"


async def _name_taken(db: AsyncSession, name: str, exclude_id: int | None = None) -> bool:
    q = select(Product.product_id).where(Product.name == name)
    if exclude_id is not None:
        q = q.where(Product.product_id != exclude_id)
    return (await db.execute(q.limit(1))).first() is not None


@router.get("", response_model=list[ProductResponse], summary="All products")
async def get_all_products(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Product).order_by(Product.product_id))
    return result.scalars().all()


@router.get(
    "/id={product_id}",
    response_model=ProductResponse,
    responses={500: {"description": "Record not found"}},
)
async def get_product_by_id(product_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    product = await db.get(Product, product_id)
    if not product:
        raise NotFoundError("Record not found")
    return product


@router.get(
    "/name={name}",
    response_model=ProductResponse,
    responses={500: {"description": "Record not found"}},
)
async def get_product_by_name(name: str, db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Product).where(Product.name == name))
    product = result.scalar_one_or_none()
    if not product:
        raise NotFoundError("Record not found")
    return product


@router.get(
    "/expiration={expiration_months}",
    response_model=list[ProductResponse],
    summary="Products with the given shelf life in months",
)
async def get_products_by_expiration(expiration_months: int, db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(
        select(Product)
        .where(Product.expiration_months == expiration_months)
        .order_by(Product.product_id)
    )
    return result.scalars().all()


@router.post(
    "",
    response_model=ProductResponse,
    responses={500: {"description": DUPLICATE_NAME}},
)
async def create_product(body: ProductAdd, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name):
        raise DuplicateError(DUPLICATE_NAME)
    expiration_months = body.expiration_months
    if expiration_months is None:
        expiration_months = settings.default_expiration_months
    product = Product(name=body.name, expiration_months=expiration_months)
    db.add(product)
    await db.flush()
    await db.refresh(product)
    return product


@router.patch(
    "",
    response_model=ProductResponse,
    summary="Rename a product or change its shelf life",
    responses={500: {"description": "Duplicate name or unknown product id"}},
)
async def update_product(body: ProductUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await _name_taken(db, body.name, exclude_id=body.product_id):
        raise DuplicateError(DUPLICATE_NAME)
    product = await db.get(Product, body.product_id)
    if not product:
        raise NotFoundError("Record not found")
    product.name = body.name
    product.expiration_months = body.expiration_months
    await db.flush()
    return product


@router.delete(
    "/id={product_id}",
    response_model=int,
    summary="Delete a product and, through the foreign key, its storage entries",
    responses={500: {"description": "This product id does not exist"}},
)
async def delete_product(product_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    product = await db.get(Product, product_id)
    if not product:
        raise NotFoundError("This product id does not exist")
    await db.delete(product)
    await db.flush()
    return product_id
