from fastapi import APIRouter
from . import root, storage, products, freezers, drawers

router = APIRouter()

router.include_router(root.router, prefix="/api", tags=["root"])
router.include_router(storage.router, prefix="/api/storage", tags=["storage"])
router.include_router(products.router, prefix="/api/products", tags=["products"])
router.include_router(freezers.router, prefix="/api/freezers", tags=["freezers"])
router.include_router(drawers.router, prefix="/api/drawers", tags=["drawers"])
