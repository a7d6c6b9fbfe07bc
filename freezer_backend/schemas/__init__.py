from .storage import StorageFilter, StorageResponse, StorageItemAdd
from .product import ProductResponse, ProductAdd, ProductUpdate
from .freezer import FreezerResponse, FreezerAdd, FreezerUpdate
from .drawer import DrawerResponse, DrawerAdd, DrawerUpdate, DrawerQueryOptions
from .root import VersionResponse

__all__ = [
    "StorageFilter",
    "StorageResponse",
    "StorageItemAdd",
    "ProductResponse",
    "ProductAdd",
    "ProductUpdate",
    "FreezerResponse",
    "FreezerAdd",
    "FreezerUpdate",
    "DrawerResponse",
    "DrawerAdd",
    "DrawerUpdate",
    "DrawerQueryOptions",
    "VersionResponse",
]
