from .freezer import Freezer
from .drawer import Drawer
from .product import Product
from .storage import Storage

__all__ = [
    "Freezer",
    "Drawer",
    "Product",
    "Storage",
]
