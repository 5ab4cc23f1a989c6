from .account import Account
from .base import Base
from .cart_item import CartItem
from .catalog_item import CatalogItem

__all__ = ["Account", "Base", "CartItem", "CatalogItem"]
