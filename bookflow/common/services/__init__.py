from .account_service import AccountService, DuplicateEmailError
from .cart_service import CartService
from .catalog_service import CatalogService

__all__ = ["AccountService", "CartService", "CatalogService", "DuplicateEmailError"]
