from decimal import Decimal
from typing import Dict

from sqlalchemy.orm import joinedload

from ..db.session import SessionFactory
from ..models.account import Account
from ..models.cart_item import CartItem
from ..models.catalog_item import CatalogItem
from ..utils.dto import to_cart_item_dto
from ..utils.validators import is_storable_id
from .logging import log_event


class CartService:
    """Cart operations backed by DB."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def add_item(self, *, account_id: int, catalog_item_id: int) -> Dict:
        """Store one cart row for (account, item).

        Repeated adds of the same book are kept as separate rows. Raises
        PermissionError when the account no longer exists and LookupError for
        an unknown book.
        """
        if not account_id:
            raise ValueError("account_id required")
        with self._session_factory() as session:
            if not is_storable_id(account_id) or session.get(Account, account_id) is None:
                raise PermissionError(f"account {account_id} does not exist")
            if not is_storable_id(catalog_item_id) or session.get(CatalogItem, catalog_item_id) is None:
                raise LookupError(f"catalog item {catalog_item_id} not found")
            item = CartItem(account_id=account_id, catalog_item_id=catalog_item_id)
            session.add(item)
            session.flush()
            log_event("info", "cart.item_added", account_id=account_id, catalog_item_id=catalog_item_id, cart_item_id=item.id)
            return {"status": "added", "cart_item_id": item.id}

    def get_cart(self, *, account_id: int) -> Dict:
        with self._session_factory() as session:
            rows = (
                session.query(CartItem)
                .options(joinedload(CartItem.catalog_item))
                .filter(CartItem.account_id == account_id)
                .order_by(CartItem.id)
                .all()
            )
            items = [to_cart_item_dto(r) for r in rows]
            total = sum((Decimal(str(r.catalog_item.price)) for r in rows), Decimal("0"))
            return {"items": items, "total": float(total)}
