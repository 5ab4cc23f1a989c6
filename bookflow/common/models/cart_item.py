from sqlalchemy import Column, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import relationship
from .base import Base


class CartItem(Base):
    """Links an account to a catalog item it added to cart.

    No unique constraint on (account_id, catalog_item_id): adding the same
    book twice stores two rows.
    """

    __tablename__ = "cart_item"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("account.id"), nullable=False, index=True)
    catalog_item_id = Column(Integer, ForeignKey("catalog_item.id"), nullable=False)
    added_at = Column(DateTime, nullable=False, server_default=func.now())

    account = relationship("Account", back_populates="cart_items")
    catalog_item = relationship("CatalogItem", back_populates="cart_items")
