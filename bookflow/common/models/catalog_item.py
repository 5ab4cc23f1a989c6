from sqlalchemy import Column, DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import relationship
from .base import Base


class CatalogItem(Base):
    __tablename__ = "catalog_item"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    cart_items = relationship("CartItem", back_populates="catalog_item")
