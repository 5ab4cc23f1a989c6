from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from .base import Base


class Account(Base):
    __tablename__ = "account"

    id = Column(Integer, primary_key=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    # bcrypt output, never the plaintext password
    password_hash = Column(String(60), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    cart_items = relationship("CartItem", back_populates="account")
