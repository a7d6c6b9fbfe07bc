"""products table: catalog of what can be frozen and how long it keeps."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class Product(Base):
    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # shelf life in whole months
    expiration_months: Mapped[int] = mapped_column(Integer, nullable=False, default=6, server_default="6")

    storage_items = relationship("Storage", back_populates="product", cascade="all, delete-orphan", passive_deletes=True)
