"""storage table: one weighed product put in a drawer on a given date."""
from datetime import date
from sqlalchemy import Integer, Float, Date, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class Storage(Base):
    __tablename__ = "storage"

    storage_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False)
    drawer_id: Mapped[int] = mapped_column(Integer, ForeignKey("drawers.drawer_id", ondelete="CASCADE"), nullable=False)
    weight_grams: Mapped[float] = mapped_column(Float, nullable=False)
    date_in: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    # set on withdrawal, cleared on re-entry
    date_out: Mapped[date | None] = mapped_column(Date, nullable=True)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    product = relationship("Product", back_populates="storage_items")
    drawer = relationship("Drawer", back_populates="storage_items")
