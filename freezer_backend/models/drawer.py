"""drawers table. Drawer names are unique per freezer."""
from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class Drawer(Base):
    __tablename__ = "drawers"
    __table_args__ = (UniqueConstraint("freezer_id", "name", name="drawers_freezer_id_name_key"),)

    drawer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    freezer_id: Mapped[int] = mapped_column(Integer, ForeignKey("freezers.freezer_id", ondelete="CASCADE"), nullable=False)

    freezer = relationship("Freezer", back_populates="drawers")
    storage_items = relationship("Storage", back_populates="drawer", cascade="all, delete-orphan", passive_deletes=True)
