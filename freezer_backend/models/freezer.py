"""freezers table."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class Freezer(Base):
    __tablename__ = "freezers"

    freezer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    drawers = relationship("Drawer", back_populates="freezer", cascade="all, delete-orphan", passive_deletes=True)
