from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .database import Base


class Shelf(Base):
    """Prateleira identificada por fila (letra) + número, sempre com 9 posições"""
    __tablename__ = "shelves"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    row = Column(String, nullable=False, index=True)  # "A", "B", ...
    number = Column(Integer, nullable=False)
    color = Column(String, default="#3b82f6", nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    positions = relationship(
        "Position",
        back_populates="shelf",
        cascade="all, delete-orphan",
        order_by="Position.id",
    )

    __table_args__ = (
        UniqueConstraint("row", "number", name="uq_shelf_row_number"),
    )
