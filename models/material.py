from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from .database import Base
import enum


class MaterialState(str, enum.Enum):
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


class Material(Base):
    """Materiais armazenados nas posições das prateleiras"""
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    entry_date = Column(Date, nullable=False)
    condition = Column(Integer, nullable=False)  # 0..100
    state = Column(
        SQLEnum(MaterialState, values_callable=lambda e: [m.value for m in e]),
        default=MaterialState.GOOD,
        nullable=False,
        index=True,
    )
    shelf = Column(String, nullable=False)  # Rótulo legível da prateleira
    # Sem FK: apagar a prateleira não apaga nem altera os materiais
    shelf_id = Column(Integer, nullable=True, index=True)
    position = Column(String, nullable=False)  # "A1-H1"
    color = Column(String, default="#3b82f6", nullable=False)
    image = Column(String, nullable=True)
    last_inspection = Column(DateTime, nullable=True)
    next_inspection = Column(DateTime, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    inspections = relationship(
        "Inspection",
        secondary="inspection_materials",
        back_populates="materials",
    )
