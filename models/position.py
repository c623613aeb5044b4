from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .database import Base


class Position(Base):
    """Posições fixas de uma prateleira (3 níveis x 3 posições)"""
    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, index=True)
    shelf_id = Column(Integer, ForeignKey("shelves.id"), nullable=False)
    position_id = Column(String, nullable=False, index=True)  # "A1-H1"
    level = Column(String, nullable=False)  # "High", "Mid", "Low"
    level_code = Column(String, nullable=False)  # "H", "M", "L"
    position_number = Column(Integer, nullable=False)  # 1..3
    occupied = Column(Boolean, default=False, nullable=False, index=True)
    # Referência solta: o registro de prateleiras não conhece os materiais
    material_id = Column(Integer, nullable=True)

    shelf = relationship("Shelf", back_populates="positions")

    __table_args__ = (
        UniqueConstraint("shelf_id", "position_id", name="uq_shelf_position"),
    )
