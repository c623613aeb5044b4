from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from .database import Base


inspection_materials = Table(
    "inspection_materials",
    Base.metadata,
    Column("inspection_id", Integer, ForeignKey("inspections.id"), primary_key=True),
    Column("material_id", Integer, ForeignKey("materials.id"), primary_key=True),
)


class Inspection(Base):
    """Passagens de inspeção sobre um conjunto de materiais"""
    __tablename__ = "inspections"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(DateTime, nullable=False, index=True)
    inspector = Column(String, nullable=False)
    type = Column(String, default="weekly", nullable=False)
    status = Column(String, default="planned", nullable=False)
    result = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    report = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    materials = relationship(
        "Material",
        secondary=inspection_materials,
        back_populates="inspections",
        order_by="Material.id",
    )
