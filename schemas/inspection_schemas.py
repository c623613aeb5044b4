from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional
from models.material import MaterialState


class InspectionCreate(BaseModel):
    """Request para registrar uma inspeção"""
    date: datetime
    materials: List[int] = Field(default_factory=list)
    inspector: str = Field(..., min_length=1)
    type: str = "weekly"
    status: str = "planned"
    result: Optional[str] = None
    notes: Optional[str] = None
    report: Optional[str] = None


class InspectedMaterial(BaseModel):
    """Snapshot do material embutido na inspeção"""
    id: int
    name: str
    category: str
    condition: int
    state: MaterialState
    shelf: str
    position: str
    last_inspection: Optional[datetime] = None

    class Config:
        from_attributes = True


class InspectionResponse(BaseModel):
    """Response de uma inspeção"""
    id: int
    date: datetime
    inspector: str
    type: str
    status: str
    result: Optional[str] = None
    notes: Optional[str] = None
    report: Optional[str] = None
    created_at: datetime
    materials: List[InspectedMaterial]
    skipped_materials: List[int] = Field(default_factory=list)

    class Config:
        from_attributes = True
