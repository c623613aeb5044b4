from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from models.material import MaterialState
from schemas.shelf_schemas import ShelfSummary
from services.codecs import parse_position_code


def _normalize_position(value):
    if value is None:
        return value
    row, number, level_code, index = parse_position_code(value)
    return f"{row}{number}-{level_code}{index}"


class MaterialCreate(BaseModel):
    """Campos para colocar um material numa posição"""
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    entry_date: date
    condition: int = Field(..., ge=0, le=100)
    shelf: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    shelf_id: Optional[int] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    color: Optional[str] = None
    next_inspection: Optional[datetime] = None
    created_by: Optional[int] = None

    @field_validator("position")
    @classmethod
    def normalize_position(cls, value):
        return _normalize_position(value)


class MaterialUpdate(BaseModel):
    """Campos editáveis; apenas os enviados são aplicados"""
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    entry_date: Optional[date] = None
    condition: Optional[int] = Field(None, ge=0, le=100)
    shelf: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    shelf_id: Optional[int] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    color: Optional[str] = None
    last_inspection: Optional[datetime] = None
    next_inspection: Optional[datetime] = None

    @field_validator("position")
    @classmethod
    def normalize_position(cls, value):
        return _normalize_position(value)


class MaterialFilter(BaseModel):
    """Filtros conjuntivos da listagem de materiais"""
    search: Optional[str] = None
    category: Optional[str] = None
    state: Optional[MaterialState] = None
    shelf: Optional[str] = None
    min_condition: Optional[int] = None
    max_condition: Optional[int] = None


class MaterialResponse(BaseModel):
    """Response de um material"""
    id: int
    name: str
    category: str
    description: Optional[str] = None
    notes: Optional[str] = None
    entry_date: date
    condition: int
    state: MaterialState
    shelf: str
    shelf_id: Optional[int] = None
    position: str
    color: str
    image: Optional[str] = None
    last_inspection: Optional[datetime] = None
    next_inspection: Optional[datetime] = None
    created_by: Optional[int] = None
    created_at: datetime
    shelf_detail: Optional[ShelfSummary] = None

    class Config:
        from_attributes = True
