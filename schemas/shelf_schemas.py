from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ShelfCreate(BaseModel):
    """Request para criação de prateleira"""
    name: str = Field(..., min_length=1)
    row: str = Field(..., min_length=1, max_length=3)
    number: int = Field(..., ge=1)
    color: Optional[str] = None

    @field_validator("row")
    @classmethod
    def row_must_be_letters(cls, value: str) -> str:
        value = value.strip().upper()
        if not value.isalpha() or not value.isascii():
            raise ValueError("row deve conter apenas letras")
        return value


class PositionResponse(BaseModel):
    """Response de uma posição"""
    id: int
    position_id: str
    level: str
    level_code: str
    position_number: int
    occupied: bool
    material_id: Optional[int] = None

    class Config:
        from_attributes = True


class ShelfResponse(BaseModel):
    """Response de uma prateleira com as suas posições"""
    id: int
    name: str
    row: str
    number: int
    color: str
    created_by: Optional[int] = None
    created_at: datetime
    positions: List[PositionResponse]

    class Config:
        from_attributes = True


class ShelfSummary(BaseModel):
    """Prateleira sem posições, embutida nos materiais"""
    id: int
    name: str
    row: str
    number: int
    color: str

    class Config:
        from_attributes = True
