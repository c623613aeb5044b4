from pydantic import BaseModel
from typing import List, Optional


class CategoryCount(BaseModel):
    category: str
    count: int


class StatsResponse(BaseModel):
    """Estatísticas agregadas de materiais e prateleiras"""
    total_materials: int
    good_materials: int
    warning_materials: int
    bad_materials: int
    total_shelves: int
    occupied_positions: int
    category_stats: List[CategoryCount]
    condition_average: Optional[float] = None
