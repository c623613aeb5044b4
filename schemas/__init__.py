from .shelf_schemas import ShelfCreate, ShelfResponse, PositionResponse, ShelfSummary
from .material_schemas import MaterialCreate, MaterialUpdate, MaterialFilter, MaterialResponse
from .inspection_schemas import InspectionCreate, InspectionResponse, InspectedMaterial
from .stats_schemas import StatsResponse, CategoryCount
from .user_schemas import UserRegister, UserLogin, UserResponse, AuthResponse

__all__ = [
    "ShelfCreate",
    "ShelfResponse",
    "PositionResponse",
    "ShelfSummary",
    "MaterialCreate",
    "MaterialUpdate",
    "MaterialFilter",
    "MaterialResponse",
    "InspectionCreate",
    "InspectionResponse",
    "InspectedMaterial",
    "StatsResponse",
    "CategoryCount",
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
]
