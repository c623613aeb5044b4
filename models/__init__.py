from .database import Base, get_db, engine
from .user import User
from .shelf import Shelf
from .position import Position
from .material import Material, MaterialState
from .inspection import Inspection, inspection_materials

__all__ = [
    "Base",
    "get_db",
    "engine",
    "User",
    "Shelf",
    "Position",
    "Material",
    "MaterialState",
    "Inspection",
    "inspection_materials",
]
