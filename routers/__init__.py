from .shelves import router as shelves_router
from .materials import router as materials_router
from .inspections import router as inspections_router
from .stats import router as stats_router
from .users import router as users_router

__all__ = ["shelves_router", "materials_router", "inspections_router", "stats_router", "users_router"]
