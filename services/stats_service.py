"""
Estatísticas calculadas sob demanda sobre materiais e prateleiras
"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from models.material import Material, MaterialState
from models.position import Position
from models.shelf import Shelf
from typing import Dict, List, Optional


class StatsService:
    """Contagens e distribuições de um instante, sem cache"""

    @staticmethod
    def count_materials(db: Session, state: Optional[MaterialState] = None) -> int:
        query = db.query(func.count(Material.id))
        if state is not None:
            query = query.filter(Material.state == state)
        return query.scalar() or 0

    @staticmethod
    def count_shelves(db: Session) -> int:
        return db.query(func.count(Shelf.id)).scalar() or 0

    @staticmethod
    def count_occupied_positions(db: Session) -> int:
        return db.query(func.count(Position.id)).filter(
            Position.occupied == True  # noqa: E712
        ).scalar() or 0

    @staticmethod
    def category_distribution(db: Session) -> List[Dict]:
        rows = db.query(
            Material.category, func.count(Material.id)
        ).group_by(Material.category).order_by(Material.category).all()
        return [{"category": category, "count": count} for category, count in rows]

    @staticmethod
    def average_condition(db: Session) -> Optional[float]:
        """Média da condição; None quando não há materiais"""
        avg = db.query(func.avg(Material.condition)).scalar()
        return float(avg) if avg is not None else None

    @staticmethod
    def get_stats(db: Session) -> dict:
        return {
            "total_materials": StatsService.count_materials(db),
            "good_materials": StatsService.count_materials(db, MaterialState.GOOD),
            "warning_materials": StatsService.count_materials(db, MaterialState.WARNING),
            "bad_materials": StatsService.count_materials(db, MaterialState.BAD),
            "total_shelves": StatsService.count_shelves(db),
            "occupied_positions": StatsService.count_occupied_positions(db),
            "category_stats": StatsService.category_distribution(db),
            "condition_average": StatsService.average_condition(db),
        }
