"""
Registro de prateleiras e das suas posições fixas (3 níveis x 3 posições)
Fonte de verdade da ocupação das posições
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.shelf import Shelf
from models.position import Position
from services.codecs import position_code
from services.errors import DuplicateShelf, NotFound, PositionNotFound, ValidationError
from services.locks import shelf_locks
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

# Nível -> código curto, na ordem de cima para baixo
LEVELS = [("High", "H"), ("Mid", "M"), ("Low", "L")]
POSITIONS_PER_LEVEL = 3


class ShelfService:
    """Gerencia prateleiras e ocupação de posições"""

    @staticmethod
    def build_positions(row: str, number: int) -> List[Position]:
        """Gera as 9 posições de uma prateleira, todas livres"""
        positions = []
        for level, level_code in LEVELS:
            for i in range(1, POSITIONS_PER_LEVEL + 1):
                positions.append(Position(
                    position_id=position_code(row, number, level_code, i),
                    level=level,
                    level_code=level_code,
                    position_number=i,
                    occupied=False,
                    material_id=None
                ))
        return positions

    @staticmethod
    def create_shelf(
        db: Session,
        name: str,
        row: str,
        number: int,
        color: Optional[str] = None,
        created_by: Optional[int] = None
    ) -> Shelf:
        """
        Cria uma prateleira com as 9 posições.
        Falha com DuplicateShelf se (row, number) já existir.
        """
        existing = db.query(Shelf).filter(
            Shelf.row == row,
            Shelf.number == number
        ).first()
        if existing:
            raise DuplicateShelf(f"Prateleira {row}{number} já existe")

        shelf = Shelf(
            name=name,
            row=row,
            number=number,
            created_by=created_by,
            positions=ShelfService.build_positions(row, number)
        )
        if color:
            shelf.color = color

        try:
            db.add(shelf)
            db.commit()
        except IntegrityError:
            # Outra criação concorrente ganhou a constraint uq_shelf_row_number
            db.rollback()
            raise DuplicateShelf(f"Prateleira {row}{number} já existe")
        except Exception:
            db.rollback()
            raise
        db.refresh(shelf)

        logger.info("Shelf %s%s created (id=%s)", row, number, shelf.id)
        return shelf

    @staticmethod
    def list_shelves(db: Session) -> List[Shelf]:
        """Lista prateleiras ordenadas por fila e depois número"""
        return db.query(Shelf).order_by(Shelf.row.asc(), Shelf.number.asc()).all()

    @staticmethod
    def get_shelf(db: Session, shelf_id: int) -> Shelf:
        shelf = db.query(Shelf).filter(Shelf.id == shelf_id).first()
        if not shelf:
            raise NotFound(f"Prateleira {shelf_id} não encontrada")
        return shelf

    @staticmethod
    def delete_shelf(db: Session, shelf_id: int) -> None:
        """
        Remove a prateleira e as suas posições.
        Materiais que apontam para ela não são alterados.
        """
        with shelf_locks.for_shelf(shelf_id):
            shelf = ShelfService.get_shelf(db, shelf_id)
            occupied = sum(1 for p in shelf.positions if p.occupied)
            try:
                db.delete(shelf)
                db.commit()
            except Exception:
                db.rollback()
                raise

        if occupied:
            logger.warning(
                "Shelf %s deleted with %d occupied positions; materials keep a dangling reference",
                shelf_id, occupied
            )
        else:
            logger.info("Shelf %s deleted", shelf_id)

    @staticmethod
    def get_position(db: Session, shelf_id: int, position_id: str) -> Position:
        """Busca a posição pelo identificador dentro da prateleira"""
        shelf = ShelfService.get_shelf(db, shelf_id)

        position = next(
            (p for p in shelf.positions if p.position_id == position_id),
            None
        )
        if position is None:
            raise PositionNotFound(
                f"Posição {position_id} não encontrada na prateleira {shelf.row}{shelf.number}"
            )
        return position

    @staticmethod
    def set_occupancy(
        db: Session,
        shelf_id: int,
        position_id: str,
        occupied: bool,
        material_id: Optional[int]
    ) -> Position:
        """
        Atualiza o flag occupied e a referência ao material juntos.
        Não faz commit: quem chama controla a transação e o lock da prateleira.
        """
        if occupied and material_id is None:
            raise ValidationError("Posição ocupada precisa de material_id")

        position = ShelfService.get_position(db, shelf_id, position_id)
        position.occupied = occupied
        position.material_id = material_id if occupied else None
        db.flush()
        return position
