"""
Serviço do ciclo de vida dos materiais.
Única autoridade que mantém o vínculo material <-> posição da prateleira:
a ocupação é marcada na criação e liberada na remoção.
"""
from sqlalchemy.orm import Session
from models.material import Material
from schemas.material_schemas import MaterialCreate, MaterialUpdate, MaterialFilter
from services.condition_service import classify
from services.errors import NotFound, PositionAlreadyOccupied, PositionNotFound, ValidationError
from services.locks import shelf_locks
from services.shelf_service import ShelfService
from typing import List, Optional
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def escape_like(text: str) -> str:
    """Escapa \\, % e _ para que a busca seja por substring literal"""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MaterialService:
    """Gerencia criação, edição e remoção de materiais"""

    # Posição já ocupada: sobrescreve (padrão) ou falha com PositionAlreadyOccupied
    STRICT_OCCUPANCY = os.getenv("STRICT_OCCUPANCY", "0") in ("1", "true", "True")

    @staticmethod
    def create_material(
        db: Session,
        data: MaterialCreate,
        image: Optional[str] = None
    ) -> Material:
        """
        Cria o material e marca a posição como ocupada por ele.
        Tudo numa transação só: se a prateleira ou a posição não existir,
        nada é gravado.
        """
        fields = data.model_dump(exclude_none=True)
        fields["state"] = classify(data.condition)
        if image:
            fields["image"] = image

        with shelf_locks.for_shelf(data.shelf_id):
            try:
                if data.shelf_id is not None:
                    position = ShelfService.get_position(db, data.shelf_id, data.position)
                    if position.occupied:
                        if MaterialService.STRICT_OCCUPANCY:
                            raise PositionAlreadyOccupied(
                                f"Posição {data.position} já está ocupada pelo material {position.material_id}"
                            )
                        logger.warning(
                            "Position %s on shelf %s already held by material %s; overwriting",
                            data.position, data.shelf_id, position.material_id
                        )

                material = Material(**fields)
                db.add(material)
                db.flush()  # Para obter o id do material

                if material.shelf_id is not None:
                    ShelfService.set_occupancy(
                        db, material.shelf_id, material.position, True, material.id
                    )

                db.commit()
            except Exception:
                db.rollback()
                raise

        db.refresh(material)
        logger.info(
            "Material %s created at %s (state=%s)",
            material.id, material.position, material.state.value
        )
        return material

    @staticmethod
    def get_material(db: Session, material_id: int) -> Material:
        material = db.query(Material).filter(Material.id == material_id).first()
        if not material:
            raise NotFound(f"Material {material_id} não encontrado")
        return material

    @staticmethod
    def list_materials(db: Session, filters: Optional[MaterialFilter] = None) -> List[Material]:
        """
        Lista materiais aplicando os filtros em conjunto:
        nome (substring, sem diferenciar maiúsculas), categoria, estado,
        prateleira e faixa de condição inclusiva.
        Ordem: mais recentes primeiro.
        """
        query = db.query(Material)

        if filters is not None:
            if filters.search:
                query = query.filter(
                    Material.name.ilike(f"%{escape_like(filters.search)}%", escape="\\")
                )
            if filters.category:
                query = query.filter(Material.category == filters.category)
            if filters.state:
                query = query.filter(Material.state == filters.state)
            if filters.shelf:
                query = query.filter(Material.shelf == filters.shelf)
            if filters.min_condition is not None:
                query = query.filter(Material.condition >= filters.min_condition)
            if filters.max_condition is not None:
                query = query.filter(Material.condition <= filters.max_condition)

        return query.order_by(Material.created_at.desc(), Material.id.desc()).all()

    @staticmethod
    def update_material(
        db: Session,
        material_id: int,
        data: MaterialUpdate,
        image: Optional[str] = None
    ) -> Material:
        """
        Aplica os campos enviados sobre o material existente.
        Condição nova recalcula o estado. A ocupação das posições
        não é ressincronizada aqui.
        """
        material = MaterialService.get_material(db, material_id)
        changes = data.model_dump(exclude_unset=True)

        for field in ("name", "category", "entry_date", "condition", "shelf", "position"):
            if field in changes and changes[field] is None:
                raise ValidationError(f"Campo obrigatório {field} não pode ser vazio")

        if changes.get("condition") is not None:
            changes["state"] = classify(changes["condition"])
        if image:
            changes["image"] = image

        moved = (
            ("shelf_id" in changes and changes["shelf_id"] != material.shelf_id)
            or ("position" in changes and changes["position"] != material.position)
        )
        if moved:
            logger.warning(
                "Material %s placement edited without occupancy resync (%s/%s -> %s/%s)",
                material_id, material.shelf_id, material.position,
                changes.get("shelf_id", material.shelf_id), changes.get("position", material.position)
            )

        try:
            for field, value in changes.items():
                setattr(material, field, value)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(material)
        logger.info("Material %s updated (%s)", material_id, ", ".join(sorted(changes)) or "no fields")
        return material

    @staticmethod
    def delete_material(db: Session, material_id: int) -> None:
        """
        Libera a posição ocupada e só depois remove o material.
        Prateleira já apagada é ignorada.
        """
        material = MaterialService.get_material(db, material_id)

        with shelf_locks.for_shelf(material.shelf_id):
            try:
                if material.shelf_id is not None:
                    MaterialService._free_position(db, material)

                db.delete(material)
                db.commit()
            except Exception:
                db.rollback()
                raise

        logger.info("Material %s deleted", material_id)

    @staticmethod
    def _free_position(db: Session, material: Material) -> None:
        """Libera a posição se ela ainda aponta para este material"""
        try:
            position = ShelfService.get_position(db, material.shelf_id, material.position)
        except (NotFound, PositionNotFound):
            logger.warning(
                "Material %s points to missing position %s on shelf %s; nothing to free",
                material.id, material.position, material.shelf_id
            )
            return

        if position.material_id not in (None, material.id):
            # Posição foi sobrescrita por outro material
            logger.warning(
                "Position %s now held by material %s; keeping it occupied",
                position.position_id, position.material_id
            )
            return

        ShelfService.set_occupancy(db, material.shelf_id, material.position, False, None)
