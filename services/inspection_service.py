"""
Serviço de inspeções: grava a passagem e propaga a data
para o last_inspection de cada material inspecionado
"""
from sqlalchemy.orm import Session, selectinload
from models.inspection import Inspection
from models.material import Material
from schemas.inspection_schemas import InspectionCreate
from services.errors import ValidationError
from typing import List, Tuple
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class InspectionService:
    """Registra inspeções e faz a cascata de datas"""

    # Ids de materiais inexistentes: ignorados (padrão) ou ValidationError
    STRICT_INSPECTIONS = os.getenv("STRICT_INSPECTIONS", "0") in ("1", "true", "True")

    @staticmethod
    def record_inspection(db: Session, data: InspectionCreate) -> Tuple[Inspection, List[int]]:
        """
        Grava a inspeção e define last_inspection = data.date nos materiais.

        Retorna:
            (inspeção, ids ignorados por não existirem)
        """
        # Remover duplicatas mantendo ordem
        material_ids = list(dict.fromkeys(data.materials))

        materials = db.query(Material).filter(
            Material.id.in_(material_ids)
        ).all() if material_ids else []

        found = {m.id for m in materials}
        skipped = [mid for mid in material_ids if mid not in found]

        if skipped:
            if InspectionService.STRICT_INSPECTIONS:
                raise ValidationError(
                    f"Materiais não encontrados: {', '.join(str(s) for s in skipped)}"
                )
            logger.warning("Inspection by %s skips unknown materials %s", data.inspector, skipped)

        inspection = Inspection(
            date=data.date,
            inspector=data.inspector,
            type=data.type,
            status=data.status,
            result=data.result,
            notes=data.notes,
            report=data.report,
            materials=materials
        )

        try:
            db.add(inspection)
            db.flush()

            # Cascata: a data da inspeção vira a última inspeção de cada material
            for material in materials:
                material.last_inspection = data.date

            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(inspection)
        logger.info(
            "Inspection %s recorded for %d materials (date=%s)",
            inspection.id, len(materials), data.date.isoformat()
        )
        return inspection, skipped

    @staticmethod
    def list_inspections(db: Session) -> List[Inspection]:
        """Lista inspeções com os materiais, da mais recente para a mais antiga"""
        return db.query(Inspection).options(
            selectinload(Inspection.materials)
        ).order_by(Inspection.date.desc(), Inspection.id.desc()).all()
