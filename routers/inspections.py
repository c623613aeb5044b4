"""
Rotas para inspeções
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from models.database import get_db
from schemas.inspection_schemas import InspectionCreate, InspectionResponse
from services.inspection_service import InspectionService

router = APIRouter(prefix="/api/inspections", tags=["inspections"])


@router.post("", response_model=InspectionResponse, status_code=201)
async def record_inspection(
    request: InspectionCreate,
    db: Session = Depends(get_db)
):
    """
    Registra inspeção e atualiza last_inspection dos materiais
    """
    inspection, skipped = InspectionService.record_inspection(db, request)
    response = InspectionResponse.model_validate(inspection)
    response.skipped_materials = skipped
    return response


@router.get("", response_model=List[InspectionResponse])
async def list_inspections(db: Session = Depends(get_db)):
    """Lista inspeções da mais recente para a mais antiga"""
    return InspectionService.list_inspections(db)
