"""
Rotas para materiais (multipart: campos + imagem opcional)
"""
from datetime import date, datetime
from fastapi import APIRouter, Depends, Form, File, UploadFile, Query
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from models.database import get_db
from models.material import Material, MaterialState
from models.shelf import Shelf
from schemas.material_schemas import MaterialCreate, MaterialUpdate, MaterialFilter, MaterialResponse
from schemas.shelf_schemas import ShelfSummary
from services.errors import InventoryError, ValidationError
from services.material_service import MaterialService
from services.upload_service import store_image, discard_image

router = APIRouter(prefix="/api/materials", tags=["materials"])


def _validation_message(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _to_response(
    db: Session,
    material: Material,
    shelves: Optional[Dict[int, Shelf]] = None
) -> MaterialResponse:
    """Monta o response embutindo a prateleira (se ainda existir)"""
    response = MaterialResponse.model_validate(material)
    if material.shelf_id is not None:
        if shelves is not None:
            shelf = shelves.get(material.shelf_id)
        else:
            shelf = db.query(Shelf).filter(Shelf.id == material.shelf_id).first()
        if shelf:
            response.shelf_detail = ShelfSummary.model_validate(shelf)
    return response


@router.post("", response_model=MaterialResponse, status_code=201)
async def create_material(
    name: str = Form(...),
    category: str = Form(...),
    entry_date: date = Form(...),
    condition: int = Form(...),
    shelf: str = Form(...),
    position: str = Form(...),
    shelf_id: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    next_inspection: Optional[datetime] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    Coloca um material numa posição e marca a posição como ocupada
    """
    try:
        data = MaterialCreate(
            name=name,
            category=category,
            entry_date=entry_date,
            condition=condition,
            shelf=shelf,
            position=position,
            shelf_id=shelf_id,
            description=description,
            notes=notes,
            color=color,
            next_inspection=next_inspection
        )
    except PydanticValidationError as e:
        raise ValidationError(_validation_message(e))

    image_path = await store_image(image)
    try:
        material = MaterialService.create_material(db, data, image_path)
    except InventoryError:
        discard_image(image_path)
        raise
    return _to_response(db, material)


@router.get("", response_model=List[MaterialResponse])
async def list_materials(
    search: Optional[str] = Query(None, description="Busca por nome (sem diferenciar maiúsculas)"),
    category: Optional[str] = Query(None),
    state: Optional[MaterialState] = Query(None),
    shelf: Optional[str] = Query(None),
    min_condition: Optional[int] = Query(None, alias="minCondition"),
    max_condition: Optional[int] = Query(None, alias="maxCondition"),
    db: Session = Depends(get_db)
):
    """
    Lista materiais com filtros combinados, mais recentes primeiro
    """
    filters = MaterialFilter(
        search=search,
        category=category,
        state=state,
        shelf=shelf,
        min_condition=min_condition,
        max_condition=max_condition
    )
    materials = MaterialService.list_materials(db, filters)

    # Buscar prateleiras de uma vez
    shelf_ids = {m.shelf_id for m in materials if m.shelf_id is not None}
    shelves = {
        s.id: s for s in db.query(Shelf).filter(Shelf.id.in_(shelf_ids)).all()
    } if shelf_ids else {}

    return [_to_response(db, m, shelves) for m in materials]


@router.get("/{material_id}", response_model=MaterialResponse)
async def get_material(material_id: int, db: Session = Depends(get_db)):
    material = MaterialService.get_material(db, material_id)
    return _to_response(db, material)


@router.put("/{material_id}", response_model=MaterialResponse)
async def update_material(
    material_id: int,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    entry_date: Optional[date] = Form(None),
    condition: Optional[int] = Form(None),
    shelf: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    shelf_id: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    last_inspection: Optional[datetime] = Form(None),
    next_inspection: Optional[datetime] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    Edita os campos enviados; condição nova recalcula o estado
    """
    sent = {
        "name": name,
        "category": category,
        "entry_date": entry_date,
        "condition": condition,
        "shelf": shelf,
        "position": position,
        "shelf_id": shelf_id,
        "description": description,
        "notes": notes,
        "color": color,
        "last_inspection": last_inspection,
        "next_inspection": next_inspection,
    }
    try:
        data = MaterialUpdate(**{k: v for k, v in sent.items() if v is not None})
    except PydanticValidationError as e:
        raise ValidationError(_validation_message(e))

    # Confere antes de gravar a imagem
    MaterialService.get_material(db, material_id)

    image_path = await store_image(image)
    try:
        material = MaterialService.update_material(db, material_id, data, image_path)
    except InventoryError:
        discard_image(image_path)
        raise
    return _to_response(db, material)


@router.delete("/{material_id}")
async def delete_material(material_id: int, db: Session = Depends(get_db)):
    """
    Libera a posição e remove o material
    """
    MaterialService.delete_material(db, material_id)
    return {"message": "Material removido"}
