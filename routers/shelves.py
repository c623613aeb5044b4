"""
Rotas para gerenciamento de prateleiras
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from models.database import get_db
from schemas.shelf_schemas import ShelfCreate, ShelfResponse
from services.shelf_service import ShelfService

router = APIRouter(prefix="/api/shelves", tags=["shelves"])


@router.post("", response_model=ShelfResponse, status_code=201)
async def create_shelf(
    request: ShelfCreate,
    db: Session = Depends(get_db)
):
    """
    Cria prateleira com 9 posições (3 níveis x 3 posições)
    """
    return ShelfService.create_shelf(
        db,
        name=request.name,
        row=request.row,
        number=request.number,
        color=request.color
    )


@router.get("", response_model=List[ShelfResponse])
async def list_shelves(db: Session = Depends(get_db)):
    """Lista prateleiras por fila e número"""
    return ShelfService.list_shelves(db)


@router.get("/{shelf_id}", response_model=ShelfResponse)
async def get_shelf(shelf_id: int, db: Session = Depends(get_db)):
    return ShelfService.get_shelf(db, shelf_id)


@router.delete("/{shelf_id}")
async def delete_shelf(shelf_id: int, db: Session = Depends(get_db)):
    """
    Remove prateleira e posições (materiais não são alterados)
    """
    ShelfService.delete_shelf(db, shelf_id)
    return {"message": "Prateleira removida"}
