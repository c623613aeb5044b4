"""
Rotas de cadastro e login (sem sessão/token)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from models.database import get_db
from schemas.user_schemas import UserRegister, UserLogin, UserResponse, AuthResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(request: UserRegister, db: Session = Depends(get_db)):
    user = AuthService.register_user(db, request.username, request.email, request.password)
    return AuthResponse(message="Usuário criado", user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(request: UserLogin, db: Session = Depends(get_db)):
    user = AuthService.authenticate(db, request.username, request.password)
    return AuthResponse(message="Login realizado", user=UserResponse.model_validate(user))
