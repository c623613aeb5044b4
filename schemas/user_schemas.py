from datetime import datetime
from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Request de cadastro"""
    username: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)


class UserLogin(BaseModel):
    """Request de login"""
    username: str
    password: str


class UserResponse(BaseModel):
    """Response de um usuário (sem hash de senha)"""
    id: int
    username: str
    email: str
    role: str
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
