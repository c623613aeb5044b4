from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from .database import Base


class User(Base):
    """Usuários da aplicação (apenas hash da senha é guardado)"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, default="user", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
