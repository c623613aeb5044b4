"""
Cadastro e autenticação de usuários.
Senhas guardadas apenas como hash bcrypt.
"""
from sqlalchemy.orm import Session
from sqlalchemy import or_
from models.user import User
from services.errors import AuthenticationError, DuplicateUser
import bcrypt
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class AuthService:
    """Colaborador de autenticação, separado do motor de inventário"""

    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    @staticmethod
    def hash_password(password: str) -> str:
        salt = bcrypt.gensalt(rounds=AuthService.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Hash malformado no banco
            return False

    @staticmethod
    def register_user(db: Session, username: str, email: str, password: str) -> User:
        existing = db.query(User).filter(
            or_(User.username == username, User.email == email)
        ).first()
        if existing:
            raise DuplicateUser("Usuário ou email já cadastrado")

        user = User(
            username=username,
            email=email,
            password_hash=AuthService.hash_password(password)
        )
        try:
            db.add(user)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)

        logger.info("User %s registered (id=%s)", username, user.id)
        return user

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> User:
        user = db.query(User).filter(User.username == username).first()
        if not user or not AuthService.verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise AuthenticationError("Credenciais incorretas")
        return user
